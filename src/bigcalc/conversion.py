"""Conversion between the decimal form and other positional bases."""

from __future__ import annotations

import logging

from bigcalc.arithmetic import add, multiply
from bigcalc.bigint import DEFAULT_BASE, ZERO, BigInt
from bigcalc.operations import divmod_truncated
from bigcalc.validators import validate_base

logger = logging.getLogger(__name__)


def convert_to_base(value: BigInt, new_base: int | BigInt) -> BigInt:
    """
    Re-encode a non-negative value in another positional base.

    The value is divided by new_base repeatedly and the remainders become
    the digits, least significant first. Negative and zero inputs give
    ZERO in the default base.

    Args:
        value: Value to convert
        new_base: Target radix, at least 2

    Returns:
        The same value held with digits in new_base

    Raises:
        InvalidOperandError: If new_base is below 2
    """
    radix = validate_base(int(BigInt.coerce(new_base)))
    value = value.normalized()

    if value.negative or value.is_zero():
        return ZERO

    divisor = BigInt.from_string(str(radix))
    digits = []
    running = value
    while not running.is_zero():
        running, remainder = divmod_truncated(running, divisor)
        digits.append(int(remainder))

    logger.debug("converted %s to %d digits in base %d", value, len(digits), radix)
    return BigInt(tuple(digits), False, radix)


def _decimal_width(base: int) -> int | None:
    """Return k when base == 10**k, otherwise None."""
    width = 0
    while base % DEFAULT_BASE == 0:
        base //= DEFAULT_BASE
        width += 1
    return width if base == 1 else None


def convert_to_base10(value: BigInt) -> BigInt:
    """
    Rebuild the canonical decimal value from digits in any base.

    Limbs of a power-of-ten base are split into decimal digits directly.
    Other bases are evaluated with Horner's rule on the arithmetic core.
    """
    if value.base == DEFAULT_BASE:
        return value

    width = _decimal_width(value.base)
    if width is not None:
        decimal = []
        for limb in value.digits:
            for _ in range(width):
                limb, digit = divmod(limb, DEFAULT_BASE)
                decimal.append(digit)
        return BigInt(tuple(decimal), value.negative)

    radix = BigInt.from_string(str(value.base))
    result = ZERO
    for digit in reversed(value.digits):
        result = add(multiply(result, radix), BigInt.from_string(str(digit)))
    return -result if value.negative else result

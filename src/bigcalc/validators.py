"""Input validation functions with strict type checking."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bigcalc.exceptions import FormatError, InvalidOperandError

if TYPE_CHECKING:
    from bigcalc.bigint import BigInt

ASCII_DIGITS = frozenset("0123456789")

# Smallest positional base a value can be converted to
MIN_BASE = 2


def validate_numeral(value: Any) -> str:
    """
    Validate a decimal numeral string.

    Args:
        value: The candidate numeral

    Returns:
        The numeral with surrounding whitespace removed

    Raises:
        FormatError: If value is not a string, is empty after trimming,
            or holds anything besides an optional leading '-' and ASCII digits
    """
    if not isinstance(value, str):
        raise FormatError(value, f"Expected str, got {type(value).__name__}")

    text = value.strip()
    if not text:
        raise FormatError(value, "Numeral is empty")

    body = text[1:] if text.startswith("-") else text
    if not body:
        raise FormatError(value, "Numeral has no digits")
    if not ASCII_DIGITS.issuperset(body):
        raise FormatError(value, "Numeral must contain only ASCII digits")

    return text


def validate_native_int(value: Any) -> int:
    """
    Validate that a value is a native integer (bool excluded).

    Raises:
        FormatError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(value, f"Expected int, got {type(value).__name__}")
    return value


def validate_base(value: int) -> int:
    """
    Validate a positional base for conversion.

    Raises:
        InvalidOperandError: If value is below MIN_BASE
    """
    validate_native_int(value)
    if value < MIN_BASE:
        raise InvalidOperandError(value, f"Base must be at least {MIN_BASE}")
    return value


def validate_positive(value: BigInt, reason: str = "Value must be positive") -> BigInt:
    """
    Validate that a value is strictly positive.

    Raises:
        InvalidOperandError: If value is zero or negative
    """
    if value.negative or value.is_zero():
        raise InvalidOperandError(str(value), reason)
    return value


def validate_non_negative(
    value: BigInt, reason: str = "Value must be non-negative"
) -> BigInt:
    """
    Validate that a value is zero or positive.

    Raises:
        InvalidOperandError: If value is negative
    """
    if value.negative:
        raise InvalidOperandError(str(value), reason)
    return value

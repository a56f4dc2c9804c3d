"""Arbitrary-precision signed integer value type."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any

from bigcalc.exceptions import FormatError, OverflowError
from bigcalc.validators import validate_native_int, validate_numeral

# Radix every arithmetic operation works in
DEFAULT_BASE = 10

# Native integers are stored as groups of LIMB_WIDTH decimal digits
LIMB_WIDTH = 9
LIMB_BASE = DEFAULT_BASE**LIMB_WIDTH

# Signed 64-bit range accepted by int_value()
NATIVE_MIN = -(2**63)
NATIVE_MAX = 2**63 - 1


def _strip_leading_zeros(digits: tuple[int, ...]) -> tuple[int, ...]:
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    return digits[:end] or (0,)


def _group_limbs(decimal_digits: tuple[int, ...]) -> tuple[int, ...]:
    """Pack little-endian decimal digits into LIMB_BASE limbs."""
    limbs = []
    for start in range(0, len(decimal_digits), LIMB_WIDTH):
        limb = 0
        for digit in reversed(decimal_digits[start : start + LIMB_WIDTH]):
            limb = limb * DEFAULT_BASE + digit
        limbs.append(limb)
    return tuple(limbs)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class BigInt:
    """
    Immutable arbitrary-precision signed integer.

    Digits are stored least-significant first in positional ``base``.
    Construction always canonicalizes: redundant most-significant zeros
    are dropped and zero is never negative.

    Equality, ordering, hashing and ``str()`` work on the numeric value,
    so values held in different bases compare as the integers they encode.

    Example:
        >>> BigInt.from_string("-00120")
        BigInt('-120')
        >>> BigInt.from_string("7") < 8
        True
    """

    digits: tuple[int, ...]
    negative: bool = False
    base: int = DEFAULT_BASE

    def __post_init__(self) -> None:
        if isinstance(self.base, bool) or not isinstance(self.base, int) or self.base < 2:
            raise FormatError(self.base, "Base must be an integer of at least 2")

        digits = tuple(self.digits)
        for digit in digits:
            if isinstance(digit, bool) or not isinstance(digit, int):
                raise FormatError(digit, f"Digit must be int, got {type(digit).__name__}")
            if not 0 <= digit < self.base:
                raise FormatError(digit, f"Digit out of range for base {self.base}")

        digits = _strip_leading_zeros(digits)
        object.__setattr__(self, "digits", digits)
        object.__setattr__(self, "negative", bool(self.negative) and digits != (0,))

    @classmethod
    def from_string(cls, s: str) -> BigInt:
        """
        Parse a decimal numeral.

        Surrounding whitespace is ignored and an optional leading ``-``
        marks a negative value.

        Raises:
            FormatError: If the numeral is empty or has a non-digit character
        """
        text = validate_numeral(s)
        negative = text.startswith("-")
        body = text[1:] if negative else text
        return cls(tuple(ord(ch) - ord("0") for ch in reversed(body)), negative)

    @classmethod
    def from_int(cls, x: int) -> BigInt:
        """
        Build a value from a native integer.

        Values above one are held in LIMB_BASE limbs. The grouping is exact,
        so the decimal form is always recovered unchanged. The limb form is a
        storage encoding only: arithmetic normalizes back to base 10 first.

        Raises:
            FormatError: If x is not an int
        """
        validate_native_int(x)
        value = cls.from_string(str(x))
        if value.negative or (value.length == 1 and value.digits[0] <= 1):
            return value
        return cls(_group_limbs(value.digits), False, LIMB_BASE)

    @classmethod
    def from_digits(
        cls, digits: Any, base: int = DEFAULT_BASE, negative: bool = False
    ) -> BigInt:
        """Build a value from little-endian digits in the given base."""
        return cls(tuple(digits), negative, base)

    @classmethod
    def coerce(cls, value: Any) -> BigInt:
        """Accept a BigInt, native int or decimal string as a BigInt."""
        if isinstance(value, BigInt):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.from_int(value)

    @property
    def length(self) -> int:
        """Number of significant digits."""
        return len(self.digits)

    def is_zero(self) -> bool:
        return self.digits == (0,)

    def normalized(self) -> BigInt:
        """Return the same value held in DEFAULT_BASE."""
        if self.base == DEFAULT_BASE:
            return self
        # Deferred: conversion is built on the arithmetic that imports this module
        from bigcalc.conversion import convert_to_base10

        return convert_to_base10(self)

    def int_value(self) -> int:
        """
        Return the value as a bounded signed 64-bit integer.

        Raises:
            OverflowError: If the value is outside [NATIVE_MIN, NATIVE_MAX]
        """
        result = int(self)
        if not NATIVE_MIN <= result <= NATIVE_MAX:
            raise OverflowError("int_value", self)
        return result

    def __int__(self) -> int:
        result = 0
        for digit in reversed(self.digits):
            result = result * self.base + digit
        return -result if self.negative else result

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> BigInt:
        return BigInt(self.digits, not self.negative, self.base)

    def __abs__(self) -> BigInt:
        return BigInt(self.digits, False, self.base)

    def __str__(self) -> str:
        value = self.normalized()
        numeral = "".join(str(digit) for digit in reversed(value.digits))
        return f"-{numeral}" if value.negative else numeral

    def __repr__(self) -> str:
        if self.base == DEFAULT_BASE:
            return f"BigInt({str(self)!r})"
        most_significant_first = list(reversed(self.digits))
        return f"BigInt({str(self)!r}, base={self.base}, digits={most_significant_first})"

    def __eq__(self, other: object) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: object) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self) -> int:
        return hash(int(self))


def _comparable(other: object) -> BigInt | None:
    if isinstance(other, BigInt):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return BigInt.from_int(other)
    return None


def compare_magnitude(a: BigInt, b: BigInt) -> int:
    """
    Compare absolute values.

    Returns:
        -1, 0 or 1 as |a| is less than, equal to or greater than |b|
    """
    a, b = a.normalized(), b.normalized()
    if a.length != b.length:
        return -1 if a.length < b.length else 1
    for digit_a, digit_b in zip(reversed(a.digits), reversed(b.digits)):
        if digit_a != digit_b:
            return -1 if digit_a < digit_b else 1
    return 0


def compare(a: BigInt, b: BigInt) -> int:
    """
    Compare signed values the way native integers compare.

    Returns:
        -1, 0 or 1 as a is less than, equal to or greater than b
    """
    if a.negative != b.negative:
        return -1 if a.negative else 1
    order = compare_magnitude(a, b)
    return -order if a.negative else order


ZERO = BigInt((0,))
ONE = BigInt((1,))

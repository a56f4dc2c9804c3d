"""Core digit arithmetic: add, subtract, multiply and halve."""

from collections.abc import Sequence

from bigcalc.bigint import ZERO, BigInt, compare_magnitude


def _add_magnitudes(a: Sequence[int], b: Sequence[int], base: int) -> tuple[int, ...]:
    result = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0) + carry
        carry, digit = divmod(total, base)
        result.append(digit)
    if carry:
        result.append(carry)
    return tuple(result)


def _subtract_magnitudes(
    a: Sequence[int], b: Sequence[int], base: int
) -> tuple[int, ...]:
    """Return |a| - |b| for |a| >= |b|."""
    # Borrows are taken from a private copy, never from the caller's digits
    work = list(a)
    result = []
    for i in range(len(work)):
        subtrahend = b[i] if i < len(b) else 0
        if work[i] < subtrahend:
            j = i + 1
            while work[j] == 0:
                work[j] = base - 1
                j += 1
            work[j] -= 1
            work[i] += base
        result.append(work[i] - subtrahend)
    return tuple(result)


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Add two values.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, ZERO) == a
        - Inverse: add(a, -a) == ZERO

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b
    """
    a, b = a.normalized(), b.normalized()

    if a.negative == b.negative:
        return BigInt(_add_magnitudes(a.digits, b.digits, a.base), a.negative)

    # Mixed signs: larger magnitude minus smaller, keeping the larger one's sign
    if compare_magnitude(a, b) < 0:
        a, b = b, a
    return BigInt(_subtract_magnitudes(a.digits, b.digits, a.base), a.negative)


def subtract(a: BigInt, b: BigInt) -> BigInt:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == ZERO
        - Relationship to add: subtract(a, b) == add(a, -b)

    Args:
        a: Minuend
        b: Subtrahend

    Returns:
        Difference of a and b
    """
    a, b = a.normalized(), b.normalized()

    if a.negative != b.negative:
        return BigInt(_add_magnitudes(a.digits, b.digits, a.base), a.negative)

    if compare_magnitude(a, b) >= 0:
        return BigInt(_subtract_magnitudes(a.digits, b.digits, a.base), a.negative)
    return BigInt(_subtract_magnitudes(b.digits, a.digits, a.base), not a.negative)


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """
    Multiply two values with the schoolbook method.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, ONE) == a
        - Zero: multiply(a, ZERO) == ZERO

    Args:
        a: First factor
        b: Second factor

    Returns:
        Product of a and b
    """
    a, b = a.normalized(), b.normalized()

    if a.is_zero() or b.is_zero():
        return ZERO

    base = a.base
    result = [0] * (a.length + b.length + 1)
    for row, digit_b in enumerate(b.digits):
        carry = 0
        position = row
        for digit_a in a.digits:
            carry, result[position] = divmod(
                digit_a * digit_b + carry + result[position], base
            )
            position += 1
        while carry:
            carry, result[position] = divmod(result[position] + carry, base)
            position += 1

    return BigInt(tuple(result), a.negative != b.negative)


def halve(value: BigInt) -> BigInt:
    """Divide by two, truncating the magnitude and keeping the sign."""
    value = value.normalized()
    result = [0] * value.length
    remainder = 0
    for i in range(value.length - 1, -1, -1):
        result[i], remainder = divmod(remainder * value.base + value.digits[i], 2)
    return BigInt(tuple(result), value.negative)

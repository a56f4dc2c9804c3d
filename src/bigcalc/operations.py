"""Division, modulus, exponentiation and square root on BigInt."""

from __future__ import annotations

from bigcalc.arithmetic import multiply, subtract
from bigcalc.bigint import ONE, ZERO, BigInt, compare_magnitude
from bigcalc.exceptions import DivisionByZeroError
from bigcalc.search import solve
from bigcalc.validators import validate_native_int, validate_non_negative, validate_positive


def _below_power_of_ten(exponent: int) -> BigInt:
    """Return 10**exponent - 1, the largest value with that many digits."""
    return subtract(BigInt((0,) * exponent + (1,)), ONE)


def divide(a: BigInt, b: BigInt) -> BigInt:
    """
    Divide a by b, truncating toward zero.

    Properties:
        - Identity: divide(a, ONE) == a
        - Self-division: divide(a, a) == ONE (for a != 0)
        - Sign: negative exactly when the signs differ and |a| >= |b|

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Truncated quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero
    """
    a, b = a.normalized(), b.normalized()

    if b.is_zero():
        raise DivisionByZeroError(a)

    dividend, divisor = abs(a), abs(b)
    # The quotient has at most len(a) - len(b) + 1 digits
    bound = _below_power_of_ten(max(dividend.length - divisor.length + 1, 1))
    quotient = solve(lambda x: multiply(x, divisor), dividend, high=bound)

    return -quotient if a.negative != b.negative else quotient


def divmod_truncated(a: BigInt, b: BigInt) -> tuple[BigInt, BigInt]:
    """
    Return the truncated quotient and its remainder.

    The remainder takes the sign of the dividend, so
    ``a == q * b + r`` and ``|r| < |b|``.

    Raises:
        DivisionByZeroError: If b is zero
    """
    quotient = divide(a, b)
    return quotient, subtract(a, multiply(b, quotient))


def mod(a: BigInt, b: BigInt) -> BigInt:
    """
    Calculate a modulo b for a strictly positive modulus.

    Properties:
        - Reconstruction: a == divide(a, b) * b + mod(a, b)
        - Range: 0 <= mod(a, b) < b for non-negative a

    Args:
        a: Dividend
        b: Modulus

    Returns:
        a - b * divide(a, b)

    Raises:
        InvalidOperandError: If b is zero or negative
    """
    validate_positive(b.normalized(), "Modulus must be positive")
    return divmod_truncated(a, b)[1]


def power(a: BigInt, exponent: int | BigInt) -> BigInt:
    """
    Raise a to a non-negative integer power by repeated squaring.

    A negative exponent yields ZERO rather than a fraction.

    Properties:
        - Zero exponent: power(a, 0) == ONE
        - Identity: power(a, 1) == a
        - Exponent addition: power(a, m + n) == power(a, m) * power(a, n)

    Args:
        a: The base value
        exponent: Native int, or a BigInt within the signed 64-bit range

    Returns:
        a raised to exponent

    Raises:
        FormatError: If exponent is not an integer
        OverflowError: If a BigInt exponent does not fit 64 bits
    """
    if isinstance(exponent, BigInt):
        exponent = exponent.int_value()
    validate_native_int(exponent)

    if exponent < 0:
        return ZERO

    a = a.normalized()
    # Memo lives for this call only
    cache: dict[int, BigInt] = {0: ONE, 1: a}
    return _power(a, exponent, cache)


def _power(a: BigInt, exponent: int, cache: dict[int, BigInt]) -> BigInt:
    if exponent in cache:
        return cache[exponent]

    half = _power(a, exponent // 2, cache)
    result = multiply(half, half)
    if exponent % 2:
        result = multiply(a, result)

    cache[exponent] = result
    return result


def square_root(a: BigInt) -> BigInt:
    """
    Integer square root, the greatest r with r * r <= a.

    Args:
        a: Non-negative value

    Returns:
        Floor of the square root of a

    Raises:
        InvalidOperandError: If a is negative
    """
    a = a.normalized()
    validate_non_negative(a, "Square root of a negative value")

    if compare_magnitude(a, ONE) <= 0:
        return a

    # The root has at most ceil(len(a) / 2) digits
    bound = _below_power_of_ten((a.length + 1) // 2)
    return solve(lambda x: multiply(x, x), a, high=bound)

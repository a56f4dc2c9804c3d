"""Custom exceptions for the bigcalc package."""

from typing import Any


class BigIntError(Exception):
    """Base exception for all bigcalc errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class FormatError(BigIntError):
    """Raised when a numeral, digit sequence or token is malformed."""

    def __init__(self, value: Any, reason: str = "malformed numeral") -> None:
        super().__init__(reason, value)
        self.reason = reason


class InvalidOperandError(BigIntError):
    """Raised when an operand is outside an operation's domain."""

    def __init__(self, value: Any, reason: str = "invalid operand") -> None:
        super().__init__(reason, value)
        self.reason = reason


class DivisionByZeroError(BigIntError):
    """Raised when attempting to divide by zero."""

    def __init__(self, dividend: Any) -> None:
        super().__init__("Division by zero", str(dividend))
        self.dividend = dividend


class InvalidExpressionError(BigIntError):
    """Raised when an expression is structurally invalid."""

    def __init__(self, reason: str, tokens: Any = None) -> None:
        super().__init__(reason, tokens)
        self.reason = reason
        self.tokens = tokens


class OverflowError(BigIntError):
    """Raised when a value does not fit a bounded native integer."""

    def __init__(self, operation: str, *operands: Any) -> None:
        super().__init__(f"Overflow in {operation}", tuple(str(op) for op in operands))
        self.operation = operation
        self.operands = operands


class CalculatorError(BigIntError):
    """Raised for invalid use of the stateful Calculator."""

"""Calculator class providing stateful BigInt arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bigcalc.arithmetic import add, multiply, subtract
from bigcalc.bigint import ZERO, BigInt
from bigcalc.exceptions import CalculatorError
from bigcalc.expression import evaluate_infix
from bigcalc.operations import divide, mod, power, square_root

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

Operand = BigInt | int | str


@dataclass(frozen=True)
class CalculatorState:
    """Immutable snapshot of one step in the calculator history."""

    value: BigInt
    operation: str
    operands: tuple[BigInt | str, ...]

    def __str__(self) -> str:
        return f"{self.operation}({', '.join(map(str, self.operands))}) = {self.value}"


class Calculator:
    """
    A stateful calculator over arbitrary-precision integers.

    Every operation returns the calculator so calls can be chained, and
    each successful step is recorded for undo. A step that raises leaves
    the value and history as they were.

    Example:
        >>> calc = Calculator(10)
        >>> str(calc.add(5).multiply("2").value)
        '30'
        >>> str(calc.undo().value)
        '15'
    """

    def __init__(self, initial_value: Operand = ZERO) -> None:
        """
        Initialize calculator with a starting value.

        Args:
            initial_value: BigInt, int or decimal string (default ZERO)

        Raises:
            FormatError: If initial_value is not a valid integer
        """
        self._value = BigInt.coerce(initial_value)
        self._history: list[CalculatorState] = []
        self._record_state("init", self._value)

    @property
    def value(self) -> BigInt:
        """Current calculator value."""
        return self._value

    @property
    def history(self) -> list[CalculatorState]:
        """List of all operations performed."""
        return self._history.copy()

    def _record_state(self, operation: str, *operands: BigInt | str) -> None:
        self._history.append(
            CalculatorState(value=self._value, operation=operation, operands=operands)
        )

    def _apply(
        self, operation: Callable[[BigInt, BigInt], BigInt], operand: Operand, op_name: str
    ) -> Calculator:
        """Apply a binary operation and record it."""
        operand = BigInt.coerce(operand)
        self._value = operation(self._value, operand)
        self._record_state(op_name, operand)
        return self

    def add(self, value: Operand) -> Calculator:
        """Add value to current result."""
        return self._apply(add, value, "add")

    def subtract(self, value: Operand) -> Calculator:
        """Subtract value from current result."""
        return self._apply(subtract, value, "subtract")

    def multiply(self, value: Operand) -> Calculator:
        """Multiply current result by value."""
        return self._apply(multiply, value, "multiply")

    def divide(self, value: Operand) -> Calculator:
        """Divide current result by value, truncating toward zero."""
        return self._apply(divide, value, "divide")

    def mod(self, value: Operand) -> Calculator:
        """Replace current result with its remainder modulo a positive value."""
        return self._apply(mod, value, "mod")

    def power(self, exponent: Operand) -> Calculator:
        """Raise current result to a power."""
        return self._apply(power, exponent, "power")

    def sqrt(self) -> Calculator:
        """Replace current result with its integer square root."""
        self._value = square_root(self._value)
        self._record_state("sqrt")
        return self

    def evaluate(self, expression: str | Iterable[str]) -> Calculator:
        """
        Set the value to the result of an infix expression.

        Args:
            expression: Infix string or token sequence

        Raises:
            FormatError, InvalidExpressionError: If the expression is malformed
        """
        tokens = expression if isinstance(expression, str) else list(expression)
        self._value = evaluate_infix(tokens)
        text = tokens if isinstance(tokens, str) else " ".join(tokens)
        self._record_state("evaluate", text)
        return self

    def clear(self) -> Calculator:
        """Reset to zero and clear history."""
        self._value = ZERO
        self._history.clear()
        self._record_state("clear")
        return self

    def set(self, value: Operand) -> Calculator:
        """Set current value directly."""
        self._value = BigInt.coerce(value)
        self._record_state("set", self._value)
        return self

    def undo(self) -> Calculator:
        """
        Undo the last operation.

        Returns:
            Self with previous state restored

        Raises:
            CalculatorError: If no operations to undo
        """
        if len(self._history) <= 1:
            raise CalculatorError("Nothing to undo")

        self._history.pop()
        self._value = self._history[-1].value
        return self

    def copy(self) -> Calculator:
        """Create an independent copy of this calculator."""
        new_calc = Calculator(self._value)
        new_calc._history = self._history.copy()
        return new_calc

    def __repr__(self) -> str:
        return f"Calculator(value={self._value}, history_len={len(self._history)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

"""
Infix and postfix expression evaluation over BigInt.

Expressions are sequences of string tokens: decimal numerals and the
symbols ``+ - * / % ^ ( )``. Every operator is binary; there is no unary
minus, although a numeral token may itself carry a leading ``-``.

Operator precedence follows the rank in ``Operator``: a higher rank binds
tighter, and operators of equal or higher rank already on the stack are
popped first. That makes every operator left-associative, ``^`` included::

    >>> str(evaluate_infix(["2", "^", "3", "^", "2"]))
    '64'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from bigcalc.arithmetic import add, multiply, subtract
from bigcalc.bigint import BigInt
from bigcalc.exceptions import FormatError, InvalidExpressionError
from bigcalc.operations import divide, mod, power
from bigcalc.validators import ASCII_DIGITS

logger = logging.getLogger(__name__)


class Operator(Enum):
    """Operator symbols with their precedence rank."""

    ADD = ("+", 1)
    SUBTRACT = ("-", 2)
    MULTIPLY = ("*", 3)
    DIVIDE = ("/", 4)
    MOD = ("%", 5)
    POWER = ("^", 6)
    LEFT_PAREN = ("(", 7)
    RIGHT_PAREN = (")", 8)

    def __init__(self, symbol: str, rank: int) -> None:
        self.symbol = symbol
        self.rank = rank

    @property
    def is_binary(self) -> bool:
        return self not in (Operator.LEFT_PAREN, Operator.RIGHT_PAREN)

    @classmethod
    def from_symbol(cls, token: str) -> Operator | None:
        """Look up an operator by symbol; None means the token is an operand."""
        return _BY_SYMBOL.get(token)


_BY_SYMBOL = {operator.symbol: operator for operator in Operator}


def apply(operator: Operator, a: BigInt, b: BigInt) -> BigInt:
    """
    Apply a binary operator to a left and a right operand.

    Raises:
        InvalidExpressionError: If operator is a parenthesis
    """
    if operator is Operator.ADD:
        return add(a, b)
    if operator is Operator.SUBTRACT:
        return subtract(a, b)
    if operator is Operator.MULTIPLY:
        return multiply(a, b)
    if operator is Operator.DIVIDE:
        return divide(a, b)
    if operator is Operator.MOD:
        return mod(a, b)
    if operator is Operator.POWER:
        return power(a, b)
    raise InvalidExpressionError(f"{operator.symbol!r} is not a binary operator")


def tokenize(text: str) -> list[str]:
    """
    Split an expression string into numeral and operator tokens.

    Whitespace separates tokens and is otherwise ignored.

    Raises:
        FormatError: On any character that is not a digit, operator or space
    """
    tokens: list[str] = []
    numeral: list[str] = []
    for ch in text:
        if ch in ASCII_DIGITS:
            numeral.append(ch)
            continue
        if numeral:
            tokens.append("".join(numeral))
            numeral = []
        if ch.isspace():
            continue
        if Operator.from_symbol(ch) is None:
            raise FormatError(text, f"Unexpected character {ch!r}")
        tokens.append(ch)
    if numeral:
        tokens.append("".join(numeral))
    return tokens


def _as_tokens(expression: str | Iterable[str]) -> list[str]:
    if isinstance(expression, str):
        return tokenize(expression)
    return list(expression)


def to_postfix(expression: str | Iterable[str]) -> list[str]:
    """
    Convert infix tokens to postfix order with the shunting-yard algorithm.

    Args:
        expression: Infix tokens, or a string to tokenize

    Returns:
        The tokens in postfix order, parentheses removed

    Raises:
        InvalidExpressionError: On unbalanced parentheses
    """
    tokens = _as_tokens(expression)
    output: list[str] = []
    stack: list[Operator] = []

    for token in tokens:
        operator = Operator.from_symbol(token)
        if operator is None:
            output.append(token)
        elif operator is Operator.LEFT_PAREN:
            stack.append(operator)
        elif operator is Operator.RIGHT_PAREN:
            while stack and stack[-1] is not Operator.LEFT_PAREN:
                output.append(stack.pop().symbol)
            if not stack:
                raise InvalidExpressionError("Unmatched ')'", tokens)
            stack.pop()
        else:
            while stack and stack[-1].is_binary and stack[-1].rank >= operator.rank:
                output.append(stack.pop().symbol)
            stack.append(operator)

    while stack:
        operator = stack.pop()
        if operator is Operator.LEFT_PAREN:
            raise InvalidExpressionError("Unmatched '('", tokens)
        output.append(operator.symbol)

    logger.debug("postfix form: %s", " ".join(output))
    return output


def evaluate_postfix(expression: str | Iterable[str]) -> BigInt:
    """
    Evaluate a postfix expression.

    Args:
        expression: Postfix tokens, or a string to tokenize

    Returns:
        The single value the expression reduces to

    Raises:
        FormatError: If an operand is not a valid numeral
        InvalidExpressionError: If an operator lacks operands or the
            expression does not reduce to exactly one value
        DivisionByZeroError, InvalidOperandError: From the operations
    """
    tokens = _as_tokens(expression)
    stack: list[BigInt] = []

    for token in tokens:
        operator = Operator.from_symbol(token)
        if operator is None:
            stack.append(BigInt.from_string(token))
            continue
        if not operator.is_binary:
            raise InvalidExpressionError("Parenthesis in postfix expression", tokens)
        if len(stack) < 2:
            raise InvalidExpressionError(f"Operator {token!r} needs two operands", tokens)

        right = stack.pop()
        left = stack.pop()
        result = apply(operator, left, right)
        logger.debug("%s %s %s = %s", left, operator.symbol, right, result)
        stack.append(result)

    if len(stack) != 1:
        raise InvalidExpressionError(
            f"Expression left {len(stack)} values instead of one", tokens
        )
    return stack[0]


def evaluate_infix(expression: str | Iterable[str]) -> BigInt:
    """Evaluate an infix expression via its postfix form."""
    return evaluate_postfix(to_postfix(expression))

"""
Arbitrary-precision integer arithmetic and expression evaluation.

This package provides:
- An immutable BigInt value type with exact decimal round-tripping
- Add, subtract, multiply, divide, mod, power and integer square root
- Conversion to and from any positional base
- Infix and postfix expression evaluation built on the above
- A stateful Calculator with history and undo
"""

from bigcalc.arithmetic import add, halve, multiply, subtract
from bigcalc.bigint import ONE, ZERO, BigInt, compare, compare_magnitude
from bigcalc.conversion import convert_to_base, convert_to_base10
from bigcalc.core import Calculator, CalculatorState
from bigcalc.exceptions import (
    BigIntError,
    CalculatorError,
    DivisionByZeroError,
    FormatError,
    InvalidExpressionError,
    InvalidOperandError,
    OverflowError,
)
from bigcalc.expression import (
    Operator,
    apply,
    evaluate_infix,
    evaluate_postfix,
    to_postfix,
    tokenize,
)
from bigcalc.operations import divide, divmod_truncated, mod, power, square_root
from bigcalc.search import solve
from bigcalc.validators import (
    validate_base,
    validate_native_int,
    validate_non_negative,
    validate_numeral,
    validate_positive,
)

__all__ = [
    "ONE",
    "ZERO",
    "BigInt",
    "BigIntError",
    "Calculator",
    "CalculatorError",
    "CalculatorState",
    "DivisionByZeroError",
    "FormatError",
    "InvalidExpressionError",
    "InvalidOperandError",
    "Operator",
    "OverflowError",
    "add",
    "apply",
    "compare",
    "compare_magnitude",
    "convert_to_base",
    "convert_to_base10",
    "divide",
    "divmod_truncated",
    "evaluate_infix",
    "evaluate_postfix",
    "halve",
    "mod",
    "multiply",
    "power",
    "solve",
    "square_root",
    "subtract",
    "to_postfix",
    "tokenize",
    "validate_base",
    "validate_native_int",
    "validate_non_negative",
    "validate_numeral",
    "validate_positive",
]

__version__ = "0.1.0"

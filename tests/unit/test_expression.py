"""Unit tests for the operator table, shunting-yard and evaluators."""

import pytest

from bigcalc import (
    BigInt,
    DivisionByZeroError,
    FormatError,
    InvalidExpressionError,
    InvalidOperandError,
    Operator,
    apply,
    evaluate_infix,
    evaluate_postfix,
    to_postfix,
    tokenize,
)

# Postfix form of 2 ^ 3 / ( 4 * 2 ) - 7
POSTFIX_SAMPLE = ["2", "3", "^", "4", "2", "*", "/", "7", "-"]
INFIX_SAMPLE = ["2", "^", "3", "/", "(", "4", "*", "2", ")", "-", "7"]


class TestOperator:
    """Tests for the precedence table and dispatcher."""

    def test_ranks(self):
        ranks = {op.symbol: op.rank for op in Operator}
        assert ranks == {"+": 1, "-": 2, "*": 3, "/": 4, "%": 5, "^": 6, "(": 7, ")": 8}

    def test_from_symbol(self):
        assert Operator.from_symbol("^") is Operator.POWER
        assert Operator.from_symbol("12") is None

    def test_parentheses_are_not_binary(self):
        assert not Operator.LEFT_PAREN.is_binary
        assert not Operator.RIGHT_PAREN.is_binary
        assert Operator.MOD.is_binary

    @pytest.mark.parametrize(
        ("operator", "expected"),
        [
            (Operator.ADD, "29"),
            (Operator.SUBTRACT, "25"),
            (Operator.MULTIPLY, "54"),
            (Operator.DIVIDE, "13"),
            (Operator.MOD, "1"),
            (Operator.POWER, "729"),
        ],
    )
    def test_apply(self, operator, expected):
        a, b = BigInt.from_string("27"), BigInt.from_string("2")
        assert str(apply(operator, a, b)) == expected

    def test_apply_rejects_parenthesis(self):
        with pytest.raises(InvalidExpressionError):
            apply(Operator.LEFT_PAREN, BigInt.from_string("1"), BigInt.from_string("2"))


class TestTokenize:
    """Tests for tokenize."""

    def test_splits_numbers_and_operators(self):
        assert tokenize("12+(3*45)") == ["12", "+", "(", "3", "*", "45", ")"]

    def test_ignores_whitespace(self):
        assert tokenize("  2 ^ 10 ") == ["2", "^", "10"]

    def test_whitespace_separates_numerals(self):
        assert tokenize("2 3 +") == ["2", "3", "+"]

    def test_minus_is_always_an_operator(self):
        assert tokenize("-5") == ["-", "5"]

    def test_rejects_unknown_character(self):
        with pytest.raises(FormatError):
            tokenize("2 + x")


class TestToPostfix:
    """Tests for the shunting-yard conversion."""

    def test_simple(self):
        assert to_postfix(["2", "+", "3"]) == ["2", "3", "+"]

    def test_parentheses_are_dropped(self):
        assert to_postfix(INFIX_SAMPLE) == POSTFIX_SAMPLE

    def test_equal_rank_pops_left_to_right(self):
        assert to_postfix(["8", "-", "3", "-", "2"]) == ["8", "3", "-", "2", "-"]

    def test_power_is_left_associative(self):
        assert to_postfix(["2", "^", "3", "^", "2"]) == ["2", "3", "^", "2", "^"]

    def test_higher_rank_stays_on_stack(self):
        assert to_postfix(["1", "+", "2", "*", "3"]) == ["1", "2", "3", "*", "+"]

    def test_accepts_string(self):
        assert to_postfix("(1 + 2) * 3") == ["1", "2", "+", "3", "*"]

    def test_accepts_generator(self):
        assert to_postfix(token for token in ["4", "/", "2"]) == ["4", "2", "/"]

    def test_unmatched_right_paren(self):
        with pytest.raises(InvalidExpressionError):
            to_postfix(["1", "+", "2", ")"])

    def test_unmatched_left_paren(self):
        with pytest.raises(InvalidExpressionError):
            to_postfix(["(", "1", "+", "2"])


class TestEvaluatePostfix:
    """Tests for evaluate_postfix."""

    def test_addition(self):
        assert evaluate_postfix(["2", "3", "+"]) == 5

    def test_sample(self):
        assert str(evaluate_postfix(POSTFIX_SAMPLE)) == "-6"

    def test_right_operand_is_popped_first(self):
        assert str(evaluate_postfix(["10", "4", "-"])) == "6"
        assert str(evaluate_postfix(["10", "4", "/"])) == "2"

    def test_negative_numeral_operand(self):
        assert str(evaluate_postfix(["-5", "3", "*"])) == "-15"

    def test_big_operands(self):
        result = evaluate_postfix(["123456789012345678901234567890", "2", "^"])
        assert str(result) == str(123456789012345678901234567890**2)

    def test_single_operand(self):
        assert evaluate_postfix(["42"]) == 42

    def test_underflow(self):
        with pytest.raises(InvalidExpressionError):
            evaluate_postfix(["2", "+"])

    def test_too_many_values(self):
        with pytest.raises(InvalidExpressionError):
            evaluate_postfix(["2", "3"])

    def test_empty(self):
        with pytest.raises(InvalidExpressionError):
            evaluate_postfix([])

    def test_malformed_numeral(self):
        with pytest.raises(FormatError):
            evaluate_postfix(["2", "x", "+"])

    def test_parenthesis_rejected(self):
        with pytest.raises(InvalidExpressionError):
            evaluate_postfix(["2", "(", "+"])

    def test_division_by_zero_propagates(self):
        with pytest.raises(DivisionByZeroError):
            evaluate_postfix(["1", "0", "/", "5", "+"])

    def test_bad_modulus_propagates(self):
        with pytest.raises(InvalidOperandError):
            evaluate_postfix(["7", "0", "%"])


class TestEvaluateInfix:
    """Tests for evaluate_infix."""

    def test_sample(self):
        assert str(evaluate_infix(INFIX_SAMPLE)) == "-6"

    def test_postfix_ordered_tokens_follow_shunting_yard(self):
        # Tokens become 2 3 4 2 ^ 7 / * - under the precedence table
        assert str(evaluate_infix(POSTFIX_SAMPLE)) == "-4"

    def test_power_left_associative(self):
        assert str(evaluate_infix("2 ^ 3 ^ 2")) == "64"

    def test_higher_rank_operator_binds_tighter(self):
        # % outranks *, so this is 2 * (3 % 4)
        assert str(evaluate_infix("2 * 3 % 4")) == "6"

    def test_parentheses(self):
        assert str(evaluate_infix("(1 + 2) * (3 + 4)")) == "21"

    def test_subtraction_chain(self):
        assert str(evaluate_infix("10 - 2 - 3")) == "5"

    def test_result_can_be_negative(self):
        assert str(evaluate_infix("3 - 10")) == "-7"

    def test_division_by_zero_aborts(self):
        with pytest.raises(DivisionByZeroError):
            evaluate_infix("1 + 2 / 0")

    def test_unmatched_paren(self):
        with pytest.raises(InvalidExpressionError):
            evaluate_infix(["1", ")"])

    def test_leading_minus_is_binary(self):
        with pytest.raises(InvalidExpressionError):
            evaluate_infix("-5")

"""
Tests for the recursive-descent parser.
"""

import pytest

from CalcEngine import Lexer, Parser
from CalcEngine import error as E
from CalcEngine.Parser import BinOp, Constant, FunctionCall, Number, Percent, UnaryOp


def parse(text):
    return Parser.parse(Lexer.tokenize(text))


class TestPrecedence:
    """Operator precedence and associativity."""

    def test_multiplication_before_addition(self):
        assert parse("2 + 3 * 4") == BinOp(Number(2), "+", BinOp(Number(3), "*", Number(4)))

    def test_left_associative_subtraction(self):
        assert parse("8 - 3 - 2") == BinOp(BinOp(Number(8), "-", Number(3)), "-", Number(2))

    def test_power_is_right_associative(self):
        assert parse("2 ** 3 ** 2") == BinOp(Number(2), "**", BinOp(Number(3), "**", Number(2)))

    def test_unary_minus_is_looser_than_power(self):
        # -2 ** 2 is -(2 ** 2)
        assert parse("-2 ** 2") == UnaryOp("-", BinOp(Number(2), "**", Number(2)))

    def test_signed_exponent(self):
        assert parse("2 ** -1") == BinOp(Number(2), "**", UnaryOp("-", Number(1)))

    def test_power_before_multiplication(self):
        assert parse("2 * 3 ** 2") == BinOp(Number(2), "*", BinOp(Number(3), "**", Number(2)))

    def test_parentheses_override_precedence(self):
        assert parse("(2 + 3) * 4") == BinOp(BinOp(Number(2), "+", Number(3)), "*", Number(4))

    def test_percent_binds_to_its_operand(self):
        assert parse("200 * 10%") == BinOp(Number(200), "*", Percent(Number(10)))

    def test_percent_is_tighter_than_power(self):
        assert parse("2 ** 50%") == BinOp(Number(2), "**", Percent(Number(50)))

    def test_repeated_percent(self):
        assert parse("5%%") == Percent(Percent(Number(5)))


class TestPrimaries:
    """Constants and function calls."""

    def test_constant(self):
        assert parse("PI") == Constant("PI")

    def test_function_call(self):
        assert parse("sqrt(16)") == FunctionCall("sqrt", Number(16))

    def test_nested_function_call(self):
        assert parse("abs(sin(-1))") == FunctionCall("abs", FunctionCall("sin", UnaryOp("-", Number(1))))

    def test_deep_nesting(self):
        tree = parse("(" * 40 + "1" + ")" * 40)
        assert tree == Number(1)

    def test_empty_input(self):
        assert parse("") is None
        assert parse("   ") is None


class TestErrors:
    """Malformed input."""

    def test_dangling_operator(self):
        with pytest.raises(E.UnexpectedEnd):
            parse("2 +")

    def test_leading_binary_operator(self):
        with pytest.raises(E.UnexpectedToken):
            parse("* 3")

    def test_missing_closing_paren(self):
        with pytest.raises(E.UnbalancedParens):
            parse("(1 + 2")

    def test_stray_closing_paren(self):
        with pytest.raises(E.UnbalancedParens):
            parse("1 + 2)")

    def test_empty_parentheses(self):
        with pytest.raises(E.UnexpectedToken):
            parse("()")

    def test_function_without_parenthesis(self):
        with pytest.raises(E.ExpectedOpenParen):
            parse("sqrt 16")

    def test_bare_function_name(self):
        with pytest.raises(E.ExpectedOpenParen):
            parse("sin")

    def test_trailing_tokens(self):
        with pytest.raises(E.UnexpectedToken):
            parse("2 3")

    def test_two_arguments_are_rejected(self):
        with pytest.raises(E.UnexpectedToken):
            parse("sqrt(4, 5)")

    def test_unknown_identifier(self):
        with pytest.raises(E.UnknownIdentifier) as info:
            parse("foo(2)")
        assert info.value.code == "3031"

    def test_all_parse_errors_share_a_base(self):
        with pytest.raises(E.ParseError):
            parse("(")

"""Tests for end-to-end expression evaluation."""

import math

import pytest

from calc import (
    Calc, CalcConvertError, CalcError, CalcErrorKind, CalcEvalError, CalcLexError, evaluate
)


class TestCalcEvaluate:
    """Test evaluation through the full pipeline."""

    @pytest.mark.parametrize("expression,expected", [
        ("2 + 3 * (4 - 1) ^ 2", 29.0),
        ("-5 + 3", -2.0),
        ("2 ^ 3 ^ 2", 512.0),
        ("(2 ^ 3) ^ 2", 64.0),
        ("50% + 1", 1.5),
        ("50%", 0.5),
        ("10 - 4 - 3", 3.0),
        ("100 / 10 / 5", 2.0),
        ("2 * (3 + 4)", 14.0),
        ("((((7))))", 7.0),
        ("-(2 + 3)", -5.0),
        ("0.1 + 0.2", 0.1 + 0.2),
        ("1.5 * 4", 6.0),
        ("7 / 2", 3.5),
        ("  42  ", 42.0),
    ])
    def test_expressions(self, calc, expression, expected):
        """Test that expressions follow the stated precedence, associativity and unary rules."""
        assert calc.evaluate(expression) == pytest.approx(expected)

    def test_unary_minus_binds_loosely_with_power(self, calc):
        """Test that -2 ^ 2 means 0 - 2 ^ 2."""
        assert calc.evaluate("-2 ^ 2") == -4.0

    @pytest.mark.parametrize("expression,expected", [
        ("2 * -3", -3.0),
        ("3 - -2", 1.0),
        ("2 ^ -1", 0.0),
        ("2 * (-3)", -6.0),
        ("3 - (-2)", 5.0),
        ("2 ^ (-1)", 0.5),
    ])
    def test_unary_minus_after_operator(self, calc, expression, expected):
        """Test that a unary minus after an operator is plain subtraction from zero."""
        assert calc.evaluate(expression) == pytest.approx(expected)

    def test_percent_is_unary_with_multiplicative_precedence(self, calc):
        """Test percent applying to the single value before it."""
        assert calc.evaluate("200 * 50%") == pytest.approx(100.0)
        assert calc.evaluate("10 + 50%") == pytest.approx(10.5)

    def test_special_power_results(self, calc):
        """Test that exponentiation edge cases produce special floats."""
        assert math.isnan(calc.evaluate("(-8) ^ 0.5"))
        assert calc.evaluate("10 ^ 400") == math.inf

    def test_module_level_evaluate(self):
        """Test the convenience function."""
        assert evaluate("1 + 1") == 2.0

    @pytest.mark.parametrize("expression", ["2 + 3 * (4 - 1) ^ 2", "0.1 + 0.2", "(-8) ^ 0.5"])
    def test_evaluation_is_repeatable(self, calc, expression):
        """Test that the same text always yields a bitwise-identical result."""
        first = calc.evaluate(expression)
        second = Calc().evaluate(expression)
        third = calc.evaluate(expression)
        assert repr(first) == repr(second) == repr(third)


class TestCalcErrors:
    """Test failures from each pipeline stage."""

    def test_division_by_zero(self, calc):
        """Test that division by zero fails at the evaluator."""
        with pytest.raises(CalcEvalError) as exc_info:
            calc.evaluate("10 / 0")

        assert exc_info.value.kind == CalcErrorKind.DIVISION_BY_ZERO

    def test_division_by_zero_expression(self, calc):
        """Test that a divisor computing to zero fails too."""
        with pytest.raises(CalcEvalError, match="Division by zero"):
            calc.evaluate("1 / (2 - 2)")

    @pytest.mark.parametrize("expression", ["(1 + 2", "1 + 2)", "((1)", ")1(", "2 * (3 + 4))"])
    def test_mismatched_parentheses(self, calc, expression):
        """Test that unbalanced parentheses fail at the converter."""
        with pytest.raises(CalcConvertError) as exc_info:
            calc.evaluate(expression)

        assert exc_info.value.kind == CalcErrorKind.MISMATCHED_PARENTHESES

    def test_unary_plus_is_not_supported(self, calc):
        """Test that only minus is unary, so a doubled plus lacks operands."""
        for expression in ("1 + + 2", "1 + +2", "+2"):
            with pytest.raises(CalcEvalError) as exc_info:
                calc.evaluate(expression)

            assert exc_info.value.kind == CalcErrorKind.INSUFFICIENT_OPERANDS

    @pytest.mark.parametrize("expression", ["", "   ", "()", "1 2"])
    def test_malformed_expression(self, calc, expression):
        """Test inputs that leave other than one value on the stack."""
        with pytest.raises(CalcEvalError) as exc_info:
            calc.evaluate(expression)

        assert exc_info.value.kind == CalcErrorKind.MALFORMED_EXPRESSION

    def test_invalid_number(self, calc):
        """Test that malformed literals fail at the lexer."""
        with pytest.raises(CalcLexError) as exc_info:
            calc.evaluate("1.2.3 + 4")

        assert exc_info.value.kind == CalcErrorKind.INVALID_NUMBER

    def test_invalid_character(self, calc):
        """Test that unknown characters fail at the lexer."""
        with pytest.raises(CalcLexError, match="Invalid character: 'x'"):
            calc.evaluate("2 x 3")

    def test_lex_error_short_circuits(self, calc):
        """Test that the first failing stage wins."""
        with pytest.raises(CalcLexError):
            calc.evaluate("(1 / 0 $")

    def test_all_errors_share_base_class(self, calc):
        """Test that callers can catch every failure with one base class."""
        for expression in ("1 $", "(1", "1 / 0"):
            with pytest.raises(CalcError):
                calc.evaluate(expression)

    def test_repeated_errors_classify_identically(self, calc):
        """Test that a failing expression fails the same way each time."""
        kinds = set()
        for _ in range(3):
            with pytest.raises(CalcError) as exc_info:
                calc.evaluate("1 + + 2")

            kinds.add((type(exc_info.value), exc_info.value.kind))

        assert len(kinds) == 1

    def test_detailed_message(self, calc):
        """Test the multi-line detailed error text."""
        with pytest.raises(CalcLexError) as exc_info:
            calc.evaluate("1 + @")

        text = str(exc_info.value)
        assert text.startswith("Error: Invalid character: '@'")
        assert "Position: 4" in text
        assert "Suggestion:" in text

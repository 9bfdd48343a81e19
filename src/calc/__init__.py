"""Calc - an infix arithmetic expression evaluator."""

# Main API
from calc.calc import Calc, evaluate

# Exceptions
from calc.calc_error import CalcError, CalcErrorKind, CalcLexError, CalcConvertError, CalcEvalError

# Lower-level components
from calc.calc_token import CalcToken, CalcTokenType
from calc.calc_operator import OPERATORS, precedence, is_right_associative
from calc.calc_lexer import CalcLexer
from calc.calc_postfix_converter import CalcPostfixConverter
from calc.calc_postfix_evaluator import CalcPostfixEvaluator, real_power


__all__ = [
    # Main API
    "Calc", "evaluate",

    # Exceptions
    "CalcError", "CalcErrorKind", "CalcLexError", "CalcConvertError", "CalcEvalError",

    # Lower-level components
    "CalcToken", "CalcTokenType", "OPERATORS", "precedence", "is_right_associative",
    "CalcLexer", "CalcPostfixConverter", "CalcPostfixEvaluator", "real_power"
]

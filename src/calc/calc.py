"""Main calculator class composing the lexer, converter and evaluator."""

from calc.calc_lexer import CalcLexer
from calc.calc_postfix_converter import CalcPostfixConverter
from calc.calc_postfix_evaluator import CalcPostfixEvaluator


class Calc:
    """
    Arithmetic expression evaluator.

    Expressions use infix notation with `+ - * / ^ %`, decimal numbers and
    parentheses. `^` is right-associative and binds tightest, `* / %` come
    next and `+ -` bind loosest. A leading `-` (or one following an operator
    or `(`) negates, and `%` divides the value before it by 100.

    Every call is independent: no state is kept between evaluations.
    """

    def __init__(self) -> None:
        """Initialize the pipeline stages."""
        self._lexer = CalcLexer()
        self._converter = CalcPostfixConverter()
        self._evaluator = CalcPostfixEvaluator()

    def evaluate(self, expression: str) -> float:
        """
        Evaluate an expression.

        Args:
            expression: Expression string to evaluate

        Returns:
            The numeric result

        Raises:
            CalcLexError: If the text contains an invalid number or character
            CalcConvertError: If the parentheses do not balance
            CalcEvalError: If the expression cannot be evaluated
        """
        tokens = self._lexer.lex(expression)
        postfix = self._converter.convert(tokens)
        return self._evaluator.evaluate(postfix)


def evaluate(expression: str) -> float:
    """Evaluate an expression with a fresh calculator."""
    return Calc().evaluate(expression)

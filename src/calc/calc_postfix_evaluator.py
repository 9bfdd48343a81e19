"""Stack-based evaluation of postfix token sequences."""

import math
import operator
from typing import Callable, Dict, List

from calc.calc_error import CalcErrorKind, CalcEvalError
from calc.calc_token import CalcToken, CalcTokenType


def _is_odd_integer(value: float) -> bool:
    """Check if a float holds an odd integer."""
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def real_power(base: float, exponent: float) -> float:
    """
    Raise base to exponent with IEEE semantics.

    `math.pow` raises where IEEE `pow` returns NaN or an infinity; this maps
    those cases back to their IEEE results instead of failing.

    Args:
        base: Base value
        exponent: Exponent value

    Returns:
        The real power, possibly NaN or +/-Infinity
    """
    try:
        return math.pow(base, exponent)

    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf

        return math.inf

    except ValueError:
        # Zero to a negative power, or a negative base to a fractional power
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)

            return math.inf

        return math.nan


class CalcPostfixEvaluator:
    """Evaluates postfix token sequences with a value stack."""

    BINARY_OPERATORS: Dict[str, Callable[[float, float], float]] = {
        '+': operator.add,
        '-': operator.sub,
        '*': operator.mul,
        '/': operator.truediv,
        '^': real_power,
    }

    def evaluate(self, tokens: List[CalcToken]) -> float:
        """
        Evaluate a postfix token sequence.

        Args:
            tokens: Tokens in postfix order

        Returns:
            The single value left on the stack

        Raises:
            CalcEvalError: If the sequence cannot be reduced to one value
        """
        stack: List[float] = []

        for token in tokens:
            if token.type == CalcTokenType.NUMBER:
                stack.append(float(token.value))
                continue

            if token.type != CalcTokenType.OPERATOR:
                raise CalcEvalError(
                    kind=CalcErrorKind.MALFORMED_POSTFIX,
                    message="Invalid token in postfix expression",
                    position=token.position,
                    received=f"Grouping token: {token.value}",
                    expected="Numbers and operators only"
                )

            symbol = str(token.value)

            # Percent is unary: it scales the single preceding value
            if symbol == '%':
                if not stack:
                    raise self._insufficient_operands(token)

                stack.append(stack.pop() / 100.0)
                continue

            if len(stack) < 2:
                raise self._insufficient_operands(token)

            b = stack.pop()
            a = stack.pop()
            stack.append(self._apply(token, a, b))

        if len(stack) != 1:
            raise CalcEvalError(
                kind=CalcErrorKind.MALFORMED_EXPRESSION,
                message="Invalid expression",
                received=f"{len(stack)} values left after evaluation",
                expected="Exactly one value"
            )

        return stack[0]

    def _apply(self, token: CalcToken, a: float, b: float) -> float:
        """Apply a binary operator to its two operands."""
        symbol = str(token.value)
        op_func = self.BINARY_OPERATORS.get(symbol)
        if op_func is None:
            raise CalcEvalError(
                kind=CalcErrorKind.UNKNOWN_OPERATOR,
                message=f"Unknown operator: {symbol}",
                position=token.position,
                expected="One of + - * / ^ %"
            )

        if symbol == '/' and b == 0.0:
            raise CalcEvalError(
                kind=CalcErrorKind.DIVISION_BY_ZERO,
                message="Division by zero",
                position=token.position
            )

        return op_func(a, b)

    def _insufficient_operands(self, token: CalcToken) -> CalcEvalError:
        """Build the error for an operator missing operands."""
        if token.value == '%':
            message = "Not enough operands for %"

        else:
            message = "Not enough operands"

        return CalcEvalError(
            kind=CalcErrorKind.INSUFFICIENT_OPERANDS,
            message=message,
            position=token.position,
            received=f"Operator '{token.value}' with too few values before it",
            suggestion="Only '-' may be used as a prefix (unary) operator"
        )

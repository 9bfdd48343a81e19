"""Infix to postfix conversion using the shunting-yard algorithm."""

from typing import List

from calc.calc_error import CalcConvertError, CalcErrorKind
from calc.calc_operator import is_right_associative, precedence
from calc.calc_token import CalcToken, CalcTokenType


class CalcPostfixConverter:
    """Reorders infix token sequences into postfix (Reverse Polish) order."""

    def convert(self, tokens: List[CalcToken]) -> List[CalcToken]:
        """
        Convert an infix token sequence to postfix order.

        Args:
            tokens: Infix tokens, with unary minus already normalized

        Returns:
            New token sequence in postfix order

        Raises:
            CalcConvertError: If the parentheses do not balance
        """
        output: List[CalcToken] = []
        stack: List[CalcToken] = []
        orphan_rparen: CalcToken | None = None

        for token in tokens:
            if token.type == CalcTokenType.NUMBER:
                output.append(token)
                continue

            if token.type == CalcTokenType.OPERATOR:
                self._pop_bound_operators(str(token.value), stack, output)
                stack.append(token)
                continue

            if token.type == CalcTokenType.LPAREN:
                stack.append(token)
                continue

            # Right parenthesis: unwind to the matching left parenthesis
            matched = False
            while stack:
                top = stack.pop()
                if top.type == CalcTokenType.LPAREN:
                    matched = True
                    break

                output.append(top)

            if not matched and orphan_rparen is None:
                orphan_rparen = token

        while stack:
            top = stack.pop()
            if top.is_paren():
                raise self._mismatched(top)

            output.append(top)

        if orphan_rparen is not None:
            raise self._mismatched(orphan_rparen)

        return output

    def _pop_bound_operators(self, op1: str, stack: List[CalcToken], output: List[CalcToken]) -> None:
        """Move operators that bind at least as tightly as op1 from the stack to the output."""
        while stack and stack[-1].type == CalcTokenType.OPERATOR:
            op2 = str(stack[-1].value)
            p1 = precedence(op1)
            p2 = precedence(op2)
            if p1 < p2 or (p1 == p2 and not is_right_associative(op1)):
                output.append(stack.pop())
                continue

            break

    def _mismatched(self, token: CalcToken) -> CalcConvertError:
        """Build the error for an unbalanced parenthesis."""
        if token.type == CalcTokenType.LPAREN:
            received = "'(' that is never closed"
            suggestion = "Add a closing ')'"

        else:
            received = "')' without a matching '('"
            suggestion = "Remove the ')' or add an opening '('"

        return CalcConvertError(
            kind=CalcErrorKind.MISMATCHED_PARENTHESES,
            message="Mismatched parentheses",
            position=token.position,
            received=received,
            suggestion=suggestion
        )

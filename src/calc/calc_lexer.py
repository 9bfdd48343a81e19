"""Lexer for calculator expressions with detailed error messages."""

import math
from typing import List

from calc.calc_error import CalcErrorKind, CalcLexError
from calc.calc_operator import OPERATORS
from calc.calc_token import CalcToken, CalcTokenType


class CalcLexer:
    """Lexes calculator expressions into tokens with detailed error messages."""

    def lex(self, expression: str) -> List[CalcToken]:
        """
        Lex a calculator expression with detailed error reporting.

        Unary minus is normalized before the tokens are returned, so every `-`
        in the result is a binary subtraction.

        Args:
            expression: The expression string to lex

        Returns:
            List of tokens

        Raises:
            CalcLexError: If tokenization fails with detailed context
        """
        tokens = []
        i = 0

        while i < len(expression):
            next_char = expression[i]

            # Skip whitespace
            if next_char.isspace():
                i += 1
                continue

            # Numbers
            if self._is_number_char(next_char):
                number_value, length = self._read_number(expression, i)
                tokens.append(CalcToken.number(number_value, i))
                i += length
                continue

            if next_char in OPERATORS:
                tokens.append(CalcToken.operator(next_char, i))
                i += 1
                continue

            # Parentheses
            if next_char == '(':
                tokens.append(CalcToken.lparen(i))
                i += 1
                continue

            if next_char == ')':
                tokens.append(CalcToken.rparen(i))
                i += 1
                continue

            raise CalcLexError(
                kind=CalcErrorKind.INVALID_CHARACTER,
                message=f"Invalid character: '{next_char}'",
                position=i,
                received=f"Character: {next_char!r}",
                expected="Digits, '.', one of + - * / ^ %, or parentheses",
                suggestion="Remove the character or replace it with a supported operator"
            )

        return self._normalize_unary_minus(tokens)

    def _is_number_char(self, char: str) -> bool:
        """Check if a character can be part of a numeric literal."""
        return '0' <= char <= '9' or char == '.'

    def _read_number(self, expression: str, start: int) -> tuple[float, int]:
        """
        Read a maximal run of digits and decimal points.

        Args:
            expression: Full expression string
            start: Index of the first character of the run

        Returns:
            Tuple of (parsed value, length of the run)

        Raises:
            CalcLexError: If the run is not a finite real number
        """
        end = start
        while end < len(expression) and self._is_number_char(expression[end]):
            end += 1

        literal = expression[start:end]
        try:
            value = float(literal)

        except ValueError as e:
            raise CalcLexError(
                kind=CalcErrorKind.INVALID_NUMBER,
                message=f"Invalid number: {literal}",
                position=start,
                received=f"Literal: {literal}",
                expected="Digits with at most one decimal point, e.g. 42, 3.14, .5",
                suggestion="Check for repeated decimal points"
            ) from e

        if not math.isfinite(value):
            raise CalcLexError(
                kind=CalcErrorKind.INVALID_NUMBER,
                message=f"Invalid number: {literal}",
                position=start,
                received=f"Literal with {len(literal)} characters",
                expected="A number small enough to represent as a 64-bit float"
            )

        return value, end - start

    def _normalize_unary_minus(self, tokens: List[CalcToken]) -> List[CalcToken]:
        """
        Rewrite each unary minus as subtraction from zero.

        A `-` is unary when it is the first token or follows another operator
        or a left parenthesis. Only `-` is ever treated as unary.

        Args:
            tokens: Raw token sequence

        Returns:
            New token sequence in which `-` is always binary
        """
        normalized: List[CalcToken] = []
        previous: CalcToken | None = None

        for token in tokens:
            if token.is_operator('-') and (
                previous is None or previous.type in (CalcTokenType.OPERATOR, CalcTokenType.LPAREN)
            ):
                normalized.append(CalcToken.number(0.0, token.position))

            normalized.append(token)
            previous = token

        return normalized

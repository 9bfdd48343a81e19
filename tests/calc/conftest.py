"""Shared fixtures and utilities for calculator tests."""

import pytest

from calc import Calc, CalcLexer, CalcPostfixConverter, CalcPostfixEvaluator, CalcToken


@pytest.fixture
def calc():
    """Create a fresh Calc instance for each test."""
    return Calc()


@pytest.fixture
def lexer():
    """Create a fresh lexer for each test."""
    return CalcLexer()


@pytest.fixture
def converter():
    """Create a fresh postfix converter for each test."""
    return CalcPostfixConverter()


@pytest.fixture
def postfix_evaluator():
    """Create a fresh postfix evaluator for each test."""
    return CalcPostfixEvaluator()


class CalcTestHelpers:
    """Helper utilities for calculator testing."""

    @staticmethod
    def tokens_from_text(text: str) -> list[CalcToken]:
        """
        Build a token list from a space-separated description.

        Numbers become NUMBER tokens, parens become paren tokens and anything
        else becomes an OPERATOR token.
        """
        tokens = []
        for item in text.split():
            if item == '(':
                tokens.append(CalcToken.lparen())

            elif item == ')':
                tokens.append(CalcToken.rparen())

            else:
                try:
                    tokens.append(CalcToken.number(float(item)))

                except ValueError:
                    tokens.append(CalcToken.operator(item))

        return tokens

    @staticmethod
    def describe(tokens: list[CalcToken]) -> str:
        """Render tokens back into the space-separated description."""
        parts = []
        for token in tokens:
            if isinstance(token.value, float):
                value = token.value
                parts.append(str(int(value)) if value.is_integer() else str(value))

            else:
                parts.append(str(token.value))

        return " ".join(parts)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return CalcTestHelpers

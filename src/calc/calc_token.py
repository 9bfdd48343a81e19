"""Token types and token representation for calculator expressions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class CalcTokenType(Enum):
    """Token types for calculator expressions."""
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True)
class CalcToken:
    """Represents a single token in a calculator expression."""
    type: CalcTokenType
    value: Union[float, str]
    position: int = field(default=0, compare=False)

    @classmethod
    def number(cls, value: float, position: int = 0) -> "CalcToken":
        """Create a number token."""
        return cls(CalcTokenType.NUMBER, value, position)

    @classmethod
    def operator(cls, symbol: str, position: int = 0) -> "CalcToken":
        """Create an operator token."""
        return cls(CalcTokenType.OPERATOR, symbol, position)

    @classmethod
    def lparen(cls, position: int = 0) -> "CalcToken":
        """Create a left parenthesis token."""
        return cls(CalcTokenType.LPAREN, '(', position)

    @classmethod
    def rparen(cls, position: int = 0) -> "CalcToken":
        """Create a right parenthesis token."""
        return cls(CalcTokenType.RPAREN, ')', position)

    def is_operator(self, symbol: str | None = None) -> bool:
        """Check if this is an operator token, optionally a specific one."""
        if self.type != CalcTokenType.OPERATOR:
            return False

        return symbol is None or self.value == symbol

    def is_paren(self) -> bool:
        """Check if this is a grouping token."""
        return self.type in (CalcTokenType.LPAREN, CalcTokenType.RPAREN)

    def __repr__(self) -> str:
        return f"CalcToken({self.type.name}, {self.value!r}, pos={self.position})"

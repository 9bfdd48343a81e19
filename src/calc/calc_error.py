"""Exception classes for calculator expressions with detailed context."""

from enum import Enum
from typing import Optional


class CalcErrorKind(Enum):
    """Conditions that abort an evaluation."""
    INVALID_NUMBER = "invalid_number"
    INVALID_CHARACTER = "invalid_character"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    DIVISION_BY_ZERO = "division_by_zero"
    UNKNOWN_OPERATOR = "unknown_operator"
    MALFORMED_POSTFIX = "malformed_postfix"
    MALFORMED_EXPRESSION = "malformed_expression"


class CalcError(Exception):
    """Base exception for calculator errors with detailed context information."""

    def __init__(
        self,
        kind: CalcErrorKind,
        message: str,
        position: Optional[int] = None,
        received: Optional[str] = None,
        expected: Optional[str] = None,
        suggestion: Optional[str] = None
    ):
        """
        Initialize detailed error.

        Args:
            kind: The condition that caused the failure
            message: Core error description, suitable for a one-line display
            position: Character position where error occurred
            received: What was actually received
            expected: What was expected
            suggestion: Suggestion for fixing the error
        """
        self.kind = kind
        self.message = message
        self.position = position
        self.received = received
        self.expected = expected
        self.suggestion = suggestion

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class CalcLexError(CalcError):
    """Tokenization errors with detailed context."""


class CalcConvertError(CalcError):
    """Infix to postfix conversion errors with detailed context."""


class CalcEvalError(CalcError):
    """Evaluation errors with detailed context."""

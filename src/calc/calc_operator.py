"""Operator alphabet, precedence and associativity."""

OPERATORS = "+-*/^%"

_PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '%': 2,
    '^': 3,
}


def precedence(op: str) -> int:
    """
    Get the binding strength of an operator.

    Args:
        op: Operator symbol

    Returns:
        Precedence level (higher binds tighter), 0 for unknown symbols
    """
    return _PRECEDENCE.get(op, 0)


def is_right_associative(op: str) -> bool:
    """Check whether repeated applications of an operator group right-to-left."""
    return op == '^'

"""Conversion of prefix expressions to infix and postfix form."""

from __future__ import annotations

from collections.abc import Callable

OPERATORS = frozenset("+-*/")


def is_operator(ch: str) -> bool:
    """True for one of the four arithmetic operator characters."""
    return ch in OPERATORS


def _convert(expr: str, combine: Callable[[str, str, str], str]) -> str:
    if not expr:
        raise ValueError("empty expression")
    stack: list[str] = []
    for ch in reversed(expr):
        if is_operator(ch):
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} is missing an operand")
            first = stack.pop()
            second = stack.pop()
            stack.append(combine(first, ch, second))
        else:
            stack.append(ch)
    if len(stack) != 1:
        raise ValueError("expression has operands without an operator")
    return stack[0]


def prefix_to_infix(expr: str) -> str:
    """Convert a prefix expression of single-character operands to infix, without brackets."""
    return _convert(expr, lambda left, op, right: left + op + right)


def prefix_to_postfix(expr: str) -> str:
    """Convert a prefix expression of single-character operands to postfix."""
    return _convert(expr, lambda left, op, right: left + right + op)
"""Infix-to-postfix conversion and bracket matching."""

from __future__ import annotations

_OPERATORS = frozenset("+-*/")
_PAIRS = {")": "(", "]": "[", "}": "{"}


def precedence(ch: str) -> int:
    """Return the binding strength of an operator, 0 for anything else."""
    if ch in ("*", "/"):
        return 3
    if ch in ("+", "-"):
        return 2
    return 0


def is_operator(ch: str) -> bool:
    """Tell whether a character is one of + - * /."""
    return ch in _OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    output: list[str] = []
    operators: list[str] = []
    position = 0
    while position < len(infix):
        ch = infix[position]
        if not is_operator(ch):
            output.append(ch)
            position += 1
        elif precedence(ch) > precedence(operators[-1] if operators else ""):
            operators.append(ch)
            position += 1
        else:
            output.append(operators.pop())
    output.extend(reversed(operators))
    return "".join(output)


def parentheses_balanced(expression: str) -> bool:
    """Tell whether round parentheses in an expression are balanced."""
    depth = 0
    for ch in expression:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def brackets_balanced(expression: str) -> bool:
    """Tell whether (), [] and {} in an expression are balanced and nested."""
    opened: list[str] = []
    for ch in expression:
        if ch in "([{":
            opened.append(ch)
        elif ch in _PAIRS:
            if not opened or opened.pop() != _PAIRS[ch]:
                return False
    return not opened
"""Conversion of infix expressions to space-separated postfix form."""

from __future__ import annotations

import re
from collections.abc import Iterator

from infixcalc.postfix import is_num
from infixcalc.structures import BoundedStack, CircularQueue

# Operators from the tightest binding to the loosest. "(" sits last so that
# nothing is ever popped past it while converting.
_PRIORITY_TABLE: tuple[tuple[str, ...], ...] = (
    ("!",),
    ("^",),
    ("*", "/", "%"),
    ("+", "-"),
    ("<", ">", "<=", ">="),
    ("==", "!="),
    ("&&",),
    ("||",),
    ("(",),
)

_RANK: dict[str, int] = {
    op: rank for rank, group in enumerate(_PRIORITY_TABLE) for op in group
}

_LEXEME_RE = re.compile(r"\s+|[0-9]+|<=|>=|!=|==|&&|\|\||.", re.DOTALL)


def has_left_associative(operator: str) -> bool:
    """Return True unless ``operator`` is one of the right-associative ``!`` or ``^``."""
    return operator not in ("!", "^")


def has_higher_priority(operator_infix: str, operator_stack: str) -> bool:
    """Return True if ``operator_infix`` binds tighter than ``operator_stack``.

    Operators missing from the priority table rank above every known one.
    """
    return _RANK.get(operator_infix, -1) < _RANK.get(operator_stack, -1)


def tokenize(infix: str) -> Iterator[str]:
    """Yield the integer and operator tokens of an infix expression.

    Runs of digits form one token; ``<=``, ``>=``, ``!=``, ``==``, ``&&`` and
    ``||`` are two-character operators; any other character is a token of its
    own. Whitespace is skipped.
    """
    for match in _LEXEME_RE.finditer(infix):
        lexeme = match.group()
        if not lexeme.isspace():
            yield lexeme


def convert_to_postfix(infix: str) -> str:
    """Convert ``infix`` to postfix notation with tokens separated by spaces.

    Every integer token is followed by a space; operators are followed by a
    space except for the last one emitted. Raises ValueError on unbalanced
    parentheses.
    """
    stack: BoundedStack[str] = BoundedStack()
    postfix: CircularQueue[str] = CircularQueue()

    def emit(text: str) -> None:
        for ch in text:
            if not postfix.is_full():
                postfix.enqueue(ch)

    for item in tokenize(infix):
        if is_num(item[0]):
            emit(item)
            emit(" ")
        elif item == "(":
            stack.push(item)
        elif item == ")":
            while True:
                if stack.is_empty():
                    raise ValueError("unmatched ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                emit(top)
                emit(" ")
        else:
            while (
                not stack.is_empty()
                and has_left_associative(item)
                and not has_higher_priority(item, stack.peek())
            ):
                emit(stack.pop())
                emit(" ")
            stack.push(item)

    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '(' in expression")
        emit(top)
        if stack:
            emit(" ")

    return "".join(postfix)
"""Evaluation of space-separated postfix expressions over integers."""

from __future__ import annotations

import operator as _op
from collections.abc import Callable, Iterable

from infixcalc.structures import BoundedStack


class DivisionByZeroError(ZeroDivisionError):
    """Raised when an expression divides by zero or raises zero to a negative power."""

    def __init__(self, message: str = "Division by zero error!") -> None:
        super().__init__(message)


def is_num(elem: str) -> bool:
    """Return True if ``elem`` is a single decimal digit character."""
    return len(elem) == 1 and "0" <= elem <= "9"


def power(a: int, b: int) -> int:
    """Raise ``a`` to ``b``; a non-positive exponent gives 1."""
    return a**b if b > 0 else 1


def to_num(number: str) -> int:
    """Convert a string of digit characters to its integer value."""
    result = 0
    for ch in number:
        result = result * 10 + ord(ch) - ord("0")
    return result


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZeroError()
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _truncating_mod(a: int, b: int) -> int:
    return a - b * _truncating_div(a, b)


_BINARY: dict[str, Callable[[int, int], int]] = {
    "^": power,
    "*": _op.mul,
    "/": _truncating_div,
    "%": _truncating_mod,
    "+": _op.add,
    "-": _op.sub,
    "&&": lambda a, b: int(bool(a) and bool(b)),
    "||": lambda a, b: int(bool(a) or bool(b)),
    ">": lambda a, b: int(a > b),
    ">=": lambda a, b: int(a >= b),
    "<": lambda a, b: int(a < b),
    "<=": lambda a, b: int(a <= b),
    "!=": lambda a, b: int(a != b),
    "==": lambda a, b: int(a == b),
}


def evaluate(operand1: int, operand2: int, op: str) -> int:
    """Apply the binary operator ``op``; an unknown operator yields 0.

    Division and remainder truncate toward zero.
    """
    handler = _BINARY.get(op)
    return handler(operand1, operand2) if handler else 0


def evaluate_unary(operand: int, op: str) -> int:
    """Apply the unary operator; logical not is the only one."""
    return int(not operand)


def _pop(operands: BoundedStack[int]) -> int:
    try:
        return operands.pop()
    except IndexError:
        raise ValueError("malformed postfix expression: missing operand") from None


def evaluate_postfix(postfix: Iterable[str]) -> int:
    """Evaluate a postfix expression whose tokens are separated by spaces.

    ``postfix`` may be a string or any iterable of characters, such as a
    queue filled by the infix converter.
    """
    operands: BoundedStack[int] = BoundedStack()
    for token in "".join(postfix).split(" "):
        if not token:
            continue
        if is_num(token[0]):
            operands.push(to_num(token))
        elif token == "!":
            operands.push(evaluate_unary(_pop(operands), token))
        else:
            right = _pop(operands)
            left = _pop(operands)
            if (right == 0 and token in ("/", "%")) or (
                left == 0 and right < 0 and token == "^"
            ):
                raise DivisionByZeroError()
            operands.push(evaluate(left, right, token))
    return _pop(operands)
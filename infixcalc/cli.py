"""Command line calculator reading infix expressions from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from infixcalc.infix import convert_to_postfix
from infixcalc.postfix import DivisionByZeroError, evaluate_postfix

QUIT = "QUIT"


def _words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read expressions until QUIT or end of input, printing postfix and result."""
    parser = argparse.ArgumentParser(
        prog="infixcalc",
        description=(
            "Read infix expressions without spaces from standard input, one per "
            "word, and print each in postfix form followed by its value. "
            f"Stop at {QUIT}."
        ),
    )
    parser.parse_args(argv)

    for word in _words(sys.stdin):
        if word == QUIT:
            break
        try:
            postfix = convert_to_postfix(word)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            continue
        print(postfix)
        try:
            print(evaluate_postfix(postfix))
        except DivisionByZeroError as exc:
            print(exc)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Checking that a list of operations read from standard input sorts stack a."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.lines import LineReader
from pushswap.operations import Operation, Piles
from pushswap.parse import ParseError, parse_args

_AUTHORIZED = frozenset(op.value for op in Operation)


class CheckerError(ValueError):
    """An instruction is not one of the known operations."""


def check_authorized(line: str) -> bool:
    """True when *line* names exactly one of the operations."""
    return line in _AUTHORIZED


def run_instructions(values: Iterable[int], lines: Iterable[str]) -> Piles:
    """Apply every instruction in *lines* to stack a filled with *values*.

    Empty lines are ignored; an unknown instruction raises CheckerError.
    """
    piles = Piles(values)
    for line in lines:
        if not line:
            continue
        if not check_authorized(line):
            raise CheckerError(f"unknown instruction {line!r}")
        piles.apply(line)
    return piles


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and report OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError:
        sys.stdout.write("Error\n")
        return 0
    try:
        piles = run_instructions(values, LineReader(sys.stdin))
    except CheckerError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if piles.a.is_sorted() else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
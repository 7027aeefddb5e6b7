"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from pushswap.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character, given as a code or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(c)
    _target(stream).write(ch)


def putstr(s: str | None, stream: TextIO | None = None) -> None:
    """Write *s*; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write *s* followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    out = _target(stream)
    out.write(s)
    out.write("\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of *n*."""
    _target(stream).write(itoa(n))
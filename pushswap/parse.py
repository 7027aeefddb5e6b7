"""Reading the integers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.chars import is_digit, is_whitespace

INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """The arguments are not a list of distinct integers."""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def parse_long(text: str) -> int:
    """Leading decimal integer of *text*, after whitespace and an optional sign."""
    index = 0
    while index < len(text) and is_whitespace(text[index]):
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    result = 0
    while index < len(text) and is_digit(text[index]):
        result = result * 10 + ord(text[index]) - ord("0")
        index += 1
    return result * sign


def is_number(text: str | None) -> bool:
    """True for a non-empty text made only of digits and minus signs."""
    if not text:
        return False
    return all(is_digit(ch) or ch == "-" for ch in text)


def parse_args(args: Iterable[str]) -> list[int]:
    """The integers named by *args*, in order.

    Raises ParseError for a value that is not a number, exceeds the largest
    32-bit integer, or occurs twice. Values below the smallest 32-bit integer
    wrap around as a 32-bit conversion would.
    """
    values = []
    for arg in args:
        value = parse_long(arg)
        if value > INT_MAX or not is_number(arg):
            raise ParseError(f"invalid argument {arg!r}")
        values.append(_to_int32(value))
    if len(set(values)) != len(values):
        raise ParseError("duplicate value")
    return values
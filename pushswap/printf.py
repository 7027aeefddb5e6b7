"""A small ``printf`` supporting the conversions d, i, u, x, X, c, s, p and %."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pushswap.chars import atoi, is_digit, itoa

_TYPES = frozenset("dpuxXisc%")
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass
class FormatOptions:
    """Flags, width, precision and conversion of one format directive."""

    left_align: bool = False
    show_sign: bool = False
    pad_char: str = " "
    precision: int = -1
    width: int = 0
    kind: str = ""


def _int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _at(text: str, index: int) -> str:
    return text[index] if index < len(text) else ""


def _digit_run(text: str, start: int) -> tuple[int, int]:
    """Value and length of the run of digits starting at *start*."""
    end = start
    while end < len(text) and is_digit(text[end]):
        end += 1
    return atoi(text[start:end]), end - start


def is_type(t: str) -> bool:
    """True for a conversion character this formatter understands."""
    return len(t) == 1 and t in _TYPES


def to_hex(kind: str, n: int) -> str:
    """Hexadecimal digits of *n* as an unsigned long; lower case for 'x' and 'p'."""
    text = format(n & _ULONG_MASK, "x")
    return text if kind in ("x", "p") else text.upper()


def format_number(options: FormatOptions, n: int) -> str:
    """Render an integer for the d, i, u, x and X conversions."""
    if n == 0 and options.precision == 0:
        return " " * options.width
    digits = to_hex(options.kind, n) if options.kind in ("x", "X") else itoa(n)
    negative = digits.startswith("-")
    if negative:
        digits = digits[1:]
    precision = max(options.precision, len(digits))
    pad = options.pad_char * (options.width - precision - (1 if negative else 0))
    sign_pending = negative
    out = []
    if not options.left_align:
        if negative and options.pad_char == "0" and options.width != 0:
            out.append("-")
            sign_pending = False
        out.append(pad)
    if sign_pending:
        out.append("-")
    out.append("0" * (precision - len(digits)))
    out.append(digits)
    if options.left_align:
        out.append(pad)
    return "".join(out)


def format_str(options: FormatOptions, s: str | None) -> str:
    """Render a string for the s conversion; a missing string shows as ``(null)``."""
    if s is None:
        s = "(null)"
    shown = s if options.precision < 0 else s[: options.precision]
    if options.width == 0:
        return shown
    pad_char = " " if options.left_align else options.pad_char
    if options.precision < 0 or options.precision > len(s):
        pad = pad_char * (options.width - len(s))
    else:
        pad = pad_char * (options.width - options.precision)
    return shown + pad if options.left_align else pad + shown


def format_char(options: FormatOptions, c: int | str) -> str:
    """Render a single character for the c and % conversions."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(c & 0xFF)
    if options.left_align:
        return ch + " " * (options.width - 1)
    return options.pad_char * (options.width - 1) + ch


def format_address(options: FormatOptions, n: int) -> str:
    """Render an address for the p conversion."""
    n &= _ULONG_MASK
    if n == 0 and options.precision == 0:
        pad = " " * (options.width - 2)
        return "0x" + pad if options.left_align else pad + "0x"
    digits = to_hex(options.kind, n)
    body = "0x" + "0" * (options.precision - len(digits)) + digits
    pad = " " * (options.width - (len(digits) + 2))
    return body + pad if options.left_align else pad + body


def _parse_directive(
    text: str, next_arg: Callable[[], Any]
) -> tuple[FormatOptions, int]:
    """Read the directive that follows a '%'; return its options and its length."""
    opts = FormatOptions()
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "-":
            opts.left_align = True
        if ch == "+":
            opts.show_sign = True
        if ch == "0" and not opts.left_align:
            opts.pad_char = "0"
        if is_digit(ch) and ch != "0":
            opts.width, count = _digit_run(text, i)
            i += count
        if _at(text, i) == "*":
            width = _int32(next_arg())
            if width < 0:
                opts.left_align = True
                opts.pad_char = " "
                width = -width
            opts.width = width
        if _at(text, i) == ".":
            if _at(text, i + 1) == "*":
                opts.precision = _int32(next_arg())
                i += 1
            else:
                opts.precision, count = _digit_run(text, i + 1)
                i += count
            if opts.precision >= 0:
                opts.pad_char = " "
        if is_type(_at(text, i)):
            opts.kind = text[i]
            i += 1
            break
        i += 1
    return opts, i


def _render(opts: FormatOptions, next_arg: Callable[[], Any]) -> str:
    kind = opts.kind
    if kind in ("d", "i"):
        return format_number(opts, _int32(next_arg()))
    if kind in ("u", "x", "X"):
        return format_number(opts, next_arg() & _UINT_MASK)
    if kind == "s":
        return format_str(opts, next_arg())
    if kind == "c":
        return format_char(opts, next_arg())
    if kind == "%":
        return format_char(opts, "%")
    if kind == "p":
        return format_address(opts, next_arg())
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with every directive replaced by its rendered argument."""
    remaining = iter(args)

    def next_arg() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    pos = 0
    while pos < len(fmt):
        if fmt[pos] == "%" and pos + 1 < len(fmt):
            opts, consumed = _parse_directive(fmt[pos + 1 :], next_arg)
            out.append(_render(opts, next_arg))
            pos += consumed + 1
        else:
            out.append(fmt[pos])
            pos += 1
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)
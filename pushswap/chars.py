"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset("\n\t\f\r\v ")
_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1


def _code(c: int | str) -> int:
    """Return the character code of *c*, given as an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _as_input_type(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >= 1 << (_INT_BITS - 1) else value


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def is_whitespace(c: int | str) -> bool:
    """True for newline, tab, form feed, carriage return, vertical tab or space."""
    code = _code(c)
    return 0 <= code < 0x110000 and chr(code) in _WHITESPACE


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _as_input_type(c, code)


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _as_input_type(c, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit C ``atoi`` would.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Overflow wraps around in 32-bit arithmetic.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = (result * 10 + ord(ch) - ord("0")) & _UINT_MASK
    return _to_int32(_to_int32(result) * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    if n == 0:
        return "0"
    digits = []
    magnitude = abs(n)
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))
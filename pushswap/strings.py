"""String helpers with C-style semantics expressed on Python ``str`` values."""

from __future__ import annotations

from collections.abc import Callable


def _char(c: int | str) -> str:
    """Return *c* as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _code_at(s: str, index: int) -> int:
    """Character code at *index*, or 0 past the end (the terminator)."""
    return ord(s[index]) if index < len(s) else 0


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for the NUL character yields the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return index if index >= 0 else None


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for the NUL character yields the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference where they differ."""
    if n <= 0:
        return 0
    index = 0
    while (
        index < n - 1
        and _code_at(s1, index) == _code_at(s2, index)
        and _code_at(s1, index) != 0
    ):
        index += 1
    return _code_at(s1, index) - _code_at(s2, index)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the copied text and the full length of *src*.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation
    would have needed (bounded by *size* for the *dst* part).
    """
    if size <= 0:
        return dst, len(src)
    kept = min(len(dst), size)
    if kept < size:
        room = max(0, size - 1 - kept)
        return dst[:kept] + src[:room], kept + len(src)
    return dst, kept + len(src)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of *little* in *big* searching at most *length* characters, or None."""
    big_len = len(big)
    little_len = len(little)
    if little_len == 0:
        return 0
    if length <= 0 or big_len < little_len:
        return None
    for start in range(big_len):
        matched = 0
        while (
            start + matched < length
            and start + matched < big_len
            and matched < little_len
            and big[start + matched] == little[matched]
        ):
            matched += 1
        if matched == length or matched == little_len:
            return start
    return None


def substr(s: str, start: int, length: int) -> str:
    """Up to *length* characters of *s* from *start*; empty when *start* is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Strip characters of *charset* from both ends of *s*.

    When fewer than two characters remain, two characters are taken from
    the first kept position.
    """
    start = 0
    while start < len(s) and s[start] in charset:
        start += 1
    end = len(s)
    while end > 0 and s[end - 1] in charset:
        end -= 1
    if end - start < 2:
        return substr(s, start, 2)
    return substr(s, start, end - start)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    sep = _char(sep)
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Apply ``f(index, char)`` to every character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def join_into(dst: str | None, src: str) -> str:
    """Append *src* to *dst*, treating a missing *dst* as a fresh copy of *src*."""
    if dst is None:
        return src
    return dst + src


def join_all(dst: str | None, *args: str) -> str | None:
    """Append every argument to *dst* in order."""
    for piece in args:
        dst = join_into(dst, piece)
    return dst
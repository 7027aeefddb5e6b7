"""Reading a text stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

BUFFER_SIZE = 1000


class LineReader:
    """Reads lines from *stream*, fetching *buffer_size* characters at a time."""

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def next_line(self) -> tuple[str, bool]:
        """Return the next line without its newline, and whether a newline ended it.

        A False flag means the end of the stream was reached; the line returned
        with it is whatever followed the last newline, possibly empty.
        """
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        line, sep, rest = self._pending.partition("\n")
        if sep:
            self._pending = rest
            return line, True
        self._pending = ""
        return line, False

    def __iter__(self) -> Iterator[str]:
        """Yield every line, ending with the text after the last newline."""
        while True:
            line, more = self.next_line()
            yield line
            if not more:
                return
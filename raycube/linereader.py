"""Buffered line reading from a file-like stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Read a stream one line at a time, in chunks of ``buffer_size``.

    Each line keeps its trailing newline; the last line of a stream that
    does not end in a newline is returned without one. Works with text and
    binary streams alike.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _find_newline(data) -> int:
        """Return the index of the first newline in ``data``, or -1."""
        if not data:
            return -1
        separator = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
        return data.find(separator)

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        index = self._find_newline(pending)
        while index < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
            index = self._find_newline(pending)
        if not pending:
            self._pending = pending
            return None
        if index < 0:
            line, self._pending = pending, pending[:0]
        else:
            line, self._pending = pending[:index + 1], pending[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def iter_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, newlines included."""
    yield from LineReader(stream, buffer_size)
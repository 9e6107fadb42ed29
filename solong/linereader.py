"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Yield the lines of a binary or text stream, newline included.

    The stream is read in chunks of ``buffer_size``; what follows the last
    returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None
        self._eof = False

    def _fill(self) -> None:
        """Read chunks until a full line is pending or the stream ends."""
        while not self._eof:
            if (
                self._pending is not None
                and self._newline is not None
                and self._newline in self._pending
            ):
                return
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                continue
            if self._newline is None:
                if isinstance(chunk, (bytes, bytearray)):
                    self._newline = b"\n"  # type: ignore[assignment]
                else:
                    self._newline = "\n"  # type: ignore[assignment]
            if self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line with its newline, or None at end of stream."""
        self._fill()
        pending = self._pending
        if not pending or self._newline is None:
            return None
        index = pending.find(self._newline)
        if index < 0:
            line, self._pending = pending, pending[:0]
        else:
            line, self._pending = pending[: index + 1], pending[index + 1 :]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Iterate over the lines of ``stream``, newline included."""
    yield from LineReader(stream, buffer_size)
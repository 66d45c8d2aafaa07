"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

__all__ = ["LineReader", "BUFFER_SIZE"]

BUFFER_SIZE = 1048


class LineReader:
    """Read lines from a text or binary stream in chunks of ``buffer_size``.

    Each line keeps its trailing newline; a final line without one is
    returned as it is. Once the stream is exhausted ``readline`` returns
    ``None``.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _newline_at(self) -> int:
        if not self._pending:
            return -1
        newline = b"\n" if isinstance(self._pending, bytes) else "\n"
        return self._pending.find(newline)

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` at the end of the stream."""
        while self._newline_at() < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk

        pending = self._pending
        if not pending:
            self._pending = None
            return None

        end = self._newline_at()
        if end < 0:
            self._pending = None
            return pending

        line, rest = pending[:end + 1], pending[end + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line
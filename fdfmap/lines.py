"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 32


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream``, pulling ``buffer_size`` units at a time.

    Each returned line keeps its trailing newline; the last line of the
    stream is returned without one if the stream does not end with a newline.
    Text and binary streams are both supported; lines come back with the
    type the stream produces.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _read_chunk(self) -> AnyStr:
        chunk = self._stream.read(self._buffer_size)
        if isinstance(chunk, bytearray):
            chunk = bytes(chunk)
        return chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream has nothing left."""
        pending = self._pending
        if pending is None:
            pending = self._read_chunk()
            if not pending:
                return None
        newline = b"\n" if isinstance(pending, bytes) else "\n"
        while newline not in pending:  # type: ignore[operator]
            chunk = self._read_chunk()
            if not chunk:
                break
            pending += chunk
        if not pending:
            self._pending = pending
            return None
        cut = pending.find(newline)  # type: ignore[arg-type]
        if cut < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[cut + 1:]
        return pending[:cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` one at a time, newlines included."""
    yield from LineReader(stream, buffer_size)
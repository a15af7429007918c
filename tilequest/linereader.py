"""Line-by-line reading of text streams, keeping each line's newline."""

from __future__ import annotations

from typing import Iterator, List, Optional, TextIO

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Read a text stream one line at a time.

    Every line keeps its trailing newline. A final line without one is
    returned as it is. Once the stream is exhausted, read_line returns None.
    """

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._eof = False

    def _fill(self) -> None:
        while "\n" not in self._pending and not self._eof:
            chunk = self._stream.read(self._buffer_size)
            if chunk:
                self._pending += chunk
            else:
                self._eof = True

    def read_line(self) -> Optional[str]:
        """Return the next line, or None when nothing is left."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find("\n")
        cut = len(self._pending) if end < 0 else end + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


def read_lines(path) -> List[str]:
    """Read every line of the file at path, newlines included.

    Line endings are kept exactly as stored. Raises OSError when the file
    cannot be opened.
    """
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream, buffer_size=4096))
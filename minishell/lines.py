"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 1
MAX_DESCRIPTORS = 1024

_NEWLINE = b"\n"


class LineReader:
    """Reads lines from a file descriptor, ``buffer_size`` bytes at a time.

    Each line keeps its trailing newline; a final line without one is
    returned as it is. Whatever was read past the end of a line is kept for
    the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if hasattr(fd, "fileno"):
            fd = fd.fileno()
        if not isinstance(fd, int) or isinstance(fd, bool):
            raise TypeError("fd must be an integer file descriptor")
        if fd < 0 or fd >= MAX_DESCRIPTORS:
            raise ValueError(f"file descriptor out of range: {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        """Read chunks until the pending data holds a newline or input ends."""
        while _NEWLINE not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> str | None:
        """The next line, or ``None`` once the input is exhausted.

        Raises OSError when reading fails; pending data is then discarded.
        """
        try:
            self._fill()
        except OSError:
            self._pending = b""
            raise
        if not self._pending:
            return None
        head, sep, rest = self._pending.partition(_NEWLINE)
        self._pending = rest
        return (head + sep).decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line
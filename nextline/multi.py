"""Line reading that keeps a separate buffer for each file descriptor."""

from __future__ import annotations

import os

from nextline.reader import BUFFER_SIZE

_NEWLINE = b"\n"


class MultiLineReader:
    """Reads lines from many file descriptors, each with its own buffer.

    Only newline-terminated lines are returned; text after the last
    newline of an input stays buffered and the reader reports end of input.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._stashes: dict[int, bytes] = {}

    def read_line(self, fd: int) -> bytes | None:
        """Return the next complete line from ``fd``, or None when none is left.

        A read error drops the buffer kept for ``fd`` and is re-raised.
        """
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        stash = self._stashes.setdefault(fd, b"")
        while _NEWLINE not in stash:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self._stashes.pop(fd, None)
                raise
            if not chunk:
                self._stashes[fd] = stash
                return None
            stash += chunk
        line, _, rest = stash.partition(_NEWLINE)
        self._stashes[fd] = rest
        return line + _NEWLINE

    def discard(self, fd: int) -> None:
        """Forget whatever is buffered for ``fd``."""
        self._stashes.pop(fd, None)

    def __contains__(self, fd: object) -> bool:
        return fd in self._stashes


_shared = MultiLineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next complete line from ``fd`` using a process-wide reader."""
    return _shared.read_line(fd)
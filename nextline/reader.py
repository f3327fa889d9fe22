"""Read a file descriptor one line at a time through a small buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 42
_NEWLINE = b"\n"


def _validate(fd: int, buffer_size: int) -> None:
    if fd < 0:
        raise ValueError(f"invalid file descriptor: {fd}")
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")


def _fill(fd: int, stash: bytes, buffer_size: int) -> bytes:
    """Read from ``fd`` until ``stash`` holds a newline or input runs out."""
    chunks = [stash]
    while _NEWLINE not in chunks[-1]:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def extract_line(stash: bytes | None) -> bytes | None:
    """Return the first line of ``stash``, newline included, or None if empty."""
    if not stash:
        return None
    end = stash.find(_NEWLINE)
    return stash if end < 0 else stash[: end + 1]


def update_stash(stash: bytes | None) -> bytes | None:
    """Return what follows the first line of ``stash``, or None if nothing does."""
    if not stash:
        return None
    _, found, rest = stash.partition(_NEWLINE)
    if not found:
        return None
    return rest or None


class LineReader:
    """Buffered line reader over a single file descriptor."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        _validate(fd, buffer_size)
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = b""

    def read_line(self) -> bytes | None:
        """Return the next line, newline included, or None at end of input.

        A read error discards any buffered data and is re-raised.
        """
        try:
            stash = _fill(self.fd, self._stash, self.buffer_size)
        except OSError:
            self._stash = b""
            raise
        line = extract_line(stash)
        self._stash = update_stash(stash) or b""
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_shared_stash = b""


def get_next_line(fd: int) -> bytes | None:
    """Return the next line from ``fd`` using one buffer shared by all calls."""
    global _shared_stash
    _validate(fd, BUFFER_SIZE)
    try:
        stash = _fill(fd, _shared_stash, BUFFER_SIZE)
    except OSError:
        _shared_stash = b""
        raise
    line = extract_line(stash)
    _shared_stash = update_stash(stash) or b""
    return line
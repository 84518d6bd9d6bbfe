"""Read a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 1
MAX_FD = 1024

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "MAX_FD",
    "LineReader",
    "DescriptorLines",
    "get_next_line",
]


def _check_buffer_size(buffer_size: int) -> int:
    if buffer_size < 1:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    return buffer_size


def _check_fd(fd: int) -> int:
    if fd < 0:
        raise ValueError(f"invalid file descriptor: {fd}")
    return fd


def _fill(stash: bytes, fd: int, buffer_size: int) -> bytes:
    """Read chunks from ``fd`` onto ``stash`` until it holds a newline or EOF."""
    parts = [stash]
    pending = b"\n" not in stash
    while pending:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            break
        parts.append(chunk)
        pending = b"\n" not in chunk
    return b"".join(parts)


def _split_line(stash: bytes) -> tuple[bytes | None, bytes]:
    """Cut the first line (newline included) off ``stash``."""
    if not stash:
        return None, b""
    head, sep, rest = stash.partition(b"\n")
    return head + sep, rest


class LineReader:
    """Yields successive lines of one file descriptor.

    Lines are returned as bytes and keep their trailing newline; the last
    line of the input may lack one.  ``None`` marks the end of the input.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self.fd = _check_fd(fd)
        self.buffer_size = _check_buffer_size(buffer_size)
        self._stash = b""

    def read_line(self) -> bytes | None:
        """Return the next line, or ``None`` once the input is exhausted."""
        try:
            stash = _fill(self._stash, self.fd, self.buffer_size)
        except OSError:
            self._stash = b""
            raise
        line, self._stash = _split_line(stash)
        return line

    def reset(self) -> None:
        """Drop any data read ahead of the last returned line."""
        self._stash = b""

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line


class DescriptorLines:
    """Keeps a separate read-ahead buffer for each of many file descriptors."""

    def __init__(
        self, buffer_size: int = DEFAULT_BUFFER_SIZE, max_fd: int = MAX_FD
    ) -> None:
        self.buffer_size = _check_buffer_size(buffer_size)
        if max_fd < 1:
            raise ValueError(f"max_fd must be positive, got {max_fd}")
        self.max_fd = max_fd
        self._stashes: dict[int, bytes] = {}

    def _check(self, fd: int) -> int:
        _check_fd(fd)
        if fd >= self.max_fd:
            raise ValueError(f"file descriptor {fd} exceeds limit {self.max_fd}")
        return fd

    def get_next_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd``, or ``None`` at its end."""
        self._check(fd)
        try:
            stash = _fill(self._stashes.pop(fd, b""), fd, self.buffer_size)
        except OSError:
            raise
        line, rest = _split_line(stash)
        if rest:
            self._stashes[fd] = rest
        return line

    def forget(self, fd: int) -> None:
        """Discard buffered data for ``fd``."""
        self._check(fd)
        self._stashes.pop(fd, None)


_shared = DescriptorLines()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of ``fd`` using a process-wide set of buffers."""
    return _shared.get_next_line(fd)
"""Line-at-a-time reading from a file descriptor or a stream."""

from __future__ import annotations

import os
from typing import Callable, Iterator, Optional, Tuple, Union

DEFAULT_BUFFER_SIZE = 10

Chunk = Union[bytes, str]


def _split_line(data: Chunk) -> Tuple[Chunk, Optional[Chunk], bool]:
    """Split ``data`` after its first newline.

    Returns the line, what follows it (None if nothing does) and whether a
    newline was found at all.
    """
    newline = "\n" if isinstance(data, str) else b"\n"
    cut = data.find(newline)
    if cut < 0:
        return data, None, False
    return data[:cut + 1], data[cut + 1:] or None, True


class LineReader:
    """Read lines, newline included, from a descriptor or a readable stream.

    ``source`` is either an integer file descriptor, read as bytes, or an
    object with a ``read(size)`` method; lines come back in the type that
    ``read`` returns. Data is read ``buffer_size`` units at a time and any
    text after a returned line is kept for the next call.
    """

    def __init__(self, source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._read: Callable[[int], Optional[Chunk]]
        if isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            self._read = lambda size: os.read(source, size)
        else:
            self._read = source.read
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once no data is left.

        The last line is returned without a newline if the data does not end
        with one. A read error discards any buffered data and is re-raised.
        """
        pending = self._pending
        self._pending = None
        while True:
            if pending:
                line, rest, complete = _split_line(pending)
                if complete:
                    self._pending = rest
                    return line
            try:
                chunk = self._read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        return pending or None

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line
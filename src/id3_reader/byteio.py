"""
Positioned reads from a binary file handle and a big-endian cursor over the
resulting buffers.

Short reads are not errors: the reader returns ``None`` and reports a
``ShortRead`` diagnostic to the sink it was given.
"""

from __future__ import annotations

import logging
import os
import struct
from collections.abc import Callable
from dataclasses import dataclass
from typing import BinaryIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortRead:
    """Diagnostic for a read that returned fewer bytes than requested."""

    position: int
    expected: int
    actual: int


ShortReadSink = Callable[[ShortRead], None]


def log_short_read(event: ShortRead) -> None:
    """Default sink: report the short read as a warning."""
    logger.warning(
        "Could not read all bytes at offset %d. Expected: %d, read: %d",
        event.position,
        event.expected,
        event.actual,
    )


class ByteReader:
    """Bounded reads at absolute offsets of an open binary file."""

    def __init__(self, handle: BinaryIO, on_short_read: ShortReadSink | None = None) -> None:
        self._handle = handle
        self._on_short_read = on_short_read or log_short_read

    def size(self) -> int:
        """Total length of the underlying file in bytes."""
        return self._handle.seek(0, os.SEEK_END)

    def read(self, position: int, size: int) -> bytes | None:
        """
        Read exactly ``size`` bytes starting at ``position``.

        Returns None (after notifying the sink) when the file ends first.
        I/O errors propagate.
        """
        self._handle.seek(position)
        data = self._handle.read(size)
        if len(data) != size:
            self._on_short_read(ShortRead(position=position, expected=size, actual=len(data)))
            return None
        return data


class ByteCursor:
    """Big-endian reader over an in-memory buffer."""

    def __init__(self, data: bytes, off: int = 0, end: int | None = None) -> None:
        self.data = data
        self.off = off
        self.end = len(data) if end is None else end

    def tell(self) -> int:
        return self.off

    def seek(self, off: int) -> None:
        self.off = off

    def remaining(self) -> int:
        return self.end - self.off

    def u8(self) -> int:
        v = self.data[self.off]
        self.off += 1
        return v

    def u32(self) -> int:
        v = struct.unpack_from(">I", self.data, self.off)[0]
        self.off += 4
        return v

    def bytes(self, n: int) -> bytes:
        b = self.data[self.off : self.off + n]
        self.off += n
        return b

    def latin1(self, n: int) -> str:
        """Read ``n`` bytes as an ISO-8859-1 string (no trimming)."""
        return self.bytes(n).decode("latin-1")

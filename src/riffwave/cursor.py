"""Position-tracking byte reader over a finite, seekable stream."""

from __future__ import annotations

import io
import os
import struct
from typing import BinaryIO

from riffwave.errors import TruncatedStreamError

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class ByteCursor:
    """Little-endian reads with an absolute offset and a fixed total length.

    The length is measured once when the cursor is created; the underlying
    stream is expected not to grow while it is being read.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        start = stream.tell()
        self._length = stream.seek(0, os.SEEK_END)
        stream.seek(start, os.SEEK_SET)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> ByteCursor:
        return cls(io.BytesIO(bytes(data)))

    @property
    def position(self) -> int:
        return self._stream.tell()

    @property
    def length(self) -> int:
        return self._length

    @property
    def remaining(self) -> int:
        return max(self._length - self.position, 0)

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def at_end(self) -> bool:
        return self.position >= self._length

    def seek(self, offset: int) -> int:
        return self._stream.seek(offset, os.SEEK_SET)

    def clamp(self, size: int) -> int:
        """Limit a declared size to the bytes physically left in the stream."""
        return max(min(size, self.remaining), 0)

    def read_exact(self, count: int) -> bytes:
        data = self._stream.read(count)
        if len(data) < count:
            raise TruncatedStreamError(
                f"wanted {count} bytes at offset {self.position - len(data)}, got {len(data)}"
            )
        return data

    def read_u16(self) -> int:
        return _U16.unpack(self.read_exact(_U16.size))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self.read_exact(_U32.size))[0]

    def read_fourcc(self) -> str | None:
        """Read a four character identifier, or None if the stream runs out.

        Bytes outside printable ASCII are skipped first, which steps over the
        pad byte that follows odd-sized chunks.
        """
        while True:
            if self.at_end():
                return None
            first = self._stream.read(1)
            if not first:
                return None
            if 0x20 <= first[0] <= 0x7F:
                break
        rest = self._stream.read(3)
        if len(rest) < 3:
            return None
        return (first + rest).decode("latin-1")

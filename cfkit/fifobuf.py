"""Ring buffer of length-prefixed records."""

from __future__ import annotations

import struct
from typing import Optional

_META = struct.Struct("<H")
MAX_SIZE = 0xFFFF


class FifoBuffer:
    """FIFO of byte records kept in a ring of ``size`` bytes.

    Each record is stored as a two-byte little-endian length followed by
    its payload.
    """

    def __init__(self, size: int, buffer: Optional[bytearray] = None) -> None:
        if not 0 < size <= MAX_SIZE:
            raise ValueError(f"size must be between 1 and {MAX_SIZE}")
        if buffer is None:
            buffer = bytearray(size)
        elif len(buffer) < size:
            raise ValueError("buffer is smaller than size")
        self._buf = buffer
        self._size = size
        self._used = 0
        self._begin = 0
        self._end = 0

    @property
    def buffer(self) -> bytearray:
        """The storage the records live in."""
        return self._buf

    @property
    def used(self) -> int:
        """Bytes taken by stored records, length prefixes included."""
        return self._used

    def __len__(self) -> int:
        """Total size of the ring storage in bytes."""
        return self._size

    def _put(self, pos: int, data: bytes) -> int:
        first = min(len(data), self._size - pos)
        self._buf[pos:pos + first] = data[:first]
        rest = data[first:]
        self._buf[:len(rest)] = rest
        return (pos + len(data)) % self._size

    def _take(self, pos: int, n: int) -> bytes:
        first = min(n, self._size - pos)
        return bytes(self._buf[pos:pos + first]) + bytes(self._buf[:n - first])

    def write(self, data: bytes) -> None:
        """Append one record."""
        payload = bytes(data)
        needed = _META.size + len(payload)
        if len(payload) > MAX_SIZE or needed > self._size - self._used:
            raise BufferError(f"record of {len(payload)} bytes does not fit")
        self._end = self._put(self._end, _META.pack(len(payload)) + payload)
        self._used += needed

    def _head(self) -> tuple[bytes, int]:
        if not self._used:
            raise IndexError("fifo buffer is empty")
        (length,) = _META.unpack(self._take(self._begin, _META.size))
        if length > self._used - _META.size:
            raise ValueError("fifo buffer is corrupted")
        start = (self._begin + _META.size) % self._size
        return self._take(start, length), (start + length) % self._size

    def read(self) -> bytes:
        """Remove and return the oldest record."""
        payload, following = self._head()
        self._begin = following
        self._used -= _META.size + len(payload)
        return payload

    def peek(self) -> bytes:
        """Return the oldest record without removing it."""
        return self._head()[0]
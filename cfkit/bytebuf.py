"""Sequential byte reader and bounded byte writer."""

from __future__ import annotations


class ByteReader:
    """Reads consecutive chunks from a byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def pos(self) -> int:
        """Offset of the next byte to read."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Number of bytes not read yet."""
        return len(self._data) - self._pos

    def get(self, n: int) -> bytes:
        """Read exactly ``n`` bytes."""
        if n < 0:
            raise ValueError("cannot read a negative number of bytes")
        if n > self.remaining:
            raise EOFError(f"need {n} bytes, only {self.remaining} left")
        chunk = self._data[self._pos:self._pos + n]
        self._pos += n
        return chunk


class ByteWriter:
    """Appends bytes to a buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer = bytearray()

    @property
    def length(self) -> int:
        """Number of bytes written."""
        return len(self._buffer)

    @property
    def data(self) -> bytes:
        """The bytes written so far."""
        return bytes(self._buffer)

    def put(self, data: bytes) -> None:
        """Append ``data``; fails if it does not fit."""
        raw = bytes(data)
        if len(raw) > self.capacity - len(self._buffer):
            raise BufferError(f"{len(raw)} bytes do not fit in the writer")
        self._buffer += raw
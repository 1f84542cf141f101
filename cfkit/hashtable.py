"""Hash table with chained buckets and byte-string keys."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

Key = Union[str, bytes, bytearray, memoryview]

_MASK32 = 0xFFFFFFFF
_HASH_KEY = struct.Struct("<I")


def hash_key(key: Key) -> int:
    """Return the 32-bit multiplicative (times 33) hash of a key.

    A text key is hashed over its UTF-8 bytes up to the first NUL.
    """
    if isinstance(key, str):
        raw = key.encode("utf-8").split(b"\0", 1)[0]
    else:
        raw = bytes(key)
    value = 0
    for byte in raw:
        value = (value * 33 + byte) & _MASK32
    return value


def _normalize(key: Key) -> tuple[bytes, int]:
    """Return the stored form of a key and its full hash.

    Text keys are stored NUL-terminated, so ``"ab"`` and ``b"ab"`` differ.
    """
    if isinstance(key, str):
        raw = key.encode("utf-8").split(b"\0", 1)[0]
        return raw + b"\0", hash_key(raw)
    raw = bytes(key)
    return raw, hash_key(raw)


@dataclass(eq=False)
class _Entry:
    key: Key
    raw: bytes
    bucket: int
    value: Any


class HashTable:
    """Maps byte or text keys to values; a power-of-two number of buckets."""

    def __init__(
        self, size: int = 16, on_remove: Optional[Callable[[Any], None]] = None
    ) -> None:
        buckets = 8
        while True:
            buckets <<= 1
            if buckets >= size:
                break
        self._mask = buckets - 1
        self._buckets: list[list[_Entry]] = [[] for _ in range(buckets)]
        self._size = 0
        self._on_remove = on_remove

    @property
    def bucket_count(self) -> int:
        """Number of buckets."""
        return self._mask + 1

    def _locate(self, key: Key) -> tuple[list[_Entry], bytes, int, Optional[_Entry]]:
        raw, full = _normalize(key)
        index = full & self._mask
        bucket = self._buckets[index]
        for entry in bucket:
            if entry.raw == raw:
                return bucket, raw, index, entry
        return bucket, raw, index, None

    def get(self, key: Key) -> Any:
        """Return the value stored under ``key``, or None."""
        entry = self._locate(key)[3]
        return entry.value if entry is not None else None

    def set(self, key: Key, value: Any) -> None:
        """Store ``value`` under ``key``; a value of None removes the key."""
        bucket, raw, index, entry = self._locate(key)
        if value is None:
            if entry is not None:
                bucket.remove(entry)
                self._size -= 1
                if self._on_remove is not None:
                    self._on_remove(entry.value)
            return
        if entry is None:
            stored_key = bytes(key) if isinstance(key, (bytearray, memoryview)) else key
            bucket.append(_Entry(stored_key, raw, index, value))
            self._size += 1
        else:
            entry.value = value

    @staticmethod
    def _hash_as_key(hash_value: int) -> bytes:
        if not 0 <= hash_value <= _MASK32:
            raise ValueError(f"{hash_value} is not a 32-bit unsigned hash")
        return _HASH_KEY.pack(hash_value)

    def get_by_hash(self, hash_value: int) -> Any:
        """Return the value stored under a 32-bit number used as key."""
        return self.get(self._hash_as_key(hash_value))

    def set_by_hash(self, hash_value: int, value: Any) -> None:
        """Store a value under a 32-bit number used as key."""
        self.set(self._hash_as_key(hash_value), value)

    def items(self) -> Iterator[tuple[Key, Any]]:
        """Yield ``(key, value)`` pairs bucket by bucket."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def close(self) -> None:
        """Remove every entry, passing each value to the removal callback."""
        buckets = self._buckets
        self._buckets = [[] for _ in buckets]
        self._size = 0
        if self._on_remove is not None:
            for bucket in buckets:
                for entry in bucket:
                    self._on_remove(entry.value)

    def __contains__(self, key: Key) -> bool:
        return self._locate(key)[3] is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Key]:
        for key, _ in self.items():
            yield key
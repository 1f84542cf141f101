"""Growable array of fixed-size byte elements."""

from __future__ import annotations

from typing import Callable, Optional

END_INDEX = -1


class Array:
    """Array of elements of ``elm_size`` bytes; index -1 means the end."""

    def __init__(self, elm_size: int, capacity: int) -> None:
        if elm_size <= 0:
            raise ValueError("element size must be positive")
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.elm_size = elm_size
        self._capacity = capacity
        self._items: list[bytes] = []

    @property
    def capacity(self) -> int:
        """Number of elements the array holds before it grows."""
        return self._capacity

    def _pack(self, elm: bytes) -> bytes:
        raw = bytes(elm)
        if len(raw) > self.elm_size:
            raise ValueError(f"element longer than {self.elm_size} bytes")
        return raw.ljust(self.elm_size, b"\0")

    def _resolve(self, index: int) -> int:
        if index < END_INDEX or index >= len(self._items):
            raise IndexError(f"array index {index} out of range")
        return len(self._items) - 1 if index == END_INDEX else index

    def reserve(self, count: int) -> None:
        """Make the array hold ``count`` zeroed elements (all capacity if negative)."""
        if count < 0:
            count = self._capacity
        if count > self._capacity:
            raise ValueError(f"cannot reserve {count} elements, capacity is {self._capacity}")
        self._items = [bytes(self.elm_size)] * count

    def insert(self, index: int, elm: bytes) -> None:
        """Insert an element before ``index``; -1 appends."""
        packed = self._pack(elm)
        if index < END_INDEX or index > len(self._items):
            raise IndexError(f"array index {index} out of range")
        if len(self._items) == self._capacity:
            self._capacity *= 2
        if index == END_INDEX:
            self._items.append(packed)
        else:
            self._items.insert(index, packed)

    def erase(self, index: int) -> bytes:
        """Remove and return the element at ``index``; -1 removes the last."""
        position = self._resolve(index)
        return self._items.pop(position)

    def set(self, index: int, elm: bytes) -> None:
        """Replace the element at ``index``; -1 replaces the last."""
        packed = self._pack(elm)
        self._items[self._resolve(index)] = packed

    def get(self, index: int) -> bytes:
        """Return the element at ``index``; -1 returns the last."""
        return self._items[self._resolve(index)]

    def find(
        self, elm: bytes, eq: Optional[Callable[[bytes, bytes], bool]] = None
    ) -> Optional[int]:
        """Return the index of the first element matching ``elm``, or None."""
        if eq is None:
            target = self._pack(elm)

            def eq(_: bytes, stored: bytes) -> bool:
                return stored == target

        for index, stored in enumerate(self._items):
            if eq(elm, stored):
                return index
        return None

    def reset(self) -> None:
        """Drop every element, keeping the capacity."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
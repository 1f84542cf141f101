"""Map that keeps its keys sorted by a comparison function."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

CmpFn = Callable[[Any, Any], int]


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class OrderedMap:
    """Sorted key/value map; keys are ordered by ``cmp`` (-1, 0 or 1)."""

    def __init__(self, cmp: Optional[CmpFn] = None) -> None:
        self._cmp = cmp if cmp is not None else _natural_cmp
        self._keys: list[Any] = []
        self._values: list[Any] = []

    def _search(self, key: Any) -> tuple[int, bool]:
        lo, hi = 0, len(self._keys)
        while lo < hi:
            mid = (lo + hi) // 2
            result = self._cmp(key, self._keys[mid])
            if result < 0:
                hi = mid
            elif result > 0:
                lo = mid + 1
            else:
                return mid, True
        return lo, False

    @staticmethod
    def _freeze(key: Any) -> Any:
        if isinstance(key, (bytearray, memoryview)):
            return bytes(key)
        return key

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        index, found = self._search(self._freeze(key))
        return self._values[index] if found else None

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        key = self._freeze(key)
        index, found = self._search(key)
        if found:
            self._values[index] = value
        else:
            self._keys.insert(index, key)
            self._values.insert(index, value)

    def values(self) -> Iterator[Any]:
        """Yield the values in key order."""
        yield from list(self._values)

    def __contains__(self, key: Any) -> bool:
        return self._search(self._freeze(key))[1]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Any]:
        yield from list(self._keys)
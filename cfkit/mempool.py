"""Block-based memory pool handing out slices of pre-allocated buffers."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BLOCK_SIZE = 1024
ALIGN_SIZE = 4


def _align(offset: int, alignment: int = ALIGN_SIZE) -> int:
    return (offset + alignment - 1) & ~(alignment - 1)


@dataclass(frozen=True)
class PoolStat:
    """Statistics of a memory pool."""

    block_size: int
    block_count: int
    large_block_count: int
    used: int
    unused: int


class _Block:
    __slots__ = ("memory", "start")

    def __init__(self, size: int) -> None:
        self.memory = bytearray(size)
        self.start = 0

    @property
    def end(self) -> int:
        return len(self.memory)


class MemoryPool:
    """Allocates aligned chunks from blocks of ``block_size`` bytes.

    Chunks are never freed one by one; they live as long as the pool.
    """

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if block_size <= 0:
            raise ValueError("block size must be positive")
        self._block_size = block_size
        self._blocks = [_Block(block_size)]
        self._used = 0
        self._unused = block_size

    @property
    def block_size(self) -> int:
        """Size of a single block in bytes."""
        return self._block_size

    def alloc(self, size: int) -> memoryview:
        """Return a writable view of ``size`` fresh bytes."""
        if size <= 0 or size > self._block_size:
            raise ValueError(
                f"allocation size must be between 1 and {self._block_size}"
            )
        current = self._blocks[-1]
        addr = _align(current.start)
        if current.end - addr < size:
            current = _Block(self._block_size)
            self._blocks.append(current)
            addr = 0
        current.start = addr + size
        self._used += size
        self._unused = current.end - current.start
        return memoryview(current.memory)[addr:addr + size]

    def stat(self) -> PoolStat:
        """Return the pool's current statistics."""
        return PoolStat(
            block_size=self._block_size,
            block_count=len(self._blocks),
            large_block_count=0,
            used=self._used,
            unused=self._unused,
        )
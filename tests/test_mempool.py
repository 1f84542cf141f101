import pytest

from cfkit.mempool import DEFAULT_BLOCK_SIZE, MemoryPool


def test_fresh_pool_stat():
    pool = MemoryPool(1024)
    stat = pool.stat()
    assert stat.block_size == 1024
    assert stat.block_count == 1
    assert stat.large_block_count == 0
    assert stat.used == 0
    assert stat.unused == 1024


def test_default_block_size():
    assert MemoryPool().stat().block_size == DEFAULT_BLOCK_SIZE


def test_alloc_returns_requested_length():
    pool = MemoryPool(64)
    chunk = pool.alloc(10)
    assert len(chunk) == 10
    assert pool.stat().used == 10


def test_used_is_sum_of_sizes():
    pool = MemoryPool(32)
    sizes = [3, 7, 1, 16, 30, 5]
    for size in sizes:
        pool.alloc(size)
    assert pool.stat().used == sum(sizes)


def test_new_block_when_full():
    pool = MemoryPool(16)
    pool.alloc(16)
    assert pool.stat().block_count == 1
    assert pool.stat().unused == 0
    pool.alloc(16)
    assert pool.stat().block_count == 2


def test_chunks_do_not_overlap():
    pool = MemoryPool(32)
    chunks = [pool.alloc(n) for n in (3, 5, 7, 9, 11)]
    for marker, chunk in enumerate(chunks, start=1):
        chunk[:] = bytes([marker]) * len(chunk)
    for marker, chunk in enumerate(chunks, start=1):
        assert bytes(chunk) == bytes([marker]) * len(chunk)


def test_unused_never_exceeds_block():
    pool = MemoryPool(40)
    for size in (1, 2, 3, 4, 5, 6, 7, 8):
        pool.alloc(size)
        stat = pool.stat()
        assert 0 <= stat.unused <= 40


@pytest.mark.parametrize("size", [0, -1, 65])
def test_bad_alloc_sizes(size):
    pool = MemoryPool(64)
    with pytest.raises(ValueError):
        pool.alloc(size)


def test_bad_block_size():
    with pytest.raises(ValueError):
        MemoryPool(0)
import pytest

from cfkit.bytebuf import ByteReader, ByteWriter


def test_reader_reads_in_order():
    r = ByteReader(b"hello world")
    assert r.get(5) == b"hello"
    assert r.get(1) == b" "
    assert r.get(5) == b"world"
    assert r.remaining == 0
    assert r.pos == len(b"hello world")


def test_reader_underrun_keeps_position():
    r = ByteReader(b"abc")
    r.get(2)
    with pytest.raises(EOFError):
        r.get(2)
    assert r.pos == 2
    assert r.get(1) == b"c"


def test_reader_zero_and_negative():
    r = ByteReader(b"ab")
    assert r.get(0) == b""
    with pytest.raises(ValueError):
        r.get(-1)


def test_writer_appends():
    w = ByteWriter(8)
    w.put(b"abc")
    w.put(bytearray(b"de"))
    assert w.data == b"abcde"
    assert w.length == 5


def test_writer_fills_exactly_then_rejects():
    w = ByteWriter(4)
    w.put(b"abcd")
    with pytest.raises(BufferError):
        w.put(b"e")
    assert w.data == b"abcd"


def test_writer_rejects_oversize_without_change():
    w = ByteWriter(3)
    w.put(b"a")
    with pytest.raises(BufferError):
        w.put(b"xyz")
    assert w.data == b"a"


def test_writer_reader_round_trip():
    w = ByteWriter(16)
    for chunk in (b"one", b"two", b"three"):
        w.put(chunk)
    r = ByteReader(w.data)
    assert [r.get(3), r.get(3), r.get(5)] == [b"one", b"two", b"three"]
import pytest

from cfkit.array import Array


def make(*elms, size=2, capacity=4):
    arr = Array(size, capacity)
    for e in elms:
        arr.insert(-1, e)
    return arr


def test_new_array_is_empty():
    arr = Array(4, 8)
    assert len(arr) == 0
    assert arr.capacity == 8
    assert arr.elm_size == 4


def test_append_and_get_pads_elements():
    arr = make(b"a", b"bc")
    assert len(arr) == 2
    assert arr.get(0) == b"a\0"
    assert arr.get(1) == b"bc"
    assert arr.get(-1) == b"bc"


def test_insert_at_front_shifts():
    arr = make(b"aa", b"bb")
    arr.insert(0, b"zz")
    assert [arr.get(i) for i in range(len(arr))] == [b"zz", b"aa", b"bb"]


def test_insert_at_length_appends():
    arr = make(b"aa")
    arr.insert(1, b"bb")
    assert arr.get(-1) == b"bb"


def test_capacity_doubles_when_full():
    arr = Array(1, 2)
    for e in (b"a", b"b", b"c"):
        arr.insert(-1, e)
    assert arr.capacity == 2 * 2
    assert len(arr) == 3


def test_erase_middle_and_last():
    arr = make(b"aa", b"bb", b"cc")
    arr.erase(1)
    assert [arr.get(0), arr.get(1)] == [b"aa", b"cc"]
    arr.erase(-1)
    assert len(arr) == 1
    assert arr.get(-1) == b"aa"


def test_set_replaces():
    arr = make(b"aa", b"bb")
    arr.set(0, b"xx")
    arr.set(-1, b"y")
    assert arr.get(0) == b"xx"
    assert arr.get(1) == b"y\0"


@pytest.mark.parametrize("index", [2, -2, 10])
def test_get_out_of_range(index):
    arr = make(b"aa", b"bb")
    with pytest.raises(IndexError):
        arr.get(index)


def test_empty_array_rejects_last_access():
    arr = Array(2, 2)
    with pytest.raises(IndexError):
        arr.get(-1)
    with pytest.raises(IndexError):
        arr.erase(-1)
    with pytest.raises(IndexError):
        arr.set(-1, b"a")


def test_insert_out_of_range():
    arr = make(b"aa")
    with pytest.raises(IndexError):
        arr.insert(2, b"bb")
    with pytest.raises(IndexError):
        arr.insert(-2, b"bb")


def test_element_too_long():
    arr = Array(2, 2)
    with pytest.raises(ValueError):
        arr.insert(-1, b"abc")


def test_find_default_and_custom():
    arr = make(b"aa", b"b", b"cc")
    assert arr.find(b"b") == 1
    assert arr.find(b"cc") == 2
    assert arr.find(b"zz") is None
    assert arr.find(b"c", lambda e, stored: stored.startswith(e)) == 2


def test_reserve():
    arr = make(b"aa")
    arr.reserve(-1)
    assert len(arr) == arr.capacity
    assert all(arr.get(i) == bytes(2) for i in range(len(arr)))
    arr.reserve(1)
    assert len(arr) == 1
    with pytest.raises(ValueError):
        arr.reserve(arr.capacity + 1)


def test_reset():
    arr = make(b"aa", b"bb")
    cap = arr.capacity
    arr.reset()
    assert len(arr) == 0
    assert arr.capacity == cap


@pytest.mark.parametrize("size,cap", [(0, 4), (2, 0)])
def test_bad_construction(size, cap):
    with pytest.raises(ValueError):
        Array(size, cap)
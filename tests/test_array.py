import pytest

from hostlink.common import ValueType
from hostlink.containers.array import Array


def make_filled(values):
    arr = Array(ValueType.INT, len(values))
    for i, v in enumerate(values):
        arr[i] = v
    return arr


def test_length_matches_size():
    assert len(Array(ValueType.INT, 5)) == 5


def test_empty_array():
    arr = Array(ValueType.FLOAT, 0)
    assert len(arr) == 0
    assert list(arr) == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Array(ValueType.INT, -1)


def test_set_and_get_round_trip():
    arr = make_filled([3, 1, 4])
    assert [arr[0], arr[1], arr[2]] == [3, 1, 4]


def test_out_of_range_get():
    arr = make_filled([1, 2, 3])
    with pytest.raises(IndexError):
        arr.__getitem__(3)
    assert list(arr) == [1, 2, 3]


def test_negative_index_rejected():
    arr = make_filled([1, 2])
    with pytest.raises(IndexError):
        arr.__getitem__(-1)
    assert list(arr) == [1, 2]


def test_out_of_range_set():
    arr = make_filled([1, 2])
    with pytest.raises(IndexError):
        arr[2] = 7
    assert list(arr) == [1, 2]
    assert len(arr) == 2


def test_front_and_back():
    arr = make_filled([10, 20, 30])
    assert arr.front() == 10
    assert arr.back() == 30


def test_front_of_empty_raises():
    with pytest.raises(IndexError):
        Array(ValueType.INT, 0).front()


def test_back_of_empty_raises():
    with pytest.raises(IndexError):
        Array(ValueType.INT, 0).back()


def test_iteration_forward_and_reverse():
    arr = make_filled([1, 2, 3])
    assert list(arr) == [1, 2, 3]
    assert list(reversed(arr)) == [3, 2, 1]


def test_fill_sets_every_slot():
    arr = Array(ValueType.CHAR, 4)
    arr.fill("x")
    assert list(arr) == ["x", "x", "x", "x"]


def test_fill_keeps_size():
    arr = Array(ValueType.INT, 6)
    arr.fill(9)
    assert len(arr) == 6


def test_swap_exchanges_contents_and_type():
    a = make_filled([1, 2, 3])
    b = Array(ValueType.STRING, 1)
    b[0] = "hello"
    a.swap(b)
    assert list(a) == ["hello"]
    assert a.value_type is ValueType.STRING
    assert list(b) == [1, 2, 3]
    assert b.value_type is ValueType.INT


def test_swap_twice_restores():
    a = make_filled([5, 6])
    b = make_filled([7])
    a.swap(b)
    a.swap(b)
    assert list(a) == [5, 6]
    assert list(b) == [7]


def test_swap_with_non_array_raises():
    with pytest.raises(TypeError):
        Array(ValueType.INT, 1).swap([1])
import pytest

from hostlink.common import ValueType
from hostlink.containers.vector import Vector


def make_vector(values):
    v = Vector(ValueType.INT)
    v.append_range(values)
    return v


def test_new_vector_is_empty():
    v = Vector(ValueType.INT)
    assert len(v) == 0
    assert v.capacity() == 0


def test_push_back_and_index():
    v = Vector(ValueType.INT)
    for x in [4, 5, 6]:
        v.push_back(x)
    assert list(v) == [4, 5, 6]
    assert v[1] == 5


def test_first_push_allocates_one_slot():
    v = Vector(ValueType.INT)
    v.push_back(1)
    assert v.capacity() == 1


def test_capacity_never_below_length():
    v = Vector(ValueType.INT)
    for x in range(37):
        v.push_back(x)
        assert v.capacity() >= len(v)


def test_push_back_doubles_capacity_when_full():
    v = Vector(ValueType.INT)
    v.push_back(0)
    for x in range(20):
        before = v.capacity()
        full = len(v) == before
        v.push_back(x)
        if full:
            assert v.capacity() == before * 2
        else:
            assert v.capacity() == before


def test_reserve_grows_only():
    v = Vector(ValueType.INT)
    v.reserve(10)
    assert v.capacity() == 10
    v.reserve(3)
    assert v.capacity() == 10


def test_shrink_to_fit_matches_length():
    v = Vector(ValueType.INT)
    v.reserve(16)
    v.append_range([1, 2, 3])
    v.shrink_to_fit()
    assert v.capacity() == len(v)


def test_shrink_to_fit_on_empty_keeps_capacity():
    v = Vector(ValueType.INT)
    v.reserve(8)
    v.shrink_to_fit()
    assert v.capacity() == 8


def test_clear_keeps_capacity():
    v = make_vector([1, 2, 3])
    cap = v.capacity()
    v.clear()
    assert len(v) == 0
    assert v.capacity() == cap


def test_append_range_grows_to_exact_need():
    v = Vector(ValueType.INT)
    v.append_range([1, 2, 3, 4, 5])
    assert v.capacity() == len(v)
    assert list(v) == [1, 2, 3, 4, 5]


def test_append_empty_range_is_noop():
    v = make_vector([1])
    v.append_range([])
    assert list(v) == [1]


def test_insert_in_middle():
    v = make_vector([1, 3])
    pos = v.insert(1, 2)
    assert pos == 1
    assert list(v) == [1, 2, 3]


def test_insert_at_end():
    v = make_vector([1, 2])
    pos = v.insert(2, 3)
    assert pos == 2
    assert list(v) == [1, 2, 3]


def test_insert_into_empty():
    v = Vector(ValueType.INT)
    assert v.insert(0, 9) == 0
    assert list(v) == [9]


def test_insert_out_of_range():
    v = make_vector([1])
    with pytest.raises(IndexError):
        v.insert(5, 0)


def test_insert_range_front():
    v = make_vector([4, 5])
    pos = v.insert_range(0, [1, 2, 3])
    assert pos == 0
    assert list(v) == [1, 2, 3, 4, 5]
    assert v.capacity() >= len(v)


def test_insert_range_out_of_range():
    v = make_vector([1])
    with pytest.raises(IndexError):
        v.insert_range(-1, [2])


def test_erase_middle():
    v = make_vector([1, 2, 3, 4, 5])
    pos = v.erase(1, 3)
    assert pos == 1
    assert list(v) == [1, 4, 5]


def test_erase_front():
    v = make_vector([1, 2, 3])
    assert v.erase(0, 2) == 0
    assert list(v) == [3]


def test_erase_tail():
    v = make_vector([1, 2, 3])
    assert v.erase(1, 3) == 1
    assert list(v) == [1]


def test_erase_everything():
    v = make_vector([1, 2, 3])
    v.erase(0, 3)
    assert len(v) == 0


def test_erase_empty_range_changes_nothing():
    v = make_vector([1, 2])
    v.erase(1, 1)
    assert list(v) == [1, 2]


def test_erase_bad_range():
    v = make_vector([1, 2])
    with pytest.raises(IndexError):
        v.erase(1, 3)


def test_pop_back():
    v = make_vector([1, 2])
    v.pop_back()
    assert list(v) == [1]


def test_pop_back_on_empty_is_noop():
    v = Vector(ValueType.INT)
    v.pop_back()
    assert len(v) == 0


def test_front_back():
    v = make_vector([7, 8, 9])
    assert v.front() == 7
    assert v.back() == 9


def test_front_of_empty_raises():
    with pytest.raises(IndexError):
        Vector(ValueType.INT).front()


def test_back_of_empty_raises():
    with pytest.raises(IndexError):
        Vector(ValueType.INT).back()


def test_getitem_out_of_range():
    v = make_vector([1])
    with pytest.raises(IndexError):
        v.__getitem__(1)
    assert list(v) == [1]


def test_setitem_round_trip():
    v = make_vector([1, 2])
    v[0] = 42
    assert v[0] == 42


def test_reversed():
    v = make_vector([1, 2, 3])
    assert list(reversed(v)) == [3, 2, 1]


def test_resize_grow_pads_with_value():
    v = make_vector([1])
    v.resize(4, 0)
    assert list(v) == [1, 0, 0, 0]
    assert v.capacity() >= 4


def test_resize_shrink_truncates():
    v = make_vector([1, 2, 3, 4])
    cap = v.capacity()
    v.resize(2, 0)
    assert list(v) == [1, 2]
    assert v.capacity() == cap


def test_resize_negative_rejected():
    with pytest.raises(ValueError):
        make_vector([1]).resize(-1, 0)


def test_swap_exchanges_contents_and_capacity():
    a = make_vector([1, 2, 3])
    b = Vector(ValueType.INT)
    b.reserve(10)
    b.push_back(9)
    a.swap(b)
    assert list(a) == [9]
    assert a.capacity() == 10
    assert list(b) == [1, 2, 3]


def test_swap_different_types_rejected():
    a = make_vector([1])
    b = Vector(ValueType.FLOAT)
    with pytest.raises(TypeError):
        a.swap(b)
    assert list(a) == [1]
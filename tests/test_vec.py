import pytest

from utilkit.vec import GROW_FACTOR, INITIAL_CAPACITY, Vec


def test_push_and_iterate():
    v = Vec()
    for i in range(5):
        v.push(i)
    assert list(v) == [0, 1, 2, 3, 4]
    assert len(v) == 5


def test_capacity_growth():
    v = Vec()
    assert v.capacity() == 0
    v.push("a")
    assert v.capacity() == INITIAL_CAPACITY
    for i in range(INITIAL_CAPACITY):
        v.push(i)
    assert v.capacity() == INITIAL_CAPACITY * GROW_FACTOR
    assert len(v) <= v.capacity()


def test_pop_first_last():
    v = Vec([1, 2, 3])
    assert v.first() == 1
    assert v.last() == 3
    assert v.pop() == 3
    assert list(v) == [1, 2]


@pytest.mark.parametrize("op", ["pop", "first", "last"])
def test_empty_access_raises(op):
    with pytest.raises(IndexError):
        getattr(Vec(), op)()


def test_get_set_bounds():
    v = Vec(["x", "y"])
    v[1] = "z"
    assert v[1] == "z"
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(IndexError):
        v[-1]
    with pytest.raises(IndexError):
        v[2] = "w"


def test_insert_positions():
    v = Vec([1, 2, 3])
    v.insert(0, 0)
    v.insert(len(v), 4)
    v.insert(2, 9)
    assert list(v) == [0, 1, 9, 2, 3, 4]
    with pytest.raises(IndexError):
        v.insert(len(v) + 1, 5)


def test_remove_keeps_order():
    v = Vec([10, 20, 30, 40])
    assert v.remove(1) == 20
    assert list(v) == [10, 30, 40]
    with pytest.raises(IndexError):
        v.remove(3)


def test_remove_fast_moves_last():
    v = Vec([10, 20, 30, 40])
    assert v.remove_fast(0) == 10
    assert list(v) == [40, 20, 30]
    assert v.remove_fast(2) == 30
    assert list(v) == [40, 20]


def test_sort_with_and_without_key():
    v = Vec([3, 1, 2])
    v.sort()
    assert list(v) == [1, 2, 3]
    v.sort(key=lambda x: -x)
    assert list(v) == [3, 2, 1]


def test_clear_keeps_capacity():
    v = Vec([1, 2, 3])
    cap = v.capacity()
    v.clear()
    assert len(v) == 0
    assert v.capacity() == cap


def test_shrink_and_reserve():
    v = Vec([1, 2, 3])
    v.shrink()
    assert v.capacity() == len(v)
    v.reserve(100)
    assert v.capacity() == 100
    v.reserve(10)
    assert v.capacity() == 100
    empty = Vec()
    empty.reserve(4)
    empty.shrink()
    assert empty.capacity() == 4
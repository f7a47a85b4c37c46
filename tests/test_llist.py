import pytest

from utilkit.llist import LinkedList


def test_empty_list():
    ll = LinkedList()
    assert len(ll) == 0
    assert ll.first_node() is None
    assert list(ll) == []


def test_append_keeps_order():
    ll = LinkedList()
    for i in range(5):
        ll.append(i)
    assert list(ll) == [0, 1, 2, 3, 4]
    assert len(ll) == 5


def test_construct_from_items():
    ll = LinkedList(range(3))
    assert list(ll) == [0, 1, 2]


def test_node_traversal():
    ll = LinkedList(["a", "b", "c"])
    node = ll.first_node()
    seen = []
    while node is not None:
        seen.append(node.data)
        node = node.next
    assert seen == ["a", "b", "c"]


def test_insert_beginning():
    ll = LinkedList(range(5))
    ll.insert(0, 15)
    assert list(ll) == [15, 0, 1, 2, 3, 4]
    assert ll.first_node().data == 15


def test_insert_middle():
    ll = LinkedList(range(10))
    ll.insert(2, 15)
    items = list(ll)
    assert items[2] == 15
    assert items[1] == 1
    assert items[3] == 2
    assert len(ll) == 11


def test_insert_past_end_appends():
    ll = LinkedList(range(5))
    ll.insert(100, 15)
    assert list(ll)[-1] == 15
    ll.append(16)
    assert list(ll)[-2:] == [15, 16]


def test_insert_into_empty():
    ll = LinkedList()
    ll.insert(3, "x")
    assert list(ll) == ["x"]


def test_insert_negative_raises():
    ll = LinkedList(range(3))
    with pytest.raises(IndexError):
        ll.insert(-1, 9)


def test_remove_first_and_last():
    ll = LinkedList(range(5))
    assert ll.remove(0) == 0
    assert ll.remove(3) == 4
    assert list(ll) == [1, 2, 3]
    ll.append(7)
    assert list(ll) == [1, 2, 3, 7]


def test_remove_middle():
    ll = LinkedList(range(10))
    assert ll.remove(3) == 3
    assert len(ll) == 9
    assert 3 not in list(ll)


def test_remove_only_element():
    ll = LinkedList([42])
    assert ll.remove(0) == 42
    assert ll.first_node() is None
    ll.append(1)
    assert list(ll) == [1]


@pytest.mark.parametrize("idx", [5, 6, -1])
def test_remove_out_of_range(idx):
    ll = LinkedList(range(5))
    with pytest.raises(IndexError):
        ll.remove(idx)
    assert len(ll) == 5
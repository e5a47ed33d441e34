import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import Node, SinglyLinkedList


def test_append_keeps_order_and_counts():
    linked = SinglyLinkedList()
    for value in (3, 1, 2):
        linked.append(value)
    assert list(linked) == [3, 1, 2]
    assert len(linked) == 3


def test_prepend():
    linked = SinglyLinkedList([2, 3])
    linked.prepend(1)
    assert list(linked) == [1, 2, 3]
    linked.append(4)
    assert list(linked) == [1, 2, 3, 4]


def test_prepend_on_empty_then_append():
    linked = SinglyLinkedList()
    linked.prepend("a")
    linked.append("b")
    assert list(linked) == ["a", "b"]


def test_insert_at_middle_and_front():
    linked = SinglyLinkedList(["a", "c"])
    linked.insert_at(2, "b")
    assert list(linked) == ["a", "b", "c"]
    linked.insert_at(1, "z")
    assert list(linked) == ["z", "a", "b", "c"]
    assert len(linked) == 4


@pytest.mark.parametrize("position", [0, -1, 3])
def test_insert_at_invalid_position(position):
    linked = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        linked.insert_at(position, 9)
    assert list(linked) == [1, 2]


def test_delete_first_and_last():
    linked = SinglyLinkedList([1, 2, 3])
    assert linked.delete_first() == 1
    assert linked.delete_last() == 3
    assert list(linked) == [2]
    assert linked.delete_last() == 2
    assert list(linked) == []
    linked.append(7)
    assert list(linked) == [7]


@pytest.mark.parametrize("method", ["delete_first", "delete_last"])
def test_delete_from_empty(method):
    with pytest.raises(IndexError):
        getattr(SinglyLinkedList(), method)()


def test_delete_at_tail_updates_append():
    linked = SinglyLinkedList([1, 2, 3])
    assert linked.delete_at(3) == 3
    linked.append(4)
    assert list(linked) == [1, 2, 4]


@pytest.mark.parametrize("position", [0, 4])
def test_delete_at_invalid(position):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.delete_at(position)


def test_reverse_then_append():
    linked = SinglyLinkedList([1, 2, 3])
    linked.reverse()
    assert list(linked) == [3, 2, 1]
    linked.append(0)
    assert list(linked) == [3, 2, 1, 0]


def test_head_node_links():
    linked = SinglyLinkedList(["x", "y"])
    assert linked.head == Node("x", Node("y"))


@given(st.lists(st.integers()))
def test_reverse_twice_is_identity(values):
    linked = SinglyLinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]
    linked.reverse()
    assert list(linked) == values
    assert len(linked) == len(values)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_delete_at_matches_list(values, data):
    position = data.draw(st.integers(1, len(values)))
    linked = SinglyLinkedList(values)
    removed = linked.delete_at(position)
    assert removed == values[position - 1]
    expected = values[: position - 1] + values[position:]
    assert list(linked) == expected
    assert len(linked) == len(expected)


@given(st.lists(st.integers(), min_size=1), st.integers(), st.data())
def test_insert_then_delete_round_trip(values, value, data):
    position = data.draw(st.integers(1, len(values)))
    linked = SinglyLinkedList(values)
    linked.insert_at(position, value)
    assert list(linked)[position - 1] == value
    assert linked.delete_at(position) == value
    assert list(linked) == values
import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stack_array import ArrayStack, StackOverflowError, StackUnderflowError


def test_push_pop_sequence_from_demo():
    stack = ArrayStack()
    for value in (1, 2, 3, 4):
        stack.push(value)
    assert stack.pop() == 4
    assert stack.pop() == 3
    stack.push(5)
    assert list(stack) == [5, 2, 1]
    assert len(stack) == 3


def test_default_capacity_is_ten():
    stack = ArrayStack()
    for value in range(10):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(10)
    assert len(stack) == 10


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        ArrayStack().pop()


def test_space_freed_after_pop():
    stack = ArrayStack(1)
    stack.push("x")
    assert stack.pop() == "x"
    stack.push("y")
    assert list(stack) == ["y"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayStack(-1)


@given(st.lists(st.integers(), max_size=10))
def test_lifo_order(values):
    stack = ArrayStack(10)
    for value in values:
        stack.push(value)
    assert list(stack) == values[::-1]
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0
"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Optional[Node] = None


class SinglyLinkedList:
    """A singly linked list that tracks its head, tail and length.

    Positions are 1-based.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the beginning of the list."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def _node_at(self, position: int) -> Node:
        node = self.head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= self._size:
            raise IndexError(
                f"invalid position {position}: list has {self._size} element(s)"
            )

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``.

        Valid positions run from 1 to the current length.
        """
        self._check_position(position)
        if position == 1:
            self.prepend(value)
            return
        before = self._node_at(position - 1)
        before.next = Node(value, before.next)
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def delete_last(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        if self._size == 1:
            return self.delete_first()
        before = self._node_at(self._size - 1)
        value = self._tail.value
        before.next = None
        self._tail = before
        self._size -= 1
        return value

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at ``position``."""
        self._check_position(position)
        if position == 1:
            return self.delete_first()
        before = self._node_at(position - 1)
        removed = before.next
        assert removed is not None
        before.next = removed.next
        if removed is self._tail:
            self._tail = before
        self._size -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the order of the list in place."""
        previous: Optional[Node] = None
        current = self.head
        self._tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"
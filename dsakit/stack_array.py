"""A bounded LIFO stack with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 10


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class ArrayStack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) == self.capacity:
            raise StackOverflowError("stack is overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise StackUnderflowError("stack is underflow")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self.capacity})"
"""A bounded FIFO queue backed by a fixed number of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 10


class QueueOverflowError(Exception):
    """Raised when a value is enqueued after every slot has been used."""


class QueueUnderflowError(Exception):
    """Raised when a value is dequeued from an empty queue."""


class ArrayQueue:
    """A linear, non-circular queue over ``capacity`` slots.

    Each enqueue takes the next free slot, and a dequeued slot is not
    reused until the queue has been emptied completely. A full run of
    ``capacity`` enqueues without emptying the queue therefore overflows,
    even if some values have been dequeued in between.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        if len(self._slots) == self.capacity:
            raise QueueOverflowError("queue is overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self:
            raise QueueUnderflowError("queue is underflow")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots = []
            self._front = 0
        return value

    def __iter__(self) -> Iterator[Any]:
        """Yield the queued values from front to rear."""
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r}, capacity={self.capacity})"
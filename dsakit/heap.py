"""Binary heaps kept in Python lists.

Heap positions are 1-based: position ``i`` holds ``values[i - 1]``, its
children sit at ``left(i)`` and ``right(i)`` and its parent at ``parent(i)``.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any


def left(i: int) -> int:
    """Position of the left child of heap position ``i``."""
    return 2 * i


def right(i: int) -> int:
    """Position of the right child of heap position ``i``."""
    return 2 * i + 1


def parent(i: int) -> int:
    """Position of the parent of heap position ``i``."""
    return i // 2


def is_max_heap(values: Sequence[Any]) -> bool:
    """Return True if no element is larger than its parent."""
    return all(
        not values[parent(i) - 1] < values[i - 1] for i in range(2, len(values) + 1)
    )


def is_min_heap(values: Sequence[Any]) -> bool:
    """Return True if no element is smaller than its parent."""
    return all(
        not values[i - 1] < values[parent(i) - 1] for i in range(2, len(values) + 1)
    )


def _sift_down(
    values: MutableSequence[Any],
    size: int,
    i: int,
    outranks: Callable[[Any, Any], bool],
) -> None:
    if not 0 <= size <= len(values):
        raise ValueError(f"heap size {size} outside 0..{len(values)}")
    if i < 1:
        raise ValueError(f"heap positions start at 1, got {i}")
    while True:
        best = i
        for child in (left(i), right(i)):
            if child <= size and outranks(values[child - 1], values[best - 1]):
                best = child
        if best == i:
            return
        values[i - 1], values[best - 1] = values[best - 1], values[i - 1]
        i = best


def max_heapify(values: MutableSequence[Any], size: int, i: int) -> None:
    """Sink position ``i`` within the first ``size`` elements to restore a max-heap."""
    _sift_down(values, size, i, operator.gt)


def min_heapify(values: MutableSequence[Any], size: int, i: int) -> None:
    """Sink position ``i`` within the first ``size`` elements to restore a min-heap."""
    _sift_down(values, size, i, operator.lt)


def build_max_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a max-heap."""
    size = len(values)
    for i in range(size // 2, 0, -1):
        max_heapify(values, size, i)


def build_min_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a min-heap."""
    size = len(values)
    for i in range(size // 2, 0, -1):
        min_heapify(values, size, i)


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place into ascending order using a max-heap."""
    build_max_heap(values)
    for end in range(len(values), 1, -1):
        values[0], values[end - 1] = values[end - 1], values[0]
        max_heapify(values, end - 1, 1)
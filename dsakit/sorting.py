"""Classic comparison sorts. Each returns a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from dsakit.heap import heap_sort


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(values)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def heapsort(values: Iterable[Any]) -> list[Any]:
    """Sort using a binary max-heap."""
    result = list(values)
    heap_sort(result)
    return result
"""Positional insertion and deletion on plain sequences, plus formatting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def _check_position(position: int, upper: int) -> None:
    if not 1 <= position <= upper:
        raise IndexError(
            f"invalid position {position}: expected a value from 1 to {upper}"
        )


def insert_at(items: Sequence[Any], position: int, value: Any) -> list[Any]:
    """Return a new list with ``value`` inserted at 1-based ``position``.

    Valid positions run from 1 to ``len(items) + 1``; any other position
    raises ``IndexError``.
    """
    _check_position(position, len(items) + 1)
    result = list(items)
    result.insert(position - 1, value)
    return result


def delete_at(items: Sequence[Any], position: int) -> list[Any]:
    """Return a new list without the element at 1-based ``position``.

    Valid positions run from 1 to ``len(items)``; any other position
    raises ``IndexError``.
    """
    _check_position(position, len(items))
    result = list(items)
    del result[position - 1]
    return result


def format_items(items: Iterable[Any]) -> str:
    """Return the items as text, separated by single spaces."""
    return " ".join(str(item) for item in items)
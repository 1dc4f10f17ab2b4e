"""Helpers that modify a list in place instead of building a new one."""

from __future__ import annotations

import random
from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")


def filter_in_place(
    collection: MutableSequence[T], predicate: Callable[[T], bool]
) -> list[T]:
    """Move the items that satisfy ``predicate`` to the front of ``collection``.

    The kept items keep their order.  Positions after the kept prefix are left
    untouched, and the kept prefix is returned as a list.
    """
    kept = 0
    for item in collection:
        if predicate(item):
            collection[kept] = item
            kept += 1
    return list(collection[:kept])


def filter_in_place_indexed(
    collection: MutableSequence[T], predicate: Callable[[T, int], bool]
) -> list[T]:
    """Like :func:`filter_in_place`, but ``predicate`` also receives the index."""
    kept = 0
    for index, item in enumerate(collection):
        if predicate(item, index):
            collection[kept] = item
            kept += 1
    return list(collection[:kept])


def map_in_place(collection: MutableSequence[T], fn: Callable[[T], T]) -> None:
    """Replace every item of ``collection`` with ``fn(item)``."""
    collection[:] = [fn(item) for item in collection]


def map_in_place_indexed(
    collection: MutableSequence[T], fn: Callable[[T, int], T]
) -> None:
    """Replace every item of ``collection`` with ``fn(item, index)``."""
    collection[:] = [fn(item, index) for index, item in enumerate(collection)]


def shuffle(collection: MutableSequence[T]) -> None:
    """Shuffle ``collection`` in place (Fisher-Yates)."""
    random.shuffle(collection)


def reverse(collection: MutableSequence[T]) -> None:
    """Reverse ``collection`` in place."""
    collection.reverse()


def fill(collection: MutableSequence[T], initial: T) -> None:
    """Set every position of ``collection`` to ``initial``."""
    collection[:] = [initial] * len(collection)
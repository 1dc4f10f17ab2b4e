"""Dropping, counting, slicing and rewriting parts of lists."""

from __future__ import annotations

from collections import Counter
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def _check_not_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def drop(collection: Sequence[T], n: int) -> list[T]:
    """Return the items after the first ``n``."""
    _check_not_negative(n, "n")
    return list(collection[n:])


def drop_right(collection: Sequence[T], n: int) -> list[T]:
    """Return the items before the last ``n``."""
    _check_not_negative(n, "n")
    if len(collection) <= n:
        return []
    return list(collection[: len(collection) - n])


def drop_while(collection: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    """Drop leading items while ``predicate`` holds and return the rest."""
    start = 0
    for item in collection:
        if not predicate(item):
            break
        start += 1
    return list(collection[start:])


def drop_right_while(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> list[T]:
    """Drop trailing items while ``predicate`` holds and return the rest."""
    end = len(collection)
    for item in reversed(collection):
        if not predicate(item):
            break
        end -= 1
    return list(collection[:end])


def drop_by_index(collection: Sequence[T], *args: int) -> list[T]:
    """Return the items whose positions are not among ``args``.

    Negative indexes count back from the end; indexes out of range are ignored.
    """
    size = len(collection)
    dropped = {index + size if index < 0 else index for index in args}
    return [item for position, item in enumerate(collection) if position not in dropped]


def reject(collection: Iterable[T], predicate: Callable[[T, int], bool]) -> list[T]:
    """Return the items for which ``predicate(item, index)`` is false."""
    return [item for index, item in enumerate(collection) if not predicate(item, index)]


def reject_map(
    collection: Iterable[T], callback: Callable[[T, int], tuple[R, bool]]
) -> list[R]:
    """Map items with ``callback(item, index) -> (value, flag)`` keeping values whose flag is false."""
    result: list[R] = []
    for index, item in enumerate(collection):
        value, flag = callback(item, index)
        if not flag:
            result.append(value)
    return result


def filter_reject(
    collection: Iterable[T], predicate: Callable[[T, int], bool]
) -> tuple[list[T], list[T]]:
    """Split into the items ``predicate`` keeps and the ones it rejects."""
    kept: list[T] = []
    rejected: list[T] = []
    for index, item in enumerate(collection):
        (kept if predicate(item, index) else rejected).append(item)
    return kept, rejected


def count(collection: Iterable[T], value: T) -> int:
    """Count the items equal to ``value``."""
    return sum(1 for item in collection if item == value)


def count_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Count the items for which ``predicate`` is true."""
    return sum(1 for item in collection if predicate(item))


def count_values(collection: Iterable[K]) -> dict[K, int]:
    """Count how often each distinct item occurs."""
    return dict(Counter(collection))


def count_values_by(collection: Iterable[T], mapper: Callable[[T], K]) -> dict[K, int]:
    """Count how often each ``mapper(item)`` result occurs."""
    return dict(Counter(mapper(item) for item in collection))


def subset(collection: Sequence[T], offset: int, length: int) -> list[T]:
    """Return up to ``length`` items starting at ``offset``, never failing on overflow.

    A negative offset counts back from the end.
    """
    _check_not_negative(length, "length")
    size = len(collection)
    if offset < 0:
        offset = max(size + offset, 0)
    if offset > size:
        return []
    return list(collection[offset : offset + min(length, size - offset)])


def slice_range(collection: Sequence[T], start: int, end: int) -> list[T]:
    """Return the items from ``start`` up to ``end``, with both bounds clamped to the list."""
    if start >= end:
        return []
    size = len(collection)
    start = min(max(start, 0), size)
    end = min(max(end, 0), size)
    return list(collection[start:end])


def replace(collection: Iterable[T], old: T, new: T, n: int) -> list[T]:
    """Return a copy with the first ``n`` items equal to ``old`` replaced by ``new``.

    A negative ``n`` replaces every occurrence.
    """
    result: list[T] = []
    remaining = n
    for item in collection:
        if item == old and remaining != 0:
            result.append(new)
            remaining -= 1
        else:
            result.append(item)
    return result


def replace_all(collection: Iterable[T], old: T, new: T) -> list[T]:
    """Return a copy with every item equal to ``old`` replaced by ``new``."""
    return replace(collection, old, new, -1)


def compact(collection: Iterable[T]) -> list[T]:
    """Return the items that are not empty values (None, 0, "", False and the like)."""
    return [item for item in collection if item]


def is_sorted(collection: Sequence[T]) -> bool:
    """Tell whether the items are in non-decreasing order."""
    return all(not (left > right) for left, right in zip(collection, collection[1:]))


def is_sorted_by_key(collection: Sequence[T], iteratee: Callable[[T], object]) -> bool:
    """Tell whether ``iteratee(item)`` is non-decreasing across the items."""
    keys = [iteratee(item) for item in collection]
    return all(not (left > right) for left, right in zip(keys, keys[1:]))


def splice(collection: Sequence[T], index: int, *args: T) -> list[T]:
    """Return a copy with ``args`` inserted at ``index``.

    A negative index counts back from the end; indexes beyond either end
    append or prepend.
    """
    items = list(collection)
    size = len(items)
    if not args:
        return items
    if index > size:
        return items + list(args)
    if index < -size:
        return list(args) + items
    if index < 0:
        index += size
    return items[:index] + list(args) + items[index:]
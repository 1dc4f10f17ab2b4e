"""Building, transforming and grouping lists."""

from __future__ import annotations

import copy
from typing import Callable, Hashable, Iterable, Optional, Sequence, TypeVar

from xtlo import mutable

T = TypeVar("T")
R = TypeVar("R")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _check_count(count: int, name: str) -> None:
    if count < 0:
        raise ValueError(f"{name}: count must not be negative")


def filter_by(collection: Iterable[T], predicate: Callable[[T, int], bool]) -> list[T]:
    """Return the items for which ``predicate(item, index)`` is true."""
    return [item for index, item in enumerate(collection) if predicate(item, index)]


def map_items(collection: Iterable[T], iteratee: Callable[[T, int], R]) -> list[R]:
    """Return ``iteratee(item, index)`` for every item."""
    return [iteratee(item, index) for index, item in enumerate(collection)]


def uniq_map(collection: Iterable[T], iteratee: Callable[[T, int], K]) -> list[K]:
    """Map every item and keep only the first occurrence of each result."""
    return list(dict.fromkeys(map_items(collection, iteratee)))


def filter_map(
    collection: Iterable[T], callback: Callable[[T, int], tuple[R, bool]]
) -> list[R]:
    """Map and filter in one pass.

    ``callback(item, index)`` returns ``(value, keep)``; values with a true
    ``keep`` are collected.
    """
    result: list[R] = []
    for index, item in enumerate(collection):
        value, keep = callback(item, index)
        if keep:
            result.append(value)
    return result


def flat_map(
    collection: Iterable[T], iteratee: Callable[[T, int], Optional[Iterable[R]]]
) -> list[R]:
    """Map every item to a sequence and concatenate them; None adds nothing."""
    result: list[R] = []
    for index, item in enumerate(collection):
        produced = iteratee(item, index)
        if produced is not None:
            result.extend(produced)
    return result


def reduce(
    collection: Iterable[T], accumulator: Callable[[R, T, int], R], initial: R
) -> R:
    """Fold the items left to right with ``accumulator(agg, item, index)``."""
    for index, item in enumerate(collection):
        initial = accumulator(initial, item, index)
    return initial


def reduce_right(
    collection: Sequence[T], accumulator: Callable[[R, T, int], R], initial: R
) -> R:
    """Fold the items right to left with ``accumulator(agg, item, index)``."""
    for index in reversed(range(len(collection))):
        initial = accumulator(initial, collection[index], index)
    return initial


def for_each(collection: Iterable[T], iteratee: Callable[[T, int], object]) -> None:
    """Call ``iteratee(item, index)`` for every item in order."""
    for index, item in enumerate(collection):
        iteratee(item, index)


def for_each_while(
    collection: Iterable[T], iteratee: Callable[[T, int], bool]
) -> None:
    """Call ``iteratee(item, index)`` in order until it returns false."""
    for index, item in enumerate(collection):
        if not iteratee(item, index):
            break


def times(count: int, iteratee: Callable[[int], R]) -> list[R]:
    """Return ``iteratee(index)`` for each index below ``count``."""
    _check_count(count, "times")
    return [iteratee(index) for index in range(count)]


def uniq(collection: Iterable[K]) -> list[K]:
    """Return the items without duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(collection))


def uniq_by(collection: Iterable[T], iteratee: Callable[[T], Hashable]) -> list[T]:
    """Remove items whose ``iteratee`` key was already seen, keeping order."""
    seen: set = set()
    result: list[T] = []
    for item in collection:
        key = iteratee(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def group_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, list[T]]:
    """Group the items by ``iteratee(item)``, keeping their order in each group."""
    result: dict[K, list[T]] = {}
    for item in collection:
        result.setdefault(iteratee(item), []).append(item)
    return result


def group_by_map(
    collection: Iterable[T], iteratee: Callable[[T], tuple[K, V]]
) -> dict[K, list[V]]:
    """Group values by key, where ``iteratee(item)`` returns ``(key, value)``."""
    result: dict[K, list[V]] = {}
    for item in collection:
        key, value = iteratee(item)
        result.setdefault(key, []).append(value)
    return result


def chunk(collection: Sequence[T], size: int) -> list[list[T]]:
    """Split into lists of ``size`` items; the last one may be shorter."""
    if size <= 0:
        raise ValueError("Second parameter must be greater than 0")
    return [list(collection[start : start + size]) for start in range(0, len(collection), size)]


def partition_by(
    collection: Iterable[T], iteratee: Callable[[T], K]
) -> list[list[T]]:
    """Split into groups ordered by the first appearance of each key."""
    return list(group_by(collection, iteratee).values())


def flatten(collection: Iterable[Iterable[T]]) -> list[T]:
    """Concatenate the inner sequences into one list."""
    return [item for inner in collection for item in inner]


def interleave(*args: Sequence[T]) -> list[T]:
    """Take items round-robin from each sequence until all are exhausted."""
    longest = max((len(collection) for collection in args), default=0)
    return [
        collection[position]
        for position in range(longest)
        for collection in args
        if position < len(collection)
    ]


def shuffle(collection: list[T]) -> list[T]:
    """Shuffle ``collection`` in place and return it."""
    mutable.shuffle(collection)
    return collection


def reverse(collection: list[T]) -> list[T]:
    """Reverse ``collection`` in place and return it."""
    mutable.reverse(collection)
    return collection


def fill(collection: Sequence[object], initial: T) -> list[T]:
    """Return a list as long as ``collection`` holding copies of ``initial``."""
    return [copy.deepcopy(initial) for _ in collection]


def repeat(count: int, initial: T) -> list[T]:
    """Return ``count`` independent copies of ``initial``."""
    _check_count(count, "repeat")
    return [copy.deepcopy(initial) for _ in range(count)]


def repeat_by(count: int, predicate: Callable[[int], T]) -> list[T]:
    """Return ``predicate(index)`` for each index below ``count``."""
    _check_count(count, "repeat_by")
    return [predicate(index) for index in range(count)]


def key_by(collection: Iterable[V], iteratee: Callable[[V], K]) -> dict[K, V]:
    """Map ``iteratee(item)`` to the item; later items win on equal keys."""
    return {iteratee(item): item for item in collection}


def associate(
    collection: Iterable[T], transform: Callable[[T], tuple[K, V]]
) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pairs ``transform`` returns."""
    return dict(transform(item) for item in collection)


def slice_to_map(
    collection: Iterable[T], transform: Callable[[T], tuple[K, V]]
) -> dict[K, V]:
    """Alias of :func:`associate`."""
    return associate(collection, transform)


def filter_slice_to_map(
    collection: Iterable[T], transform: Callable[[T], tuple[K, V, bool]]
) -> dict[K, V]:
    """Build a dict from ``(key, value, keep)`` triples, skipping false ``keep``."""
    result: dict[K, V] = {}
    for item in collection:
        key, value, keep = transform(item)
        if keep:
            result[key] = value
    return result


def keyify(collection: Iterable[K]) -> set[K]:
    """Return the set of distinct items."""
    return set(collection)
"""Collection helpers whose callbacks run concurrently on threads.

Results keep the order of the input collection.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def _run_all(fn: Callable[..., R], *arg_lists: Iterable) -> list[R]:
    with ThreadPoolExecutor() as executor:
        return list(executor.map(fn, *arg_lists))


def map_items(
    collection: Sequence[T], iteratee: Callable[[T, int], R]
) -> list[R]:
    """Return ``iteratee(item, index)`` for every item, computed concurrently."""
    if not collection:
        return []
    return _run_all(iteratee, collection, range(len(collection)))


def for_each(collection: Sequence[T], iteratee: Callable[[T, int], object]) -> None:
    """Call ``iteratee(item, index)`` for every item concurrently and wait for all."""
    map_items(collection, iteratee)


def times(count: int, iteratee: Callable[[int], R]) -> list[R]:
    """Return ``iteratee(index)`` for each index below ``count``, computed concurrently."""
    if count <= 0:
        return []
    return _run_all(iteratee, range(count))


def group_by(
    collection: Sequence[T], iteratee: Callable[[T], K]
) -> dict[K, list[T]]:
    """Group items by key; keys are computed concurrently, order is kept."""
    keys = map_items(collection, lambda item, _index: iteratee(item))
    result: dict[K, list[T]] = {}
    for key, item in zip(keys, collection):
        result.setdefault(key, []).append(item)
    return result


def partition_by(
    collection: Sequence[T], iteratee: Callable[[T], K]
) -> list[list[T]]:
    """Split items into groups ordered by each key's first appearance."""
    return list(group_by(collection, iteratee).values())
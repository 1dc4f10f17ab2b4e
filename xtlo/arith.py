"""Numeric ranges and aggregates over collections."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")
N = TypeVar("N", int, float, complex)


def range_n(element_num: int) -> list[int]:
    """Return ``abs(element_num)`` integers counting from 0 towards its sign."""
    step = -1 if element_num < 0 else 1
    return list(range(0, element_num, step))


def range_from(start: N, element_num: int) -> list[N]:
    """Return ``abs(element_num)`` numbers from ``start``, stepping by +1 or -1."""
    step = -1 if element_num < 0 else 1
    return [start + step * offset for offset in range(abs(element_num))]


def range_with_steps(start: N, end: N, step: N) -> list[N]:
    """Return numbers from ``start`` up to, but not including, ``end``.

    A zero step, or one pointing away from ``end``, gives an empty list.
    """
    result: list[N] = []
    if start == end or step == 0:
        return result
    if start < end:
        if step < 0:
            return result
        current = start
        while current < end:
            result.append(current)
            current += step
        return result
    if step > 0:
        return result
    current = start
    while current > end:
        result.append(current)
        current += step
    return result


def clamp(value, minimum, maximum):
    """Clamp ``value`` within the inclusive bounds."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def sum_of(collection: Iterable[N]) -> N:
    """Sum the values; an empty collection gives 0."""
    return sum(collection, 0)


def sum_by(collection: Iterable[T], iteratee: Callable[[T], N]) -> N:
    """Sum ``iteratee(item)`` over the collection; empty gives 0."""
    return sum((iteratee(item) for item in collection), 0)


def product(collection: Iterable[N] | None) -> N:
    """Multiply the values; an empty or missing collection gives 1."""
    if not collection:
        return 1
    return math.prod(collection)


def product_by(collection: Iterable[T] | None, iteratee: Callable[[T], N]) -> N:
    """Multiply ``iteratee(item)`` over the collection; empty or missing gives 1."""
    if not collection:
        return 1
    return math.prod(iteratee(item) for item in collection)


def _divide(total, count: int):
    if isinstance(total, int):
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient
    return total / count


def mean(collection: Sequence[N]) -> N:
    """Arithmetic mean; integers divide with truncation, empty gives 0."""
    if not collection:
        return 0
    return _divide(sum_of(collection), len(collection))


def mean_by(collection: Sequence[T], iteratee: Callable[[T], N]) -> N:
    """Mean of ``iteratee(item)``; integers divide with truncation, empty gives 0."""
    if not collection:
        return 0
    return _divide(sum_by(collection, iteratee), len(collection))
"""Measure how long a callable takes to run."""

from __future__ import annotations

import time
from typing import Any, Callable, TypeVar

R = TypeVar("R")


def duration(callback: Callable[[], Any]) -> float:
    """Run ``callback`` and return the elapsed time in seconds."""
    _, elapsed = timed(callback)
    return elapsed


def timed(callback: Callable[[], R]) -> tuple[R, float]:
    """Run ``callback`` and return its result with the elapsed time in seconds."""
    start = time.perf_counter()
    result = callback()
    return result, time.perf_counter() - start
"""Retrying, debouncing, throttling and saga-style transactions."""

from __future__ import annotations

import itertools
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Hashable, Iterable, Optional, TypeVar

S = TypeVar("S")
K = TypeVar("K", bound=Hashable)


def _start_timer(delay: float, fn: Callable[[], Any]) -> threading.Timer:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    timer.start()
    return timer


def _indices(max_iteration: int) -> Iterable[int]:
    return itertools.count() if max_iteration <= 0 else range(max_iteration)


class Debounce:
    """Run the callbacks once ``duration`` seconds have passed without a call."""

    def __init__(self, duration: float, *callbacks: Callable[[], Any]) -> None:
        self._after = duration
        self._callbacks = callbacks
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._done = False

    def __call__(self) -> None:
        with self._lock:
            if self._done:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = _start_timer(self._after, self._fire)

    def _fire(self) -> None:
        for callback in self._callbacks:
            callback()

    def cancel(self) -> None:
        """Stop any pending run and ignore all later calls."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._done = True


@dataclass
class _KeyState:
    lock: threading.Lock = field(default_factory=threading.Lock)
    timer: Optional[threading.Timer] = None
    count: int = 0


class DebounceBy(Generic[K]):
    """Debounce calls separately for each key.

    Callbacks receive the key and how many calls were made since the last run.
    """

    def __init__(self, duration: float, *callbacks: Callable[[K, int], Any]) -> None:
        self._after = duration
        self._callbacks = callbacks
        self._lock = threading.Lock()
        self._items: dict[K, _KeyState] = {}

    def __call__(self, key: K) -> None:
        with self._lock:
            item = self._items.setdefault(key, _KeyState())
        with item.lock:
            item.count += 1
            if item.timer is not None:
                item.timer.cancel()
            item.timer = _start_timer(self._after, lambda: self._fire(key, item))

    def _fire(self, key: K, item: _KeyState) -> None:
        with item.lock:
            count = item.count
            item.count = 0
        for callback in self._callbacks:
            callback(key, count)

    def cancel(self, key: K) -> None:
        """Drop the pending run and the call count for ``key``."""
        with self._lock:
            item = self._items.pop(key, None)
            if item is not None:
                with item.lock:
                    if item.timer is not None:
                        item.timer.cancel()
                        item.timer = None


def attempt(max_iteration: int, func: Callable[[int], Any]) -> int:
    """Call ``func(index)`` until it returns without raising.

    Returns the number of calls made.  With ``max_iteration`` below 1 it tries
    forever; otherwise the last exception is re-raised once the tries run out.
    """
    error: Optional[BaseException] = None
    for index in _indices(max_iteration):
        try:
            func(index)
        except Exception as exc:
            error = exc
            continue
        return index + 1
    assert error is not None
    raise error


def attempt_with_delay(
    max_iteration: int, delay: float, func: Callable[[int, float], Any]
) -> tuple[int, float]:
    """Like :func:`attempt`, sleeping ``delay`` seconds between calls.

    ``func`` receives the index and the seconds elapsed so far.  Returns the
    number of calls and the total elapsed seconds.
    """
    error: Optional[BaseException] = None
    start = time.monotonic()
    for index in _indices(max_iteration):
        try:
            func(index, time.monotonic() - start)
        except Exception as exc:
            error = exc
        else:
            return index + 1, time.monotonic() - start
        if max_iteration <= 0 or index + 1 < max_iteration:
            time.sleep(delay)
    assert error is not None
    raise error


def attempt_while(
    max_iteration: int,
    func: Callable[[int], tuple[Optional[BaseException], bool]],
) -> int:
    """Call ``func(index)`` until it reports no error or asks to stop.

    ``func`` returns ``(error, should_continue)`` where ``error`` is an
    exception instance or None.  Returns the number of calls on success; the
    reported error is raised when ``func`` stops with one or the tries run out.
    """
    error: Optional[BaseException] = None
    for index in _indices(max_iteration):
        error, should_continue = func(index)
        if error is None:
            return index + 1
        if not should_continue:
            raise error
    assert error is not None
    raise error


def attempt_while_with_delay(
    max_iteration: int,
    delay: float,
    func: Callable[[int, float], tuple[Optional[BaseException], bool]],
) -> tuple[int, float]:
    """Like :func:`attempt_while`, sleeping ``delay`` seconds between calls.

    Returns the number of calls and the total elapsed seconds.
    """
    error: Optional[BaseException] = None
    start = time.monotonic()
    for index in _indices(max_iteration):
        error, should_continue = func(index, time.monotonic() - start)
        if error is None:
            return index + 1, time.monotonic() - start
        if not should_continue:
            raise error
        if max_iteration <= 0 or index + 1 < max_iteration:
            time.sleep(delay)
    assert error is not None
    raise error


class TransactionFailed(Exception):
    """A transaction step failed; ``state`` holds the value after rollback.

    A step may raise this itself to fail with an updated state.
    """

    def __init__(self, state: Any, message: str = "transaction failed") -> None:
        super().__init__(message)
        self.state = state


class Transaction(Generic[S]):
    """A chain of steps, each with a compensating rollback (saga pattern)."""

    def __init__(self) -> None:
        self._steps: list[tuple[Callable[[S], S], Callable[[S], S]]] = []

    def then(
        self, execute: Callable[[S], S], on_rollback: Callable[[S], S]
    ) -> "Transaction[S]":
        """Append a step and return this transaction."""
        self._steps.append((execute, on_rollback))
        return self

    def process(self, state: S) -> S:
        """Run the steps in order and return the final state.

        When a step raises, the rollbacks of the steps that completed run in
        reverse order and :class:`TransactionFailed` is raised with the result.
        """
        completed: list[Callable[[S], S]] = []
        for execute, on_rollback in self._steps:
            try:
                state = execute(state)
            except Exception as exc:
                if isinstance(exc, TransactionFailed):
                    state = exc.state
                for rollback in reversed(completed):
                    state = rollback(state)
                raise TransactionFailed(state) from exc
            completed.append(on_rollback)
        return state


class ThrottleBy(Generic[K]):
    """Run the callbacks at most ``count`` times per key in each interval."""

    def __init__(
        self, interval: float, *callbacks: Callable[[K], Any], count: int = 1
    ) -> None:
        self._interval = interval
        self._callbacks = callbacks
        self._limit = count if count > 0 else 1
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._counts: dict[K, int] = {}

    def __call__(self, key: K) -> None:
        with self._lock:
            used = self._counts.get(key, 0)
            if used < self._limit:
                self._counts[key] = used + 1
                for callback in self._callbacks:
                    callback(key)
            if self._timer is None:
                self._timer = _start_timer(self._interval, self.reset)

    def reset(self) -> None:
        """Forget all counts and start a fresh interval."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._counts = {}
            self._timer = None


class Throttle:
    """Run the callbacks at most ``count`` times in each interval."""

    def __init__(
        self, interval: float, *callbacks: Callable[[], Any], count: int = 1
    ) -> None:
        self._throttle: ThrottleBy[None] = ThrottleBy(
            interval, *(self._ignore_key(callback) for callback in callbacks), count=count
        )

    @staticmethod
    def _ignore_key(callback: Callable[[], Any]) -> Callable[[None], Any]:
        return lambda _key: callback()

    def __call__(self) -> None:
        self._throttle(None)

    def reset(self) -> None:
        """Forget the count and start a fresh interval."""
        self._throttle.reset()
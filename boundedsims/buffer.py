"""Bounded buffers, a blocking wrapper around them, and shared simulation plumbing."""

from __future__ import annotations

import random
import sys
import threading
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


class BufferFullError(OverflowError):
    """Raised when an item is pushed into a buffer that is already full."""


class BufferEmptyError(IndexError):
    """Raised when an item is popped from an empty buffer."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")


class _Bounded(Protocol[T]):
    def push(self, item: T) -> None: ...

    def pop(self) -> T: ...

    def __len__(self) -> int: ...

    def is_full(self) -> bool: ...

    def is_empty(self) -> bool: ...


class RingBuffer(Generic[T]):
    """First-in, first-out buffer holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        if self.is_full():
            raise BufferFullError(f"buffer is full ({self.capacity} items)")
        self._items.append(item)

    def pop(self) -> T:
        if self.is_empty():
            raise BufferEmptyError("pop from an empty buffer")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity}, items={list(self._items)!r})"


class StackBuffer(Generic[T]):
    """Last-in, first-out buffer holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        if self.is_full():
            raise BufferFullError(f"buffer is full ({self.capacity} items)")
        self._items.append(item)

    def pop(self) -> T:
        if self.is_empty():
            raise BufferEmptyError("pop from an empty buffer")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __repr__(self) -> str:
        return f"StackBuffer(capacity={self.capacity}, items={self._items!r})"


class SyncBuffer(Generic[T]):
    """Blocking, thread-safe access to a bounded buffer.

    ``push`` waits while the buffer is full and ``pop`` waits while it is
    empty, so one thread can hand items to another at its own pace.
    """

    def __init__(self, buffer: _Bounded[T]) -> None:
        self._buffer = buffer
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    def push(self, item: T) -> None:
        with self._not_full:
            self._not_full.wait_for(lambda: not self._buffer.is_full())
            self._buffer.push(item)
            self._not_empty.notify()

    def pop(self) -> T:
        with self._not_empty:
            self._not_empty.wait_for(lambda: not self._buffer.is_empty())
            item = self._buffer.pop()
            self._not_full.notify()
            return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _check_range(low: int, high: int) -> None:
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")


def _run_threads(*jobs: Callable[[], object]) -> None:
    """Run every job in its own thread and wait for all of them."""
    threads = [threading.Thread(target=job, daemon=True) for job in jobs]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def _session(
    out: Callable[[str], object],
    opening: str,
    closing: str,
    *jobs: Callable[[], object],
) -> None:
    """Announce ``opening``, run the jobs side by side, then announce ``closing``."""
    out(opening)
    _run_threads(*jobs)
    out(closing)


def _feed(channel: SyncBuffer[T], draw: Callable[[], T], count: int) -> None:
    for _ in range(count):
        channel.push(draw())


def _stream(
    draw: Callable[[], T], count: int, capacity: int, consume: Callable[[T], object]
) -> None:
    """Hand ``count`` drawn items from one thread to another through a ring buffer."""
    channel: SyncBuffer[T] = SyncBuffer(RingBuffer(capacity))

    def drain() -> None:
        for _ in range(count):
            consume(channel.pop())

    _run_threads(lambda: _feed(channel, draw, count), drain)


def _stack(draw: Callable[[], T], count: int, capacity: int, noun: str) -> list[T]:
    """Stack ``count`` drawn items in a producer thread, then return them last-in first-out."""
    if count > capacity:
        raise ValueError(f"at most {capacity} {noun} fit in the buffer, got {count}")
    channel: SyncBuffer[T] = SyncBuffer(StackBuffer(capacity))
    _run_threads(lambda: _feed(channel, draw, count))
    return [channel.pop() for _ in range(count)]


def _cli_args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def _to_int(arg: str) -> int:
    try:
        return int(arg)
    except ValueError:
        raise ValueError(f"not a number: {arg}") from None


def _int_args(args: Sequence[str], defaults: Sequence[int]) -> list[int]:
    """Override the leading defaults with the given arguments.

    Any other number of arguments than one up to ``len(defaults)`` leaves
    the defaults as they are.
    """
    if not 0 < len(args) <= len(defaults):
        return list(defaults)
    parsed = [_to_int(arg) for arg in args]
    return parsed + list(defaults[len(parsed):])


def _ranged_main(
    argv: Sequence[str] | None,
    usage: str,
    prefix: str,
    compute: Callable[[int, int, int], Iterable[object]],
) -> int:
    """Run ``compute(low, high, count)`` from three arguments and print what it yields."""
    args = _cli_args(argv)
    if len(args) != 3:
        print(usage)
        return 1
    try:
        lines = list(compute(*(_to_int(arg) for arg in args)))
    except ValueError as exc:
        print(f"{prefix}: {exc}")
        return 1
    for line in lines:
        print(line)
    return 0
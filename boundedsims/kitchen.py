"""A cook hands dishes to two waiters through a bounded counter."""

from __future__ import annotations

import itertools
import random
import sys
import time
from collections.abc import Callable, Sequence

from boundedsims.buffer import (
    RingBuffer,
    SyncBuffer,
    _cli_args,
    _int_args,
    _rng,
    _run_threads,
)

_WAITERS = 2
_DEFAULT_CAPACITY = 10
_COOK_MIN, _COOK_MAX = 0.5, 1.5
_WAITER_MIN, _WAITER_MAX = 2.0, 5.0


def generate_time(low: float, high: float, rng: random.Random) -> float:
    """Return a random duration between ``low`` and ``high``."""
    return low + rng.random() * (high - low)


def run(
    capacity: int = _DEFAULT_CAPACITY,
    rng: random.Random | None = None,
    sleep: Callable[[float], object] = time.sleep,
    out: Callable[[str], object] = print,
    dishes: int | None = None,
) -> int:
    """Cook ``dishes`` dishes (forever when None) and return how many were served."""
    rng = _rng(rng)
    channel: SyncBuffer[float | None] = SyncBuffer(RingBuffer(capacity))
    served: list[int] = []

    def wait_tables() -> None:
        count = 0
        while channel.pop() is not None:
            duration = generate_time(_WAITER_MIN, _WAITER_MAX, rng)
            sleep(duration)
            out(f"Casnik: {duration:.2f} s")
            count += 1
        served.append(count)

    def cook() -> None:
        orders = itertools.count() if dishes is None else range(dishes)
        for _ in orders:
            duration = generate_time(_COOK_MIN, _COOK_MAX, rng)
            sleep(duration)
            out(f"Kuchar: {duration:.2f} s")
            channel.push(duration)
        for _ in range(_WAITERS):
            channel.push(None)

    _run_threads(*([wait_tables] * _WAITERS), cook)
    return sum(served)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        (capacity,) = _int_args(_cli_args(argv), [_DEFAULT_CAPACITY])
        run(capacity)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
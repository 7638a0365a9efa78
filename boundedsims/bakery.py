"""A baker bakes bread into a two-slot shelf while customers buy it."""

from __future__ import annotations

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
    _session,
)

_CAPACITY = 2
_DEFAULT_CUSTOMERS = 10
_DEFAULT_BAKE_TIME = 4
_CUSTOMER_MIN_WAIT = 2
_CUSTOMER_MAX_WAIT = 6


def run(
    customers: int = _DEFAULT_CUSTOMERS,
    bake_time: float = _DEFAULT_BAKE_TIME,
    rng: random.Random | None = None,
    sleep: Callable[[float], object] = time.sleep,
    out: Callable[[str], object] = print,
) -> None:
    """Open the bakery, bake and sell one loaf per customer, then close it."""
    rng = _rng(rng)
    channel: SyncBuffer[bool] = SyncBuffer(RingBuffer(_CAPACITY))

    def bake() -> None:
        for _ in range(customers):
            sleep(bake_time)
            channel.push(True)
            out("Chlieb napeceny")

    def buy() -> None:
        for number in range(1, customers + 1):
            sleep(rng.randint(_CUSTOMER_MIN_WAIT, _CUSTOMER_MAX_WAIT))
            channel.pop()
            out(f"{number}. zakaznik: Chlieb kupeny")

    _session(out, "Pekaren otvorena", "Pekaren zatvorena", bake, buy)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        customers, bake_time = _int_args(
            _cli_args(argv), [_DEFAULT_CUSTOMERS, _DEFAULT_BAKE_TIME]
        )
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    run(customers, bake_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""A barman sets drinks on a one-slot bar while customers take them."""

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

_CAPACITY = 1
_DEFAULT_CUSTOMERS = 10
_CUSTOMER_MIN_WAIT = 1
_CUSTOMER_MAX_WAIT = 8


def run(
    customers: int = _DEFAULT_CUSTOMERS,
    rng: random.Random | None = None,
    sleep: Callable[[float], object] = time.sleep,
    out: Callable[[str], object] = print,
) -> None:
    """Open the bar, serve ``customers`` drinks one at a time, then close it."""
    rng = _rng(rng)
    channel: SyncBuffer[bool] = SyncBuffer(RingBuffer(_CAPACITY))

    def serve() -> None:
        for _ in range(customers):
            drink = rng.randint(1, 2)
            sleep(drink)
            channel.push(True)
            which = "druhy" if drink == 1 else "prvy"
            out(f"Barman polozil {which} drink")

    def take() -> None:
        for number in range(1, customers + 1):
            sleep(rng.randint(_CUSTOMER_MIN_WAIT, _CUSTOMER_MAX_WAIT))
            channel.pop()
            out(f"{number}. zakaznik: Berie drink z baru")

    _session(out, "Bar otvoreny", "Bar zatovreny", serve, take)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        (customers,) = _int_args(_cli_args(argv), [_DEFAULT_CUSTOMERS])
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    run(customers)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Count odd random numbers to decide which player wins."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

from boundedsims.buffer import _rng, _stream

_CAPACITY = 8
_DEFAULT_COUNT = 1000
_RAND_LIMIT = 2**31


def winner(odd: int, count: int) -> str:
    """Tinky-Winky wins when more than 60 % of the numbers were odd."""
    if odd > int(count * 0.6):
        return "Tinky-Winky"
    return "Laa-Laa"


def run(count: int = _DEFAULT_COUNT, rng: random.Random | None = None) -> int:
    """Pass ``count`` random numbers between threads and return how many were odd."""
    rng = _rng(rng)
    parities: list[int] = []
    _stream(
        lambda: rng.randrange(_RAND_LIMIT),
        count,
        _CAPACITY,
        lambda n: parities.append(n % 2),
    )
    return sum(parities)


def main(argv: Sequence[str] | None = None) -> int:
    odd = run(_DEFAULT_COUNT)
    print(f"odd numbers count: {odd}")
    print(f"{winner(odd, _DEFAULT_COUNT)} win")
    return 0


if __name__ == "__main__":
    sys.exit(main())
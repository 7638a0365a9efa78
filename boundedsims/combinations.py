"""Compute binomial coefficients for randomly drawn pairs."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from boundedsims.buffer import _check_range, _ranged_main, _rng, _stack

_CAPACITY = 20


@dataclass(frozen=True)
class Combination:
    """A pair ``s`` choose ``r`` with ``s >= r``."""

    s: int
    r: int

    def __str__(self) -> str:
        return f"({self.s}C{self.r})"


def factorial(n: int) -> int:
    """Return ``n!``, or 0 for negative ``n``."""
    if n < 0:
        return 0
    return math.factorial(n)


def combination_count(s: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items out of ``s``."""
    if r < 0 or s < r:
        raise ValueError(f"cannot choose {r} out of {s}")
    return factorial(s) // (factorial(r) * factorial(s - r))


def random_between(low: int, high: int, rng: random.Random) -> int:
    """Return a random integer in ``[low, high]``."""
    return rng.randint(low, high)


def random_combination(low: int, high: int, rng: random.Random) -> Combination:
    """Draw two integers in ``[low, high]`` and order them as ``s >= r``."""
    first = random_between(low, high, rng)
    second = random_between(low, high, rng)
    return Combination(max(first, second), min(first, second))


def run(
    low: int, high: int, count: int, rng: random.Random | None = None
) -> list[tuple[Combination, int]]:
    """Produce ``count`` pairs, then evaluate them last-in first-out.

    The pairs are stacked in a buffer of twenty slots before any is read,
    so at most twenty can be handled in one run.
    """
    _check_range(low, high)
    rng = _rng(rng)
    pairs = _stack(lambda: random_combination(low, high, rng), count, _CAPACITY, "pairs")
    return [(pair, combination_count(pair.s, pair.r)) for pair in pairs]


def _report(low: int, high: int, count: int) -> Iterator[str]:
    for pair, value in run(low, high, count):
        yield f"{pair} => {value}"


def main(argv: Sequence[str] | None = None) -> int:
    return _ranged_main(argv, "Error: Bad arguments count!", "Error", _report)


if __name__ == "__main__":
    sys.exit(main())
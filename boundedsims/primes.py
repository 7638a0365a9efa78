"""Factor randomly drawn integers into primes."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator, Sequence

from boundedsims.buffer import _check_range, _ranged_main, _rng, _stack

_CAPACITY = 10


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repeats."""
    factors = []
    divisor = 2
    while n > 1:
        if n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        else:
            divisor += 1
    return factors


def format_factors(n: int) -> str:
    """Render ``n`` followed by its prime factors, each trailed by a space."""
    return f"{n} -> " + "".join(f"{factor} " for factor in prime_factors(n))


def run(
    low: int, high: int, count: int, rng: random.Random | None = None
) -> list[int]:
    """Produce ``count`` integers in ``[low, high]`` and return them last-in first-out.

    All numbers are stacked before any is read, in a buffer of ten slots.
    """
    _check_range(low, high)
    rng = _rng(rng)
    return _stack(lambda: rng.randint(low, high), count, _CAPACITY, "numbers")


def _report(low: int, high: int, count: int) -> Iterator[str]:
    return map(format_factors, run(low, high, count))


def main(argv: Sequence[str] | None = None) -> int:
    return _ranged_main(argv, "Error: Bad arguments!", "Error", _report)


if __name__ == "__main__":
    sys.exit(main())
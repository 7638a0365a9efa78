"""Report the Fibonacci numbers among randomly drawn integers."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence

from boundedsims.buffer import _check_range, _ranged_main, _rng, _stream


def is_perfect_square(x: int) -> bool:
    """Return True when ``x`` is the square of an integer."""
    if x < 0:
        return False
    root = math.isqrt(x)
    return root * root == x


def is_fibonacci(n: int) -> bool:
    """Return True when ``n`` (or ``-n``) is a Fibonacci number."""
    square = 5 * n * n
    return is_perfect_square(square + 4) or is_perfect_square(square - 4)


def run(
    low: int, high: int, count: int, rng: random.Random | None = None
) -> list[int]:
    """Draw ``count`` integers in ``[low, high]`` and return the Fibonacci ones.

    A producer thread hands the numbers through a bounded buffer of
    ``count`` slots; they are returned in the order they were drawn.
    """
    _check_range(low, high)
    rng = _rng(rng)
    found: list[int] = []

    def keep(n: int) -> None:
        if is_fibonacci(n):
            found.append(n)

    _stream(lambda: rng.randint(low, high), count, max(count, 1), keep)
    return found


def main(argv: Sequence[str] | None = None) -> int:
    return _ranged_main(argv, "ERROR: Bad arguments count!", "ERROR", run)


if __name__ == "__main__":
    sys.exit(main())
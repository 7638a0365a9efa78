"""Weigh randomly planted evidence against two suspects."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from boundedsims.buffer import _rng, _stream

_CAPACITY = 3
_DEFAULT_COUNT = 50


@dataclass
class Tally:
    """Counts of evidence against the first and second suspect."""

    first: int = 0
    second: int = 0
    invalid: int = 0

    def add(self, evidence: int) -> None:
        if evidence == 1:
            self.first += 1
        elif evidence == 2:
            self.second += 1
        else:
            self.invalid += 1

    def verdict(self) -> str:
        if self.first > self.second:
            return "First one is guilty"
        return "Second one is guilty"

    def __str__(self) -> str:
        return f"First: {self.first}, Second: {self.second}, Invalid: {self.invalid}"


def run(count: int = _DEFAULT_COUNT, rng: random.Random | None = None) -> Tally:
    """Hand ``count`` pieces of evidence (0, 1 or 2) to an investigator thread."""
    rng = _rng(rng)
    tally = Tally()
    _stream(lambda: rng.randrange(3), count, _CAPACITY, tally.add)
    return tally


def main(argv: Sequence[str] | None = None) -> int:
    tally = run()
    print(tally)
    print(tally.verdict())
    return 0


if __name__ == "__main__":
    sys.exit(main())
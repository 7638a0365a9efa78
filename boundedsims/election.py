"""Voters pick up ballots from a bounded pile and cast them."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from boundedsims.buffer import (
    RingBuffer,
    SyncBuffer,
    _cli_args,
    _int_args,
    _rng,
    _session,
)

_CAPACITY = 5
_DEFAULT_VOTERS = 15


@dataclass
class Result:
    """Votes for each of the two candidates."""

    puttyn: int = 0
    bash: int = 0

    @property
    def total(self) -> int:
        return self.puttyn + self.bash

    def _line(self, name: str, votes: int, rival: int) -> str:
        share = votes / self.total * 100 if self.total else float("nan")
        outcome = "vyhral" if votes > rival else "prehral"
        return f"{name}, {votes}, {share:.2f}%, {outcome}"

    def lines(self) -> list[str]:
        """Return the result line for each candidate."""
        return [
            self._line("Puttyn", self.puttyn, self.bash),
            self._line("Ba$h", self.bash, self.puttyn),
        ]


def run(
    count: int = _DEFAULT_VOTERS,
    rng: random.Random | None = None,
    sleep: Callable[[float], object] = time.sleep,
    out: Callable[[str], object] = print,
) -> Result:
    """Hold an election with ``count`` voters and return the tally."""
    rng = _rng(rng)
    channel: SyncBuffer[bool] = SyncBuffer(RingBuffer(_CAPACITY))
    result = Result()

    def lay_out() -> None:
        for number in range(1, count + 1):
            channel.push(True)
            out(f"{number}. harok bol vylozeny")

    def vote() -> None:
        for number in range(1, count + 1):
            sleep(rng.randint(1, 10))
            out(f"{number}. volic prisiel do miestnosti")
            channel.pop()
            for_puttyn = rng.randint(1, 100) <= 65
            out(f"{number}. volic si zobral volebny harok")
            sleep(rng.randint(100, 150) / 1000.0)
            out(f"{number}. volic zvolil")
            if for_puttyn:
                result.puttyn += 1
            else:
                result.bash += 1
            out(f"{number}. volic hodil vysledok do urny")

    _session(out, "Volby otvorene", "Volby ukoncene", lay_out, vote)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    try:
        (count,) = _int_args(_cli_args(argv), [_DEFAULT_VOTERS])
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    for line in run(count).lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Detectives collect evidence a suspect left behind."""

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

_CAPACITY = 5
_DEFAULT_DETECTIVES = 10
_DEFAULT_DELAY = 6


def verdict(evidences: int) -> str:
    """The culprit is convicted when at least one valid piece of evidence remains."""
    if evidences > 0:
        return "Pachatel bol usvedceny"
    return "Pachatel nebol usvedceny"


def run(
    detectives: int = _DEFAULT_DETECTIVES,
    delay: float = _DEFAULT_DELAY,
    rng: random.Random | None = None,
    sleep: Callable[[float], object] = time.sleep,
    out: Callable[[str], object] = print,
) -> int:
    """Run the investigation and return how many valid pieces of evidence were kept."""
    rng = _rng(rng)
    channel: SyncBuffer[bool] = SyncBuffer(RingBuffer(_CAPACITY))
    found: list[bool] = []

    def plant() -> None:
        sleep(delay)
        out(f"Podozrivy vytvoril {detectives} dokazov")
        for number in range(1, detectives + 1):
            channel.push(rng.randint(1, 10) < 2)
            out(f"Podozrivy polozil {number}. dokaz")

    def investigate() -> None:
        for number in range(1, detectives + 1):
            out(f"{number}. detektiv zacal patranie")
            arrival = rng.randint(5, 10)
            leave = rng.randint(4, 10)
            arch = rng.randint(1, 100) <= 40
            steal = rng.randint(0, 1) < 1 and not arch
            sleep(arrival)
            detour = " a po ceste nasiel Arch" if arch else ""
            out(f"{number}. detektiv sa dostavil na miesto{detour}")
            evidence = channel.pop()
            quality = "platny" if evidence else "neplatny"
            out(f"{number}. detektiv nasiel {quality} dokaz")
            sleep(leave)
            if evidence and steal:
                evidence = False
                out(f"{number}. detektivovi vymenili dokaz za neplatny")
            out(f"{number}. detektiv ukoncil patranie")
            found.append(evidence)

    _session(
        out,
        "Najdite Kefasa, patranie sa zacina!",
        "Dokazy boli pozbierane!",
        plant,
        investigate,
    )
    return sum(found)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        detectives, delay = _int_args(
            _cli_args(argv), [_DEFAULT_DETECTIVES, _DEFAULT_DELAY]
        )
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(verdict(run(detectives, delay)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
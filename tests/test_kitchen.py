import random

import pytest

from boundedsims.kitchen import generate_time, main, run


class _Fixed:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def randint(self, a, b):
        return a


def test_generate_time_bounds():
    rng = random.Random(5)
    values = [generate_time(0.5, 1.5, rng) for _ in range(200)]
    assert all(0.5 <= v <= 1.5 for v in values)


def test_generate_time_extremes():
    assert generate_time(2, 5, _Fixed(0.0)) == 2
    assert generate_time(2, 5, _Fixed(1.0)) == 5


def test_every_dish_is_served():
    lines = []
    served = run(2, rng=_Fixed(0.0), sleep=lambda s: None, out=lines.append, dishes=5)
    assert served == 5
    assert lines.count("Kuchar: 0.50 s") == 5
    assert lines.count("Casnik: 2.00 s") == 5
    assert len(lines) == 10


def test_small_counter_still_serves_everything():
    lines = []
    served = run(1, rng=random.Random(3), sleep=lambda s: None, out=lines.append, dishes=12)
    assert served == 12
    assert sum(line.startswith("Casnik") for line in lines) == 12


def test_sleep_ranges():
    sleeps = []
    run(3, rng=random.Random(8), sleep=sleeps.append, out=lambda line: None, dishes=10)
    assert len(sleeps) == 20
    assert sum(0.5 <= s <= 1.5 for s in sleeps) >= 10
    assert all(0.5 <= s <= 5.0 for s in sleeps)


def test_no_dishes():
    lines = []
    assert run(4, rng=random.Random(0), sleep=lambda s: None, out=lines.append, dishes=0) == 0
    assert lines == []


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        run(0, rng=random.Random(0), sleep=lambda s: None, out=lambda line: None, dishes=1)


def test_main_rejects_bad_capacity():
    assert main(["0"]) == 1
    assert main(["lots"]) == 1
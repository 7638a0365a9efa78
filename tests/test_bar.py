import random

from boundedsims.bar import main, run


class _Scripted:
    def __init__(self, low=True):
        self.low = low

    def randint(self, a, b):
        return a if self.low else b

    def random(self):
        return 0.0 if self.low else 1.0


def _customer_lines(lines):
    return [line for line in lines if "zakaznik" in line]


def test_opening_and_closing_frame_the_run():
    lines = []
    run(5, rng=random.Random(1), sleep=lambda s: None, out=lines.append)
    assert lines[0] == "Bar otvoreny"
    assert lines[-1] == "Bar zatovreny"
    assert len(lines) == 2 + 2 * 5


def test_customers_are_served_in_order():
    lines = []
    run(6, rng=random.Random(7), sleep=lambda s: None, out=lines.append)
    expected = [f"{i}. zakaznik: Berie drink z baru" for i in range(1, 7)]
    assert _customer_lines(lines) == expected


def test_short_drink_is_reported_as_second():
    lines = []
    sleeps = []
    run(3, rng=_Scripted(low=True), sleep=sleeps.append, out=lines.append)
    barman = [line for line in lines if line.startswith("Barman")]
    assert barman == ["Barman polozil druhy drink"] * 3
    assert sleeps == [1] * 6


def test_long_drink_is_reported_as_first():
    lines = []
    sleeps = []
    run(2, rng=_Scripted(low=False), sleep=sleeps.append, out=lines.append)
    barman = [line for line in lines if line.startswith("Barman")]
    assert barman == ["Barman polozil prvy drink"] * 2
    assert sorted(sleeps) == [2, 2, 8, 8]


def test_sleep_times_stay_within_bounds():
    sleeps = []
    run(20, rng=random.Random(3), sleep=sleeps.append, out=lambda line: None)
    assert len(sleeps) == 40
    assert all(1 <= s <= 8 for s in sleeps)


def test_no_customers():
    lines = []
    run(0, rng=random.Random(0), sleep=lambda s: None, out=lines.append)
    assert lines == ["Bar otvoreny", "Bar zatovreny"]


def test_main_with_zero_customers(capsys):
    assert main(["0"]) == 0
    assert capsys.readouterr().out == "Bar otvoreny\nBar zatovreny\n"


def test_main_rejects_non_number():
    assert main(["many"]) == 1
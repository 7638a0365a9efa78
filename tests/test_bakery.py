import random

from boundedsims.bakery import main, run


def test_frame_and_line_count():
    lines = []
    run(4, 3, rng=random.Random(2), sleep=lambda s: None, out=lines.append)
    assert lines[0] == "Pekaren otvorena"
    assert lines[-1] == "Pekaren zatvorena"
    assert lines.count("Chlieb napeceny") == 4
    assert len(lines) == 2 + 8


def test_customers_buy_in_order():
    lines = []
    run(5, 1, rng=random.Random(9), sleep=lambda s: None, out=lines.append)
    bought = [line for line in lines if "zakaznik" in line]
    assert bought == [f"{i}. zakaznik: Chlieb kupeny" for i in range(1, 6)]


def test_baker_sleeps_bake_time_per_loaf():
    sleeps = []
    run(6, 3, rng=random.Random(4), sleep=sleeps.append, out=lambda line: None)
    assert len(sleeps) == 12
    assert sleeps.count(3) >= 6
    assert all(2 <= s <= 6 for s in sleeps)


def test_no_customers():
    lines = []
    run(0, 4, rng=random.Random(0), sleep=lambda s: None, out=lines.append)
    assert lines == ["Pekaren otvorena", "Pekaren zatvorena"]


def test_main_with_zero_customers(capsys):
    assert main(["0", "1"]) == 0
    assert capsys.readouterr().out == "Pekaren otvorena\nPekaren zatvorena\n"


def test_main_rejects_non_number():
    assert main(["ten", "4"]) == 1
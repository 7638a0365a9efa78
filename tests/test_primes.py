import math
import random

import pytest

from boundedsims.primes import format_factors, main, prime_factors, run


def _is_prime(n):
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


@pytest.mark.parametrize("n", range(2, 400))
def test_factors_multiply_back(n):
    factors = prime_factors(n)
    assert math.prod(factors) == n
    assert all(_is_prime(f) for f in factors)
    assert factors == sorted(factors)


@pytest.mark.parametrize("n", [1, 0, -7])
def test_no_factors_below_two(n):
    assert prime_factors(n) == []


def test_prime_is_its_own_factor():
    for p in (2, 3, 5, 97, 101):
        assert prime_factors(p) == [p]


def test_format_factors():
    assert format_factors(12) == "12 -> 2 2 3 "


def test_format_without_factors():
    assert format_factors(1) == "1 -> "


def test_run_constant_value():
    assert run(9, 9, 3, random.Random(0)) == [9, 9, 9]


def test_run_is_last_in_first_out():
    expected_rng = random.Random(4)
    produced = [expected_rng.randint(1, 1000) for _ in range(8)]
    assert run(1, 1000, 8, random.Random(4)) == list(reversed(produced))


def test_run_too_many_numbers():
    with pytest.raises(ValueError):
        run(1, 10, 11, random.Random(0))


def test_run_empty_range():
    with pytest.raises(ValueError):
        run(10, 1, 2, random.Random(0))


def test_main_prints_factorisations(capsys):
    assert main(["6", "6", "1"]) == 0
    assert capsys.readouterr().out == "6 -> 2 3 \n"


def test_main_bad_arguments(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().out == "Error: Bad arguments!\n"
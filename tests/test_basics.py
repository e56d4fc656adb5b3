import math

import pytest

from dstructs import basics


def test_greeting_matches_banner():
    assert basics.greeting() == "Hello "


@pytest.mark.parametrize("n", [0, 1, 2, 10, 1000, 12345])
def test_loop_and_formula_agree(n):
    assert basics.sum_by_loop(n) == basics.sum_by_formula(n)


def test_timed_returns_result_and_time():
    result, seconds = basics.timed(basics.sum_by_formula, 100000)
    assert result == basics.sum_by_loop(100000)
    assert seconds >= 0


def test_growth_table_invariants():
    rows = basics.growth_table(10)
    assert [row.n for row in rows] == list(range(1, 11))
    for prev, row in zip(rows, rows[1:]):
        assert row.power_of_two == 2 * prev.power_of_two
        assert row.factorial == row.n * prev.factorial
        assert row.cube == row.square * row.n
    for row in rows:
        assert math.isclose(2 ** row.log2, row.n)
        assert math.isclose(row.sqrt ** 2, row.n)
        assert math.isclose(row.n_log2, row.n * row.log2)


def test_format_growth_table_layout():
    lines = basics.format_growth_table(5).splitlines()
    assert len(lines) == 7
    assert lines[0].startswith("log2(n)")
    assert set(lines[1]) == {"="}
    for i, line in enumerate(lines[2:], start=1):
        fields = line.split("\t")
        assert len(fields) == 8
        assert int(fields[2]) == i
        assert int(fields[7]) == math.factorial(i)


def test_prime_tests_agree():
    for n in range(2, 300):
        assert basics.is_prime_naive(n) == basics.is_prime_sqrt(n)


def test_small_primes():
    primes = [n for n in range(2, 50) if basics.is_prime_sqrt(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]


def test_count_primes_methods_agree():
    assert basics.count_primes(2000, basics.is_prime_naive) == basics.count_primes(2000)


def test_count_primes_below_two():
    assert basics.count_primes(1) == 0


def test_is_prime_sqrt_rejects_negative():
    with pytest.raises(ValueError):
        basics.is_prime_sqrt(-7)


def test_factorial_sum_steps():
    for n in range(1, 21):
        assert basics.factorial_sum(n) - basics.factorial_sum(n - 1) == math.factorial(n)


@pytest.mark.parametrize(
    "nums,target", [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, 5, 8, -4], 4)]
)
def test_two_sum_finds_pair(nums, target):
    i, j = basics.two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_without_solution():
    assert basics.two_sum([1, 2, 3], 100) == []
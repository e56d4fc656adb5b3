"""Introductory algorithms: sums, growth rates, primality, factorial sums and two-sum."""

from __future__ import annotations

import math
import time
from typing import Any, Callable, NamedTuple


def greeting() -> str:
    """Return the greeting banner."""
    return "Hello "


def sum_by_loop(n: int) -> int:
    """Return 1 + 2 + ... + n by adding the terms one at a time."""
    total = 0
    for value in range(1, n + 1):
        total += value
    return total


def sum_by_formula(n: int) -> int:
    """Return 1 + 2 + ... + n with the closed formula n(n+1)/2."""
    return n * (n + 1) // 2


def timed(func: Callable[..., Any], *args: Any) -> tuple[Any, float]:
    """Call ``func(*args)`` and return its result with the processor time it took."""
    start = time.process_time()
    result = func(*args)
    return result, time.process_time() - start


class GrowthRow(NamedTuple):
    """One row of the growth-rate table."""

    log2: float
    sqrt: float
    n: int
    n_log2: float
    square: int
    cube: int
    power_of_two: int
    factorial: int


def growth_table(n: int) -> list[GrowthRow]:
    """Return the growth rates of common complexity functions for 1..n."""
    rows = []
    power = 1
    fact = 1
    for i in range(1, n + 1):
        power *= 2
        fact *= i
        log = math.log10(i) / math.log10(2)
        rows.append(GrowthRow(log, math.sqrt(i), i, i * log, i * i, i * i * i, power, fact))
    return rows


_HEADER = "log2(n) sqrt(n)  n       nlog2(n)   n^2\t    n^3\t     2^n\t\tn!"


def format_growth_table(n: int) -> str:
    """Render :func:`growth_table` as a tab-separated text table."""
    lines = [_HEADER, "=" * 75]
    for row in growth_table(n):
        lines.append(
            "%5.2f\t%5.2f\t%2d\t%7.2f\t%5d\t%7d\t%8d\t%10d"
            % (
                row.log2,
                row.sqrt,
                row.n,
                row.n_log2,
                row.square,
                row.cube,
                row.power_of_two,
                row.factorial,
            )
        )
    return "\n".join(lines) + "\n"


def is_prime_naive(n: int) -> bool:
    """Test primality by trying every divisor from 2 to n-1."""
    return all(n % divisor for divisor in range(2, n))


def is_prime_sqrt(n: int) -> bool:
    """Test primality by trying divisors from 2 up to the square root of n."""
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def count_primes(n: int, test: Callable[[int], bool] = is_prime_sqrt) -> int:
    """Count the primes in 2..n using the given primality test."""
    return sum(1 for value in range(2, n + 1) if test(value))


def factorial_sum(n: int) -> int:
    """Return 1! + 2! + ... + n!."""
    total = 0
    fact = 1
    for i in range(1, n + 1):
        fact *= i
        total += fact
    return total


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        wanted = target - value
        if wanted in seen:
            return [seen[wanted], index]
        seen[value] = index
    return []
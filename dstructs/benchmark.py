"""Time the internal sorting algorithms on the same random data and check their results."""

from __future__ import annotations

import argparse
import random
import time
from typing import Any, Callable, Iterable, NamedTuple, Optional, Sequence

from dstructs.sorting import (
    binary_insert_sort,
    bubble_sort,
    heap_sort,
    insert_sort,
    merge_sort,
    quick_sort,
    select_sort,
    shell_sort,
)

DEFAULT_SIZE = 50000

SORTS: tuple[tuple[str, Callable[..., Any]], ...] = (
    ("straight insertion", insert_sort),
    ("binary insertion", binary_insert_sort),
    ("shell", shell_sort),
    ("bubble", bubble_sort),
    ("quick", quick_sort),
    ("simple selection", select_sort),
    ("heap", heap_sort),
    ("two-way merge", merge_sort),
)


class SortTiming(NamedTuple):
    """Processor time a sort took and whether its output was ordered."""

    seconds: float
    correct: bool


def random_keys(n: int, seed: Optional[int] = None) -> list[int]:
    """Return ``n`` random integers from 1 to 99."""
    rng = random.Random(seed)
    return [rng.randint(1, 99) for _ in range(n)]


def is_sorted(items: Sequence[Any]) -> bool:
    """Return True when the items are in non-decreasing order."""
    return all(not b < a for a, b in zip(items, items[1:]))


def time_sort(func: Callable[[list[Any]], Any], items: Iterable[Any]) -> SortTiming:
    """Run ``func`` on a copy of ``items`` and return its timing and correctness.

    ``func`` may return the sorted list or sort its argument in place.
    """
    data = list(items)
    start = time.process_time()
    result = func(data)
    elapsed = time.process_time() - start
    checked = data if result is None else list(result)
    return SortTiming(elapsed, is_sorted(checked))


def compare_sorts(n: int = DEFAULT_SIZE, seed: Optional[int] = None) -> list[tuple[str, SortTiming]]:
    """Time every sorting method on the same ``n`` random keys."""
    keys = random_keys(n, seed)
    return [(name, time_sort(func, keys)) for name, func in SORTS]


def main(argv: Optional[list[str]] = None) -> int:
    """Print a comparison table of the sorting methods."""
    parser = argparse.ArgumentParser(prog="benchmark", description="Compare sorting methods.")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="number of keys")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")

    rule = "-" * 48
    print(f"{args.size} random integers from 1 to 99, sorting methods compared")
    print(rule)
    print(f"{'method':<20}{'time':>12}  check")
    print(rule)
    for name, timing in compare_sorts(args.size, args.seed):
        verdict = "correct" if timing.correct else "wrong"
        print(f"{name:<20}{timing.seconds:>10.6f}s  {verdict}")
    print(rule)
    return 0
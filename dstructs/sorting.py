"""Internal sorting algorithms, each able to report its intermediate states."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from typing import Any, Callable, Iterable, Optional, Sequence

Trace = Optional[Callable[[str], None]]


def _fmt(items: Iterable[Any]) -> str:
    return " ".join(str(item) for item in items)


def _emit(trace: Trace, line: str) -> None:
    if trace is not None:
        trace(line)


def insert_sort(items: Iterable[Any], trace: Trace = None) -> list[Any]:
    """Sort by straight insertion; report the list after each element is placed."""
    r = list(items)
    for i in range(1, len(r)):
        key = r[i]
        if key < r[i - 1]:
            j = i - 1
            while j >= 0 and r[j] > key:
                r[j + 1] = r[j]
                j -= 1
            r[j + 1] = key
        _emit(trace, f"  i={i}, insert {key}, result: {_fmt(r)}")
    return r


def binary_insert_sort(items: Iterable[Any], trace: Trace = None) -> list[Any]:
    """Sort by insertion, finding each position with a binary search."""
    r = list(items)
    for i in range(1, len(r)):
        key = r[i]
        if key < r[i - 1]:
            pos = bisect_right(r, key, 0, i)
            del r[i]
            r.insert(pos, key)
            _emit(trace, f"  i={i}, insert {key}, result: {_fmt(r)}")
        else:
            _emit(trace, _fmt(r))
    return r


def shell_sort(items: Iterable[Any], trace: Trace = None) -> list[Any]:
    """Shell sort with gaps n/2, n/4, ..., 1; report the list after each gap."""
    r = list(items)
    d = len(r) // 2
    while d > 0:
        for i in range(d, len(r)):
            tmp = r[i]
            j = i - d
            while j >= 0 and tmp < r[j]:
                r[j + d] = r[j]
                j -= d
            r[j + d] = tmp
        _emit(trace, f"  d={d}: {_fmt(r)}")
        d //= 2
    return r


def bubble_sort(items: Iterable[Any], trace: Trace = None) -> list[Any]:
    """Bubble the smallest remaining element forward; stop after a pass without swaps."""
    r = list(items)
    n = len(r)
    for i in range(n - 1):
        exchanged = False
        for j in range(n - 1, i, -1):
            if r[j] < r[j - 1]:
                r[j], r[j - 1] = r[j - 1], r[j]
                exchanged = True
        _emit(trace, f"  i={i}: placed {r[i]}, result: {_fmt(r)}")
        if not exchanged:
            break
    return r


def _partition(r: list[Any], s: int, t: int, key: Callable[[Any], Any]) -> int:
    i, j = s, t
    pivot = r[i]
    pk = key(pivot)
    while i < j:
        while j > i and key(r[j]) >= pk:
            j -= 1
        if j > i:
            r[i] = r[j]
            i += 1
        while i < j and key(r[i]) <= pk:
            i += 1
        if i < j:
            r[j] = r[i]
            j -= 1
    r[i] = pivot
    return i


def _quick(
    r: list[Any],
    key: Callable[[Any], Any],
    report: Optional[Callable[[int, int], None]] = None,
) -> None:
    pending = [(0, len(r) - 1)]
    while pending:
        s, t = pending.pop()
        if s >= t:
            continue
        i = _partition(r, s, t, key)
        if report is not None:
            report(s, t)
        pending.append((i + 1, t))
        pending.append((s, i - 1))


def quick_sort(items: Iterable[Any], trace: Trace = None) -> list[Any]:
    """Quick sort on the first element of each range; report every partition."""
    r = list(items)
    count = 0

    def report(s: int, t: int) -> None:
        nonlocal count
        count += 1
        cells = "".join(f"{k:>3}" for k in r[s : t + 1])
        _emit(trace, f"partition {count}: " + "   " * s + cells)

    _quick(r, lambda item: item, report if trace is not None else None)
    return r


def select_sort(items: Iterable[Any], trace: Trace = None) -> list[Any]:
    """Simple selection sort; report the list after each pass."""
    r = list(items)
    n = len(r)
    for i in range(n - 1):
        k = min(range(i, n), key=r.__getitem__)
        if k != i:
            r[i], r[k] = r[k], r[i]
        _emit(trace, f" i={i}, selected {r[i]}, result: {_fmt(r)}")
    return r


def _sift(h: list[Any], low: int, high: int) -> None:
    """Sift ``h[low]`` down within the 1-based max-heap ``h[low..high]``."""
    i, j = low, 2 * low
    tmp = h[i]
    while j <= high:
        if j < high and h[j] < h[j + 1]:
            j += 1
        if tmp < h[j]:
            h[i] = h[j]
            i, j = j, 2 * j
        else:
            break
    h[i] = tmp


def heap_repr(heap: Sequence[Any]) -> str:
    """Render a heap (root first, children of k at 2k+1 and 2k+2) in bracket notation."""
    nodes = list(heap)
    n = len(nodes)

    def show(i: int) -> str:
        if i > n:
            return ""
        text = str(nodes[i - 1])
        if 2 * i <= n:
            text += f"({show(2 * i)},{show(2 * i + 1)})"
        return text

    return show(1)


def heap_sort(items: Iterable[Any], trace: Trace = None) -> list[Any]:
    """Heap sort with a max-heap; report the heap after every sift."""
    h: list[Any] = [None, *items]
    n = len(h) - 1
    for i in range(n // 2, 0, -1):
        _sift(h, i, n)
    _emit(trace, "initial heap: " + heap_repr(h[1:]))
    for count, i in enumerate(range(n, 1, -1), start=1):
        line = f"pass {count}: swap {h[i]} with {h[1]}, output {h[1]}"
        h[1], h[i] = h[i], h[1]
        _emit(trace, line + "  result: " + "".join(f"{k:>2}" for k in h[1:]))
        _sift(h, 1, i - 1)
        _emit(trace, "heap after sift: " + heap_repr(h[1:i]))
    return h[1:]


def _merge(r: list[Any], low: int, mid: int, high: int) -> None:
    r[low : high + 1] = list(heapq.merge(r[low : mid + 1], r[mid + 1 : high + 1]))


def merge_sort(items: Iterable[Any], trace: Trace = None) -> list[Any]:
    """Bottom-up two-way merge sort; report the merges and result of each pass."""
    r = list(items)
    n = len(r)
    length = 1
    count = 0
    while length < n:
        count += 1
        merges = []
        i = 0
        while i + 2 * length - 1 < n:
            merges.append(
                f"R[{i},{i + length - 1}] and R[{i + length},{i + 2 * length - 1}] merged"
            )
            _merge(r, i, i + length - 1, i + 2 * length - 1)
            i += 2 * length
        if i + length - 1 < n - 1:
            merges.append(f"*R[{i},{i + length - 1}] and R[{i + length},{n - 1}] merged")
            _merge(r, i, i + length - 1, n - 1)
        _emit(trace, f"pass {count}: " + "  ".join(merges))
        _emit(trace, f"result: {_fmt(r)}")
        length *= 2
    return r


def radix_sort(
    values: Iterable[int], radix: int = 10, digits: int = 3, trace: Trace = None
) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers over ``digits`` digits."""
    if radix < 2:
        raise ValueError("radix must be at least 2")
    if digits < 0:
        raise ValueError("digits must not be negative")
    r = list(values)
    if any(v < 0 for v in r):
        raise ValueError("radix sort needs non-negative keys")
    for i in range(digits):
        buckets: list[list[int]] = [[] for _ in range(radix)]
        for v in r:
            buckets[(v // radix**i) % radix].append(v)
        r = [v for bucket in buckets for v in bucket]
        _emit(trace, f"by digit {i + 1}:" + "".join(f"{v:>4}" for v in r))
    return r


def sort_spans(text: str, spans: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Quick-sort ``(start, length)`` spans of ``text`` by the substrings they mark."""
    r = [(start, length) for start, length in spans]
    for start, length in r:
        if start < 0 or length < 0 or start + length > len(text):
            raise IndexError(f"span ({start}, {length}) outside the text")
    _quick(r, lambda span: text[span[0] : span[0] + span[1]])
    return r
"""Recursive algorithms: Hanoi, grid paths, IP restoration, powers, list tricks, knapsack."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, NamedTuple, Optional, Sequence

from dstructs.linkedlist import LinkedList, Node

Move = tuple[int, str, str]
Cell = tuple[int, int]


def hanoi_recursive(n: int, a: str = "X", b: str = "Y", c: str = "Z") -> list[Move]:
    """Return the moves ``(disk, from, to)`` that carry ``n`` disks from ``a`` to ``c``."""
    moves: list[Move] = []
    if n < 1:
        return moves

    def solve(k: int, src: str, via: str, dst: str) -> None:
        if k == 1:
            moves.append((1, src, dst))
            return
        solve(k - 1, src, dst, via)
        moves.append((k, src, dst))
        solve(k - 1, via, src, dst)

    solve(n, a, b, c)
    return moves


def hanoi_iterative(n: int, x: str = "X", y: str = "Y", z: str = "Z") -> list[Move]:
    """Return the same moves as :func:`hanoi_recursive`, computed with an explicit stack."""
    moves: list[Move] = []
    if n < 1:
        return moves
    # Each frame: (disks, source, spare, target, can move directly)
    stack = [(n, x, y, z, n == 1)]
    while stack:
        k, src, via, dst, direct = stack.pop()
        if direct:
            moves.append((k, src, dst))
            continue
        stack.append((k - 1, via, src, dst, k - 1 == 1))
        stack.append((k, src, via, dst, True))
        stack.append((k - 1, src, dst, via, k - 1 == 1))
    return moves


def path_count(m: int, n: int) -> int:
    """Count the monotone paths from cell ``(m, n)`` to ``(1, 1)``."""

    @lru_cache(maxsize=None)
    def count(i: int, j: int) -> int:
        if i < 1 or j < 1:
            return 0
        if i == 1 and j == 1:
            return 1
        return count(i - 1, j) + count(i, j - 1)

    return count(m, n)


def paths(m: int, n: int) -> list[list[Cell]]:
    """Return every path from ``(m, n)`` to ``(1, 1)``, stepping down a row before a column."""
    result: list[list[Cell]] = []
    trail: list[Cell] = []

    def walk(i: int, j: int) -> None:
        if i < 1 or j < 1:
            return
        trail.append((i, j))
        if i == 1 and j == 1:
            result.append(list(trail))
        else:
            walk(i - 1, j)
            walk(i, j - 1)
        trail.pop()

    walk(m, n)
    return result


def restore_ip_addresses(s: str) -> list[str]:
    """Return every dotted IPv4 address whose digits, in order, spell ``s``."""
    if any(ch not in "0123456789" for ch in s):
        raise ValueError(f"not a digit string: {s!r}")
    results: list[str] = []

    def solve(start: int, parts: list[str]) -> None:
        if start == len(s) and len(parts) == 4:
            results.append(".".join(parts))
            return
        if len(parts) >= 4:
            return
        num = 0
        for end in range(start, min(len(s), start + 3)):
            num = 10 * num + int(s[end])
            if num <= 255:
                solve(end + 1, parts + [s[start : end + 1]])
            if num == 0:
                break

    solve(0, [])
    return results


def power(x: float, n: int) -> float:
    """Return ``x`` to the power ``n`` (n >= 1) by repeated halving of the exponent."""
    if n < 1:
        raise ValueError("exponent must be at least 1")
    if n == 1:
        return x
    half = power(x, n // 2)
    return half * half if n % 2 == 0 else x * half * half


def reverse_linked(lst: LinkedList) -> LinkedList:
    """Reverse ``lst`` in place by recursion and return it."""
    first = lst.head.next
    if first is None:
        return lst

    def rev(node: Node) -> None:
        if node.next is None:
            lst.head.next = node
            return
        rev(node.next)
        node.next.next = node
        node.next = None

    rev(first)
    return lst


def kth_from_end(lst: LinkedList, k: int) -> Any:
    """Return the ``k``-th element counted from the end (the last one is 1)."""

    def find(node: Optional[Node]) -> tuple[Optional[Node], int]:
        if node is None:
            return None, 0
        found, count = find(node.next)
        count += 1
        return (node if count == k else found), count

    node, _ = find(lst.head.next)
    if node is None:
        raise IndexError(f"no element {k} from the end")
    return node.data


class Packing(NamedTuple):
    """The best selection: 1-based item numbers, their total weight and value."""

    items: tuple[int, ...]
    weight: int
    value: int


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> Packing:
    """Find the most valuable selection of items whose total weight fits ``capacity``.

    Selections are tried taking each item before leaving it out; a later
    selection replaces the best only when its value is strictly larger.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    n = len(weights)
    best = Packing((), 0, 0)
    chosen: list[int] = []

    def consider(i: int, tw: int, tv: int) -> None:
        nonlocal best
        if i >= n:
            if tw <= capacity and tv > best.value:
                best = Packing(tuple(chosen), tw, tv)
            return
        chosen.append(i + 1)
        consider(i + 1, tw + weights[i], tv + values[i])
        chosen.pop()
        consider(i + 1, tw, tv)

    consider(0, 0, 0)
    return best
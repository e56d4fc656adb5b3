"""Pattern matching: brute force, KMP with next and nextval tables, and repeats."""

from __future__ import annotations


def brute_force_index(s: str, t: str) -> int:
    """Return the index of the first occurrence of ``t`` in ``s``, or -1."""
    i = j = 0
    while i < len(s) and j < len(t):
        if s[i] == t[j]:
            i += 1
            j += 1
        else:
            i = i - j + 1
            j = 0
    return i - len(t) if j >= len(t) else -1


def _next_extended(t: str) -> list[int]:
    """Return the next table of ``t`` including the entry for position ``len(t)``."""
    nxt = [-1] * (len(t) + 1)
    j, k = 0, -1
    while j < len(t):
        if k == -1 or t[j] == t[k]:
            j += 1
            k += 1
            nxt[j] = k
        else:
            k = nxt[k]
    return nxt


def next_table(t: str) -> list[int]:
    """Return the KMP failure table of ``t``: one entry per character."""
    return _next_extended(t)[: len(t)]


def nextval_table(t: str) -> list[int]:
    """Return the improved KMP failure table of ``t``."""
    if not t:
        return []
    nextval = [-1] * len(t)
    j, k = 0, -1
    while j < len(t) - 1:
        if k == -1 or t[j] == t[k]:
            j += 1
            k += 1
            nextval[j] = k if t[j] != t[k] else nextval[k]
        else:
            k = nextval[k]
    return nextval


def _kmp(s: str, t: str, table: list[int]) -> int:
    i = j = 0
    while i < len(s) and j < len(t):
        if j == -1 or s[i] == t[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - len(t) if j >= len(t) else -1


def kmp_index(s: str, t: str) -> int:
    """Return the index of the first occurrence of ``t`` in ``s`` using KMP, or -1."""
    return _kmp(s, t, next_table(t))


def kmp_index_improved(s: str, t: str) -> int:
    """Like :func:`kmp_index`, but driven by the nextval table."""
    return _kmp(s, t, nextval_table(t))


def count_occurrences(s: str, t: str) -> int:
    """Count the non-overlapping occurrences of ``t`` in ``s`` using KMP."""
    nxt = next_table(t)
    i = j = count = 0
    while i < len(s) and j < len(t):
        if j == -1 or s[i] == t[j]:
            i += 1
            j += 1
        else:
            j = nxt[j]
        if j == len(t):
            count += 1
            j = 0
    return count


def count_overlapping(s: str, t: str) -> int:
    """Count every occurrence of ``t`` in ``s``, overlapping ones included."""
    nxt = _next_extended(t)
    i = j = count = 0
    while i < len(s) and j < len(t):
        if j == -1 or s[i] == t[j]:
            i += 1
            j += 1
        else:
            j = nxt[j]
        if j == len(t):
            count += 1
            j = nxt[j]
    return count


def longest_repeated_substring(s: str) -> str:
    """Return the first longest substring that occurs at least twice (possibly overlapping)."""
    n = len(s)
    index = length = 0
    for i in range(n):
        j = i + 1
        while j < n:
            if s[i] == s[j]:
                run = 1
                while j + run < n and s[i + run] == s[j + run]:
                    run += 1
                if run > length:
                    index, length = i, run
                j += run
            else:
                j += 1
    return s[index : index + length]
"""External sorting building blocks: loser trees, top-k selection, run generation, k-way merge."""

from __future__ import annotations

import heapq
import math
from itertools import islice
from typing import Any, Callable, Iterable, NamedTuple, Optional, Sequence

from dstructs.sorting import _sift

MINKEY = -math.inf
MAXKEY = math.inf

_END = object()


class LoserTree:
    """A loser tree over ``k`` leaves.

    ``keys[i]`` is the current key of leaf ``i``; ``keys[k]`` holds a sentinel
    smaller than any key, used while the tree is built. Internal node ``t``
    records the losing leaf of its match and node 0 the overall winner.
    After changing ``keys[i]``, call :meth:`adjust` with ``i``.
    """

    def __init__(self, keys: Iterable[Any]) -> None:
        self._setup(keys, None)

    def _setup(self, keys: Iterable[Any], step: Optional[Callable[[int], None]]) -> None:
        self.keys: list[Any] = list(keys)
        k = len(self.keys)
        if k == 0:
            raise ValueError("a loser tree needs at least one leaf")
        self._k = k
        self.keys.append(MINKEY)
        self._ls = [k] * k
        for i in range(k - 1, -1, -1):
            self.adjust(i)
            if step is not None:
                step(i)

    def adjust(self, s: int) -> None:
        """Replay the matches on the path from leaf ``s`` to the root."""
        if not 0 <= s < self._k:
            raise IndexError(f"leaf {s} out of range")
        t = (s + self._k) // 2
        while t > 0:
            if self.keys[s] > self.keys[self._ls[t]]:
                s, self._ls[t] = self._ls[t], s
            t //= 2
        self._ls[0] = s

    def winner(self) -> int:
        """Return the leaf holding the smallest key."""
        return self._ls[0]

    def losers(self) -> list[int]:
        """Return the node array: the winner followed by the loser at each internal node."""
        return list(self._ls)

    def __repr__(self) -> str:
        return f"LoserTree(keys={self.keys[:-1]!r}, nodes={self._ls!r})"


class TraceStep(NamedTuple):
    """The tree's node array right after leaf ``leaf`` with key ``key`` was played in."""

    leaf: int
    key: Any
    losers: list[int]


def build_trace(keys: Sequence[Any]) -> list[TraceStep]:
    """Build a loser tree over ``keys`` and record the node array after each leaf."""
    keys = list(keys)
    steps: list[TraceStep] = []
    tree = object.__new__(LoserTree)
    tree._setup(keys, lambda i: steps.append(TraceStep(i, keys[i], tree.losers())))
    return steps


def select_smallest(records: Sequence[Any], k: int = 5) -> list[Any]:
    """Return the ``k`` smallest records, kept in a max-heap in level order.

    The first ``k`` records form the heap; every later record smaller than
    the root replaces it and is sifted down.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    records = list(records)
    if len(records) < k:
        raise ValueError(f"need at least {k} records, got {len(records)}")
    heap: list[Any] = [None, *records[:k]]
    for i in range(k // 2, 0, -1):
        _sift(heap, i, k)
    for record in records[k:]:
        if record < heap[1]:
            heap[1] = record
            _sift(heap, 1, k)
    return heap[1:]


def replacement_selection(records: Iterable[Any], workspace: int = 5) -> list[list[Any]]:
    """Split the records into ascending initial runs by replacement selection.

    The work area holds ``workspace`` records; a record read in that is smaller
    than the last one written goes to the next run.
    """
    if workspace < 1:
        raise ValueError("workspace must hold at least one record")
    source = iter(records)
    area = [(1, key) for key in islice(source, workspace)]
    heapq.heapify(area)
    runs: list[list[Any]] = []
    current = 0
    while area:
        run, key = heapq.heappop(area)
        if run != current:
            runs.append([])
            current = run
        runs[-1].append(key)
        incoming = next(source, _END)
        if incoming is not _END:
            heapq.heappush(area, (run + 1 if incoming < key else run, incoming))
    return runs


def k_way_merge(runs: Iterable[Iterable[Any]]) -> list[Any]:
    """Merge ascending runs into one ascending list with a loser tree."""
    sources = [iter(run) for run in runs]
    if not sources:
        return []
    tree = LoserTree(next(src, MAXKEY) for src in sources)
    merged = []
    while True:
        q = tree.winner()
        key = tree.keys[q]
        if key == MAXKEY:
            break
        merged.append(key)
        tree.keys[q] = next(sources[q], MAXKEY)
        tree.adjust(q)
    return merged
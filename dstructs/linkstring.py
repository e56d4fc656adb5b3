"""Strings stored as chains of one-character nodes behind a header node."""

from __future__ import annotations

from itertools import chain, islice
from typing import Any, Iterable, Iterator, Optional

from dstructs.linkedlist import Node
from dstructs.sqstring import _check_insert, _check_span


class LinkedString:
    """An immutable string kept as a singly linked chain of characters."""

    def __init__(self, text: Iterable[str] = "") -> None:
        self.head = Node()
        tail = self.head
        for ch in text:
            tail.next = Node(ch)
            tail = tail.next

    def _chars(self) -> Iterator[str]:
        node: Optional[Node] = self.head.next
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._chars())

    def __iter__(self) -> Iterator[str]:
        return self._chars()

    def __str__(self) -> str:
        return "".join(self._chars())

    def __repr__(self) -> str:
        return f"LinkedString({str(self)!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinkedString):
            return NotImplemented
        p, q = self.head.next, other.head.next
        while p is not None and q is not None and p.data == q.data:
            p, q = p.next, q.next
        return p is None and q is None

    def __hash__(self) -> int:
        return hash(str(self))

    def copy(self) -> "LinkedString":
        """Return a copy built from fresh nodes."""
        return LinkedString(self)

    def concat(self, other: "LinkedString") -> "LinkedString":
        """Return this string followed by ``other``."""
        return LinkedString(chain(self, other))

    def substring(self, i: int, j: int) -> "LinkedString":
        """Return the ``j`` characters starting at position ``i``."""
        _check_span(len(self), i, j)
        return LinkedString(islice(self, i - 1, i - 1 + j))

    def insert(self, i: int, other: "LinkedString") -> "LinkedString":
        """Return a new string with ``other`` inserted so that it starts at position ``i``."""
        _check_insert(len(self), i)
        return LinkedString(
            chain(islice(self, i - 1), other, islice(self, i - 1, None))
        )

    def delete(self, i: int, j: int) -> "LinkedString":
        """Return a new string without the ``j`` characters starting at position ``i``."""
        _check_span(len(self), i, j)
        return LinkedString(chain(islice(self, i - 1), islice(self, i - 1 + j, None)))

    def replace(self, i: int, j: int, other: "LinkedString") -> "LinkedString":
        """Return a new string with ``j`` characters at position ``i`` replaced by ``other``."""
        _check_span(len(self), i, j)
        return LinkedString(
            chain(islice(self, i - 1), other, islice(self, i - 1 + j, None))
        )
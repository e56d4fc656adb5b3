"""Singly linked list with a header node and 1-based positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from dstructs.seqlist import _transcript


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list; ``head`` is a header node holding no element."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head = Node()
        tail = self.head
        for item in items:
            tail.next = Node(item)
            tail = tail.next

    @classmethod
    def from_head_insertion(cls, items: Iterable[Any]) -> "LinkedList":
        """Build a list by inserting each item at the front (reversing order)."""
        lst = cls()
        for item in items:
            lst.head.next = Node(item, lst.head.next)
        return lst

    def _nodes(self) -> Iterator[Node]:
        node = self.head.next
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, i: int) -> Optional[Node]:
        node: Optional[Node] = self.head
        for _ in range(i):
            if node is None:
                break
            node = node.next
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self.head.next is None

    def get(self, i: int) -> Any:
        """Return the element at position ``i`` (1-based)."""
        node = self._node_at(i) if i > 0 else None
        if node is None:
            raise IndexError(f"position {i} out of range")
        return node.data

    def locate(self, e: Any) -> int:
        """Return the position of the first element equal to ``e``."""
        for position, item in enumerate(self, start=1):
            if item == e:
                return position
        raise ValueError(f"{e!r} is not in the list")

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it becomes the element at position ``i``."""
        prev = self._node_at(i - 1) if i > 0 else None
        if prev is None:
            raise IndexError(f"position {i} out of range")
        prev.next = Node(e, prev.next)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        prev = self._node_at(i - 1) if i > 0 else None
        if prev is None or prev.next is None:
            raise IndexError(f"position {i} out of range")
        target = prev.next
        prev.next = target.next
        return target.data


def demo() -> list[str]:
    """Exercise a singly linked list and return the transcript lines."""
    return _transcript("singly linked list", LinkedList())
"""Doubly linked list with a header node and 1-based positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from dstructs.seqlist import _transcript


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    data: Any = None
    prior: Optional["DNode"] = None
    next: Optional["DNode"] = None


class DoublyLinkedList:
    """Doubly linked list; ``head`` is a header node holding no element."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head = DNode()
        tail = self.head
        for item in items:
            node = DNode(item, prior=tail)
            tail.next = node
            tail = node

    @classmethod
    def from_head_insertion(cls, items: Iterable[Any]) -> "DoublyLinkedList":
        """Build a list by inserting each item at the front (reversing order)."""
        lst = cls()
        for item in items:
            lst._link_after(lst.head, item)
        return lst

    @staticmethod
    def _link_after(prev: DNode, data: Any) -> None:
        node = DNode(data, prior=prev, next=prev.next)
        if prev.next is not None:
            prev.next.prior = node
        prev.next = node

    def _nodes(self) -> Iterator[DNode]:
        node = self.head.next
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, i: int) -> Optional[DNode]:
        node: Optional[DNode] = self.head
        for _ in range(i):
            if node is None:
                break
            node = node.next
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        while tail is not self.head:
            yield tail.data
            tail = tail.prior

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

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
        self._link_after(prev, e)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        prev = self._node_at(i - 1) if i > 0 else None
        if prev is None or prev.next is None:
            raise IndexError(f"position {i} out of range")
        target = prev.next
        prev.next = target.next
        if target.next is not None:
            target.next.prior = prev
        return target.data


def demo() -> list[str]:
    """Exercise a doubly linked list and return the transcript lines."""
    return _transcript("doubly linked list", DoublyLinkedList())
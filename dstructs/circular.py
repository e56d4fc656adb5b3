"""Circular singly and doubly linked lists with header nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from dstructs.dlinkedlist import DNode
from dstructs.linkedlist import Node
from dstructs.seqlist import _transcript


class CircularLinkedList:
    """Circular singly linked list; the last node links back to ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head = Node()
        self.head.next = self.head
        tail = self.head
        for item in items:
            tail.next = Node(item, self.head)
            tail = tail.next

    @classmethod
    def from_head_insertion(cls, items: Iterable[Any]) -> "CircularLinkedList":
        """Build a list by inserting each item at the front (reversing order)."""
        lst = cls()
        for item in items:
            lst.head.next = Node(item, lst.head.next)
        return lst

    def _nodes(self) -> Iterator[Node]:
        node = self.head.next
        while node is not self.head:
            yield node
            node = node.next

    def _find_data_node(self, i: int) -> Node:
        """Return the data node at position ``i``; the header if it runs past the end."""
        node = self.head.next
        for _ in range(i - 1):
            if node is self.head:
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
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self.head.next is self.head

    def get(self, i: int) -> Any:
        """Return the element at position ``i`` (1-based)."""
        if i <= 0 or self.is_empty():
            raise IndexError(f"position {i} out of range")
        node = self._find_data_node(i)
        if node is self.head:
            raise IndexError(f"position {i} out of range")
        return node.data

    def locate(self, e: Any) -> int:
        """Return the position of the first element equal to ``e``."""
        for position, item in enumerate(self, start=1):
            if item == e:
                return position
        raise ValueError(f"{e!r} is not in the list")

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` at position ``i``; into an empty list any ``i >= 1`` is accepted."""
        if i <= 0:
            raise IndexError(f"position {i} out of range")
        if self.is_empty() or i == 1:
            prev = self.head
        else:
            prev = self._find_data_node(i - 1)
            if prev is self.head:
                raise IndexError(f"position {i} out of range")
        prev.next = Node(e, prev.next)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        if i <= 0 or self.is_empty():
            raise IndexError(f"position {i} out of range")
        prev = self.head if i == 1 else self._find_data_node(i - 1)
        if (i > 1 and prev is self.head) or prev.next is self.head:
            raise IndexError(f"position {i} out of range")
        target = prev.next
        prev.next = target.next
        return target.data


class CircularDoublyLinkedList:
    """Circular doubly linked list; ``head.prior`` is the last node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head = DNode()
        self.head.prior = self.head.next = self.head
        for item in items:
            self._link_after(self.head.prior, item)

    @classmethod
    def from_head_insertion(cls, items: Iterable[Any]) -> "CircularDoublyLinkedList":
        """Build a list by inserting each item at the front (reversing order)."""
        lst = cls()
        for item in items:
            lst._link_after(lst.head, item)
        return lst

    @staticmethod
    def _link_after(prev: DNode, data: Any) -> None:
        node = DNode(data, prior=prev, next=prev.next)
        prev.next.prior = node
        prev.next = node

    def _nodes(self) -> Iterator[DNode]:
        node = self.head.next
        while node is not self.head:
            yield node
            node = node.next

    def _find_data_node(self, i: int) -> DNode:
        node = self.head.next
        for _ in range(i - 1):
            if node is self.head:
                break
            node = node.next
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.head.prior
        while node is not self.head:
            yield node.data
            node = node.prior

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self.head.next is self.head

    def get(self, i: int) -> Any:
        """Return the element at position ``i`` (1-based)."""
        if i <= 0 or self.is_empty():
            raise IndexError(f"position {i} out of range")
        node = self._find_data_node(i)
        if node is self.head:
            raise IndexError(f"position {i} out of range")
        return node.data

    def locate(self, e: Any) -> int:
        """Return the position of the first element equal to ``e``."""
        for position, item in enumerate(self, start=1):
            if item == e:
                return position
        raise ValueError(f"{e!r} is not in the list")

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` at position ``i``; into an empty list any ``i >= 1`` is accepted."""
        if i <= 0:
            raise IndexError(f"position {i} out of range")
        if self.is_empty() or i == 1:
            prev = self.head
        else:
            prev = self._find_data_node(i - 1)
            if prev is self.head:
                raise IndexError(f"position {i} out of range")
        self._link_after(prev, e)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        if i <= 0 or self.is_empty():
            raise IndexError(f"position {i} out of range")
        prev = self.head if i == 1 else self._find_data_node(i - 1)
        if (i > 1 and prev is self.head) or prev.next is self.head:
            raise IndexError(f"position {i} out of range")
        target = prev.next
        prev.next = target.next
        target.next.prior = prev
        return target.data


def demo_singly() -> list[str]:
    """Exercise a circular singly linked list and return the transcript lines."""
    return _transcript("circular singly linked list", CircularLinkedList())


def demo_doubly() -> list[str]:
    """Exercise a circular doubly linked list and return the transcript lines."""
    return _transcript("circular doubly linked list", CircularDoublyLinkedList())
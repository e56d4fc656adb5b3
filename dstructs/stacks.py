"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from typing import Any, Optional

from dstructs.linkedlist import Node

DEFAULT_CAPACITY = 100


class ArrayStack:
    """A stack with a fixed maximum number of elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def push(self, e: Any) -> None:
        """Put ``e`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(e)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]


class LinkedStack:
    """An unbounded stack built from linked nodes behind a header node."""

    def __init__(self) -> None:
        self._head = Node()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items = []
        node: Optional[Node] = self._head.next
        while node is not None:
            items.append(node.data)
            node = node.next
        return f"LinkedStack(top first: {items!r})"

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return self._head.next is None

    def push(self, e: Any) -> None:
        """Put ``e`` on top of the stack."""
        self._head.next = Node(e, self._head.next)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        top = self._head.next
        if top is None:
            raise IndexError("pop from an empty stack")
        self._head.next = top.next
        self._size -= 1
        return top.data

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self._head.next is None:
            raise IndexError("peek at an empty stack")
        return self._head.next.data


def sort_stack(stack: Any) -> None:
    """Reorder ``stack`` in place so that popping yields ascending elements.

    Works with any stack offering ``is_empty``, ``push``, ``pop`` and ``peek``;
    only one auxiliary stack is used.
    """
    spare = LinkedStack()
    while not stack.is_empty():
        e = stack.pop()
        while not spare.is_empty() and spare.peek() > e:
            stack.push(spare.pop())
        spare.push(e)
    while not spare.is_empty():
        stack.push(spare.pop())
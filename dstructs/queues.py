"""Circular, linear and linked queues."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

DEFAULT_CAPACITY = 100


class CircularQueue:
    """A ring queue of ``capacity`` slots; one slot stays free, so it holds ``capacity - 1``."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self._items)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no further element can be enqueued."""
        return len(self._items) >= self.capacity - 1

    def enqueue(self, e: Any) -> None:
        """Add ``e`` at the rear."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(e)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()


class LinearQueue:
    """A non-circular queue: at most ``capacity`` elements may ever be enqueued.

    Slots freed by dequeuing are not reused.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._enqueued = 0

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LinearQueue({list(self._items)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def enqueue(self, e: Any) -> None:
        """Add ``e`` at the rear."""
        if self._enqueued >= self.capacity:
            raise OverflowError("queue is full")
        self._items.append(e)
        self._enqueued += 1

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()


class LinkedQueue:
    """An unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def enqueue(self, e: Any) -> None:
        """Add ``e`` at the rear."""
        self._items.append(e)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()
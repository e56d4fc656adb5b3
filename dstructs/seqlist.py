"""Bounded sequential list addressed by logical positions starting at 1."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

DEFAULT_CAPACITY = 50


class SeqList:
    """A fixed-capacity list whose elements are numbered from 1."""

    def __init__(self, items: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data = list(items)
        if len(self._data) > capacity:
            raise OverflowError(f"{len(self._data)} items exceed capacity {capacity}")

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._data)

    def __repr__(self) -> str:
        return f"SeqList({self._data!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return not self._data

    def get(self, i: int) -> Any:
        """Return the element at position ``i`` (1-based)."""
        if not 1 <= i <= len(self._data):
            raise IndexError(f"position {i} out of range")
        return self._data[i - 1]

    def locate(self, e: Any) -> int:
        """Return the position of the first element equal to ``e``."""
        try:
            return self._data.index(e) + 1
        except ValueError:
            raise ValueError(f"{e!r} is not in the list") from None

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it becomes the element at position ``i``."""
        if not 1 <= i <= len(self._data) + 1:
            raise IndexError(f"position {i} out of range")
        if len(self._data) >= self.capacity:
            raise OverflowError("list is full")
        self._data.insert(i - 1, e)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        if not 1 <= i <= len(self._data):
            raise IndexError(f"position {i} out of range")
        return self._data.pop(i - 1)


def _transcript(kind: str, lst: Any) -> list[str]:
    """Run the standard sequence of list operations on ``lst`` and describe it."""
    lines = [f"Basic operations of a {kind}:", "  (1) initialise list L"]
    lines.append("  (2) insert a, b, c, d, e in turn")
    for position, ch in enumerate("abcde", start=1):
        lst.insert(position, ch)
    lines.append(f"  (3) list L: {lst}")
    lines.append(f"  (4) length of L: {len(lst)}")
    lines.append(f"  (5) L is {'empty' if lst.is_empty() else 'not empty'}")
    lines.append(f"  (6) element 3 of L: {lst.get(3)}")
    lines.append(f"  (7) position of a: {lst.locate('a')}")
    lines.append("  (8) insert f at position 4")
    lst.insert(4, "f")
    lines.append(f"  (9) list L: {lst}")
    lines.append("  (10) delete element 3 of L")
    lst.delete(3)
    lines.append(f"  (11) list L: {lst}")
    lines.append("  (12) release list L")
    return lines


def demo() -> list[str]:
    """Exercise a sequential list and return the transcript lines."""
    return _transcript("sequential list", SeqList())
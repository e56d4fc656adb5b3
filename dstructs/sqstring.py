"""Bounded sequential strings addressed by 1-based character positions."""

from __future__ import annotations

from typing import Any

MAX_SIZE = 100


def _check_span(length: int, i: int, j: int) -> None:
    """Raise IndexError unless ``j`` characters starting at position ``i`` exist."""
    if i <= 0 or i > length or j < 0 or i + j - 1 > length:
        raise IndexError(f"span of {j} characters at position {i} out of range")


def _check_insert(length: int, i: int) -> None:
    """Raise IndexError unless ``i`` is a valid insertion position."""
    if i <= 0 or i > length + 1:
        raise IndexError(f"position {i} out of range")


class SeqString:
    """An immutable string of at most ``MAX_SIZE`` characters."""

    def __init__(self, text: str = "") -> None:
        text = str(text)
        if len(text) > MAX_SIZE:
            raise OverflowError(f"{len(text)} characters exceed capacity {MAX_SIZE}")
        self._text = text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SeqString({self._text!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SeqString):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def concat(self, other: "SeqString") -> "SeqString":
        """Return this string followed by ``other``."""
        return SeqString(self._text + str(other))

    def substring(self, i: int, j: int) -> "SeqString":
        """Return the ``j`` characters starting at position ``i``."""
        _check_span(len(self._text), i, j)
        return SeqString(self._text[i - 1 : i - 1 + j])

    def insert(self, i: int, other: "SeqString") -> "SeqString":
        """Return a new string with ``other`` inserted so that it starts at position ``i``."""
        _check_insert(len(self._text), i)
        return SeqString(self._text[: i - 1] + str(other) + self._text[i - 1 :])

    def delete(self, i: int, j: int) -> "SeqString":
        """Return a new string without the ``j`` characters starting at position ``i``."""
        _check_span(len(self._text), i, j)
        return SeqString(self._text[: i - 1] + self._text[i - 1 + j :])

    def replace(self, i: int, j: int, other: "SeqString") -> "SeqString":
        """Return a new string with ``j`` characters at position ``i`` replaced by ``other``."""
        _check_span(len(self._text), i, j)
        return SeqString(self._text[: i - 1] + str(other) + self._text[i - 1 + j :])
"""Algorithms over linked lists: partitioning, interleaving, sorted sets and digit lists."""

from __future__ import annotations

from itertools import zip_longest
from typing import Any, Iterable

from dstructs.linkedlist import LinkedList, Node

_END = object()


def split_around_first(lst: LinkedList) -> None:
    """Move every element smaller than the first one to the front, in place.

    Smaller elements are inserted at the head as they are met, so they end up
    in reverse order; the rest keep their order.
    """
    first = lst.head.next
    if first is None or first.next is None:
        return
    pivot = first.data
    pre, node = first, first.next
    while node is not None:
        if node.data < pivot:
            pre.next = node.next
            node.next = lst.head.next
            lst.head.next = node
            node = pre.next
        else:
            pre, node = node, node.next


def split_around_first_stable(lst: LinkedList) -> None:
    """Partition around the first element in place, keeping both parts in order."""
    first = lst.head.next
    if first is None or first.next is None:
        return
    pivot = first.data
    less_tail = lst.head
    rest = Node()
    rest_tail = rest
    node: Any = first
    while node is not None:
        following = node.next
        if node.data < pivot:
            less_tail.next = node
            less_tail = node
        else:
            rest_tail.next = node
            rest_tail = node
        node = following
    rest_tail.next = None
    less_tail.next = rest.next


def interleave(first: LinkedList, second: LinkedList) -> LinkedList:
    """Alternate the nodes of both lists into ``first`` and return it.

    The longer list's leftover nodes are appended; ``second`` is left empty.
    """
    p, q = first.head.next, second.head.next
    tail = first.head
    while p is not None and q is not None:
        tail.next = p
        tail = p
        p = p.next
        tail.next = q
        tail = q
        q = q.next
    tail.next = p if p is not None else q
    second.head.next = None
    return first


def sort_list(lst: LinkedList) -> None:
    """Sort the list in ascending order by straight insertion, in place."""
    node = lst.head.next
    if node is None:
        return
    rest = node.next
    node.next = None
    while rest is not None:
        following = rest.next
        pre = lst.head
        while pre.next is not None and pre.next.data < rest.data:
            pre = pre.next
        rest.next = pre.next
        pre.next = rest
        rest = following


def union(a: Iterable[Any], b: Iterable[Any]) -> LinkedList:
    """Merge two ascending sequences; an element present in both is kept once."""
    out = []
    ia, ib = iter(a), iter(b)
    x, y = next(ia, _END), next(ib, _END)
    while x is not _END and y is not _END:
        if x < y:
            out.append(x)
            x = next(ia, _END)
        elif x > y:
            out.append(y)
            y = next(ib, _END)
        else:
            out.append(x)
            x, y = next(ia, _END), next(ib, _END)
    for current, rest in ((x, ia), (y, ib)):
        if current is not _END:
            out.append(current)
            out.extend(rest)
    return LinkedList(out)


def _member(value: Any, ordered: list[Any]) -> bool:
    found = next((item for item in ordered if not item < value), _END)
    return found is not _END and found == value


def intersection(a: Iterable[Any], b: Iterable[Any]) -> LinkedList:
    """Return the elements of ascending ``a`` that occur in ascending ``b``."""
    ordered = list(b)
    return LinkedList(item for item in a if _member(item, ordered))


def difference(a: Iterable[Any], b: Iterable[Any]) -> LinkedList:
    """Return the elements of ascending ``a`` that do not occur in ascending ``b``."""
    ordered = list(b)
    return LinkedList(item for item in a if not _member(item, ordered))


def digits_of(text: str) -> list[int]:
    """Return the decimal digits of ``text``, least significant first."""
    if any(ch not in "0123456789" for ch in text):
        raise ValueError(f"not a decimal number: {text!r}")
    return [int(ch) for ch in reversed(text)]


def add_digits(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Add two numbers given as digit lists (least significant first)."""
    result = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        total = x + y + carry
        result.append(total % 10)
        carry = total // 10
    if carry:
        result.append(carry)
    return result


def middle(values: Iterable[Any]) -> Any:
    """Return the middle element; for an even count, the first of the two middles."""
    seq = list(values)
    if not seq:
        raise ValueError("middle of an empty sequence")
    return seq[(len(seq) - 1) // 2]
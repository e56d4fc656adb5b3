"""Radix sorting of padded words and of student records by class number and sex."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, TypeVar

MAX_WORD = 9
_ALPHABET = " abcdefghijklmnopqrstuvwxyz"
_DIGITS = "0123456789"

Trace = Optional[Callable[[str], None]]
T = TypeVar("T")


def _distribute(items: Iterable[T], key: Callable[[T], int], radix: int) -> list[T]:
    """One pass of bucket distribution followed by collection in bucket order."""
    buckets: list[list[T]] = [[] for _ in range(radix)]
    for item in items:
        buckets[key(item)].append(item)
    return [item for bucket in buckets for item in bucket]


def pad_words(words: Iterable[str], width: int = MAX_WORD) -> list[str]:
    """Pad every word with trailing spaces to exactly ``width`` characters."""
    padded = []
    for word in words:
        if len(word) > width:
            raise ValueError(f"word {word!r} is longer than {width} characters")
        padded.append(word.ljust(width))
    return padded


def strip_words(words: Iterable[str]) -> list[str]:
    """Remove the trailing spaces added by :func:`pad_words`."""
    return [word.rstrip(" ") for word in words]


def radix_sort_words(words: Iterable[str], width: int = MAX_WORD) -> list[str]:
    """Sort words of spaces and lower-case letters by least-significant-position radix sort.

    Words are padded to ``width``, sorted with 27 buckets (space, then a to z)
    and returned with the padding removed.
    """
    padded = pad_words(words, width)
    for word in padded:
        bad = [ch for ch in word if ch not in _ALPHABET]
        if bad:
            raise ValueError(f"word {word.rstrip()!r} holds unsupported character {bad[0]!r}")
    for position in range(width - 1, -1, -1):
        padded = _distribute(padded, lambda w, p=position: _ALPHABET.index(w[p]), len(_ALPHABET))
    return strip_words(padded)


@dataclass(frozen=True)
class Student:
    """A student with a name, a sex ('m' or 'f') and a class number such as '1003'."""

    name: str
    sex: str
    class_no: str

    def __post_init__(self) -> None:
        if len(self.class_no) < 4 or any(ch not in _DIGITS for ch in self.class_no[2:4]):
            raise ValueError(f"class number {self.class_no!r} needs digits in positions 3 and 4")

    def __str__(self) -> str:
        return f"{self.name}({self.class_no},{self.sex})"


def _format(students: Sequence[Student]) -> str:
    return " ".join(str(s) for s in students)


def sort_students(students: Iterable[Student], trace: Trace = None) -> list[Student]:
    """Order students by the last two digits of the class number, girls first within a class.

    A single pass on sex is followed by passes on the fourth and third digit.
    """
    result = _distribute(students, lambda s: 0 if s.sex == "f" else 1, 2)
    if trace is not None:
        trace("by sex:")
        trace(_format(result))
    for pass_no, position in enumerate((3, 2), start=1):
        result = _distribute(result, lambda s, p=position: int(s.class_no[p]), 10)
        if trace is not None:
            trace(f"pass {pass_no}:")
            trace(_format(result))
    return result
"""Polynomials as ordered lists of terms: sorting, addition and multiplication."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Any, Iterable, Iterator, Union

_END = object()


@dataclass(frozen=True)
class Term:
    """A single term ``coef * x**exp``."""

    coef: float
    exp: int

    def __str__(self) -> str:
        if self.exp == 0:
            return "%g" % self.coef
        if self.exp == 1:
            return "%gx" % self.coef
        return "%gx^%d" % (self.coef, self.exp)


TermLike = Union[Term, tuple]


class Polynomial:
    """A polynomial whose terms keep the order they were given in."""

    def __init__(self, terms: Iterable[TermLike] = ()) -> None:
        self._terms = [t if isinstance(t, Term) else Term(*t) for t in terms]

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        return f"Polynomial({[(t.coef, t.exp) for t in self._terms]!r})"

    def __str__(self) -> str:
        parts = []
        for index, term in enumerate(self._terms):
            sign = "+" if index and term.coef > 0 else ""
            parts.append(sign + str(term))
        return "".join(parts)

    def sorted(self) -> "Polynomial":
        """Return the terms ordered by decreasing exponent.

        Each term is placed before the first term whose exponent is not larger,
        so terms with equal exponents end up in reverse of their original order.
        """
        ordered: list[Term] = []
        for term in self._terms:
            pos = next((k for k, t in enumerate(ordered) if t.exp <= term.exp), len(ordered))
            ordered.insert(pos, term)
        return Polynomial(ordered)

    def __add__(self, other: Any) -> "Polynomial":
        """Add two polynomials already sorted by decreasing exponent."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        out: list[Term] = []
        ia, ib = iter(self._terms), iter(other._terms)
        a, b = next(ia, _END), next(ib, _END)
        while a is not _END and b is not _END:
            if a.exp > b.exp:
                out.append(a)
                a = next(ia, _END)
            elif a.exp < b.exp:
                out.append(b)
                b = next(ib, _END)
            else:
                coef = a.coef + b.coef
                if coef != 0:
                    out.append(Term(coef, a.exp))
                a, b = next(ia, _END), next(ib, _END)
        for current, rest in ((a, ia), (b, ib)):
            if current is not _END:
                out.append(current)
                out.extend(rest)
        return Polynomial(out)

    def multiply_raw(self, other: "Polynomial") -> "Polynomial":
        """Return every pairwise product of terms, uncombined and unsorted."""
        return Polynomial(
            Term(a.coef * b.coef, a.exp + b.exp) for a in self._terms for b in other._terms
        )

    def combined(self) -> "Polynomial":
        """Merge runs of adjacent terms that share an exponent."""
        return Polynomial(
            Term(sum(t.coef for t in run), exp)
            for exp, run in groupby(self._terms, key=lambda t: t.exp)
        )

    def without_zeros(self) -> "Polynomial":
        """Drop the terms whose coefficient is zero."""
        return Polynomial(t for t in self._terms if t.coef != 0)

    def __mul__(self, other: Any) -> "Polynomial":
        """Multiply, then sort, combine equal exponents and drop zero terms."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply_raw(other).sorted().combined().without_zeros()
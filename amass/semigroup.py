"""
Explicit combination capabilities.

Every accumulating operation takes its combination function as an argument;
nothing is looked up implicitly. A Semigroup (or Monoid) is just a callable
`(T, T) -> T`, so it can be passed anywhere a plain function is expected.

Usage:
    from amass import Err, semigroup

    Err(["a"]).append(Err(["b"]), semigroup.concat, semigroup.concat)
    Err("a").find_success(Err("b"), semigroup.joined(";"))
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Semigroup(Generic[T]):
    """An associative binary operation."""

    combine: Callable[[T, T], T]

    def __call__(self, left: T, right: T) -> T:
        return self.combine(left, right)

    def combine_all(self, first: T, rest: Iterable[T]) -> T:
        return reduce(self.combine, rest, first)


@dataclass(frozen=True, slots=True)
class Monoid(Generic[T]):
    """A Semigroup with an identity element."""

    combine: Callable[[T, T], T]
    empty: T

    def __call__(self, left: T, right: T) -> T:
        return self.combine(left, right)

    def combine_all(self, items: Iterable[T]) -> T:
        return reduce(self.combine, items, self.empty)


def joined(sep: str) -> Semigroup[str]:
    """
    Join strings with a separator.

    Usage:
        joined(";")("a", "b")  # "a;b"
    """

    def combine(left: str, right: str) -> str:
        return f"{left}{sep}{right}"

    return Semigroup(combine)


# Lists, tuples, strings and NonEmptyList all concatenate with +
concat: Semigroup = Semigroup(operator.add)
first: Semigroup = Semigroup(lambda left, _: left)
last: Semigroup = Semigroup(lambda _, right: right)

summing: Monoid[int] = Monoid(operator.add, 0)
string: Monoid[str] = Monoid(operator.add, "")
union: Monoid[frozenset] = Monoid(operator.or_, frozenset())


def listing() -> Monoid[list]:
    """List concatenation; a fresh empty list per call."""
    return Monoid(operator.add, [])

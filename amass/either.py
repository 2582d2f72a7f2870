"""
Disjoint-union encoding (Left/Right) used as the interop point for results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

L = TypeVar("L")
R = TypeVar("R")
X = TypeVar("X")


@dataclass(frozen=True, slots=True, repr=False)
class Left(Generic[L]):
    """Left case; corresponds to a failure."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def fold(self, on_left: Callable[[L], X], on_right: Callable[[Any], X]) -> X:
        return on_left(self.value)

    def swap(self) -> Right[L]:
        return Right(self.value)

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Right(Generic[R]):
    """Right case; corresponds to a success."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def fold(self, on_left: Callable[[Any], X], on_right: Callable[[R], X]) -> X:
        return on_right(self.value)

    def swap(self) -> Left[R]:
        return Left(self.value)

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


Either = Left[L] | Right[R]

"""
NonEmptyList - a list that always holds at least one element.

Used as the error payload of ResultNel so independent failures can be
concatenated without a caller-supplied combination function.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True, repr=False)
class NonEmptyList(Generic[T]):
    """
    Immutable list with a guaranteed head.

    Usage:
        NonEmptyList("missing name")
        NonEmptyList.of("a", "b") + NonEmptyList("c")
    """

    head: T
    tail: tuple[T, ...] = ()

    @classmethod
    def of(cls, head: T, *tail: T) -> NonEmptyList[T]:
        return cls(head, tuple(tail))

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> NonEmptyList[T]:
        """
        Build from any iterable.

        Raises:
            ValueError: If the iterable is empty
        """
        it = iter(items)
        try:
            head = next(it)
        except StopIteration:
            raise ValueError("NonEmptyList requires at least one element") from None
        return cls(head, tuple(it))

    def map(self, f: Callable[[T], U]) -> NonEmptyList[U]:
        return NonEmptyList(f(self.head), tuple(f(x) for x in self.tail))

    def to_list(self) -> list[T]:
        return [self.head, *self.tail]

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def __getitem__(self, index: int) -> T:
        return self.to_list()[index]

    def __add__(self, other: Any) -> NonEmptyList[T]:
        if not isinstance(other, NonEmptyList):
            return NotImplemented
        return NonEmptyList(self.head, (*self.tail, other.head, *other.tail))

    def __repr__(self) -> str:
        return f"NonEmptyList({', '.join(repr(x) for x in self)})"

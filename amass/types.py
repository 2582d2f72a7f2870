"""
Result type for accumulating error handling.

Provides Ok/Err, the Result and ResultNel aliases, and the Ordering used by
result comparison.

Unlike short-circuiting error handling, two independent failures can be
combined into one (`ap`, `append`, `find_success`) through a combination
function supplied by the caller. Bind (`and_then`) still short-circuits,
since the second computation needs the first one's success value.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Generic, TypeVar

from .either import Either, Left, Right
from .loops import loop_failure, loop_success
from .nel import NonEmptyList

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
X = TypeVar("X")


class Ordering(IntEnum):
    """Three-way comparison outcome."""

    LT = -1
    EQ = 0
    GT = 1

    @classmethod
    def of(cls, n: int) -> Ordering:
        """Normalise any cmp-style integer to an Ordering."""
        return cls((n > 0) - (n < 0))


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _force(x: Any) -> Any:
    # Results are never callable, so a callable here is a deferred alternative
    return x() if callable(x) else x


def _check(other: Any, op: str) -> None:
    if not isinstance(other, (Ok, Err)):
        raise TypeError(f"{op}() expects Ok or Err, got {type(other).__name__}")


class _ResultOps:
    """
    Operations shared by both cases.

    Each is written against the other operand's case, so Ok and Err only
    carry their own single-case behaviour.
    """

    __slots__ = ()

    def ap(self, other: Any, combine: Callable[[Any, Any], Any]) -> Any:
        """
        Apply a function held in `other` to this success, accumulating errors.

        Ok(a)  ap Ok(f)  -> Ok(f(a))
        Err(e) ap Ok(f)  -> Err(e)
        Ok(a)  ap Err(e) -> Err(e)
        Err(e1) ap Err(e2) -> Err(combine(e2, e1))

        Note the failure/failure order: the error of `other` comes first.
        `amass.collect.map_n` relies on this to keep errors in argument order.

        Args:
            other: Ok wrapping a one-argument function, or Err (may be a
                   zero-argument callable producing either)
            combine: Associative combination for the error payload
        """
        other = _force(other)
        _check(other, "ap")
        match (self, other):
            case (Ok(value), Ok(f)):
                return Ok(f(value))
            case (Err(), Ok()):
                return self
            case (Ok(), Err()):
                return other
            case (Err(e1), Err(e2)):
                return Err(combine(e2, e1))

    def append(
        self,
        other: Any,
        combine_err: Callable[[Any, Any], Any],
        combine_ok: Callable[[Any, Any], Any],
    ) -> Any:
        """
        Combine two results of the same shape.

        Ok(a1)  + Ok(a2)  -> Ok(combine_ok(a1, a2))
        Err(e1) + Err(e2) -> Err(combine_err(e1, e2))
        mixed             -> the Ok operand, unchanged

        The failure in a mixed pair is discarded, never merged.
        """
        other = _force(other)
        _check(other, "append")
        match (self, other):
            case (Ok(a1), Ok(a2)):
                return Ok(combine_ok(a1, a2))
            case (Err(e1), Err(e2)):
                return Err(combine_err(e1, e2))
            case (Ok(), Err()):
                return self
            case _:
                return other

    def find_success(self, other: Any, combine: Callable[[Any, Any], Any]) -> Any:
        """
        First success of the two; if both failed, combine their errors.

        `other` is only evaluated when this is a failure if passed as a
        zero-argument callable.
        """
        if isinstance(self, Ok):
            return self
        other = _force(other)
        _check(other, "find_success")
        match other:
            case Err(e2):
                return Err(combine(self.error, e2))
            case _:
                return other

    def or_else(self, other: Any) -> Any:
        """
        Return this if it is a success, otherwise `other`.

        No accumulation. `other` may be a zero-argument callable, which is
        only called on failure. Also available as `|`.
        """
        if isinstance(self, Ok):
            return self
        other = _force(other)
        _check(other, "or_else")
        return other

    def __or__(self, other: Any) -> Any:
        if not isinstance(other, (Ok, Err)) and not callable(other):
            return NotImplemented
        return self.or_else(other)

    def equals(
        self,
        other: Any,
        eq_err: Callable[[Any, Any], bool] | None = None,
        eq_ok: Callable[[Any, Any], bool] | None = None,
    ) -> bool:
        """Equality with explicit payload comparisons. Cross-case is always False."""
        match (self, other):
            case (Ok(a1), Ok(a2)):
                return (eq_ok or operator.eq)(a1, a2)
            case (Err(e1), Err(e2)):
                return (eq_err or operator.eq)(e1, e2)
            case _:
                return False

    def compare(
        self,
        other: Any,
        cmp_err: Callable[[Any, Any], int] | None = None,
        cmp_ok: Callable[[Any, Any], int] | None = None,
    ) -> Ordering:
        """
        Three-way comparison. Failures sort before successes; within a case
        the payload comparison decides (natural ordering unless given).
        """
        _check(other, "compare")
        match (self, other):
            case (Err(e1), Err(e2)):
                return Ordering.of((cmp_err or _natural)(e1, e2))
            case (Ok(a1), Ok(a2)):
                return Ordering.of((cmp_ok or _natural)(a1, a2))
            case (Err(), Ok()):
                return Ordering.LT
            case _:
                return Ordering.GT

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, (Ok, Err)):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, (Ok, Err)):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, (Ok, Err)):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, (Ok, Err)):
            return NotImplemented
        return self.compare(other) >= 0

    def ensure(self, on_failure: Any, predicate: Callable[[Any], bool]) -> Any:
        """
        Turn a success failing `predicate` into Err(on_failure).

        `on_failure` is a plain value, so None is a valid error here. Build
        the error from the value with `excepting` when it is costly.
        """
        if isinstance(self, Ok) and not predicate(self.value):
            return Err(on_failure)
        return self

    def swapped(self, k: Callable[[Any], Any]) -> Any:
        """Run `k` on the swapped result and swap the outcome back."""
        return k(self.swap()).swap()

    def via_either(self, k: Callable[[Either], Either]) -> Any:
        """Run a Left/Right function and convert back to a result."""
        return k(self.to_either()).fold(Err, Ok)

    def loop_success(
        self,
        success: Callable[[Any], Either],
        failure: Callable[[Any], X],
    ) -> X:
        """Iterate on the success value; see amass.loops.loop_success."""
        return loop_success(self, success, failure)

    def loop_failure(
        self,
        success: Callable[[Any], X],
        failure: Callable[[Any], Either],
    ) -> X:
        """Iterate on the failure value; see amass.loops.loop_failure."""
        return loop_failure(self, success, failure)

    def show(
        self,
        show_err: Callable[[Any], str] = repr,
        show_ok: Callable[[Any], str] = repr,
    ) -> str:
        return self.fold(
            lambda e: f"Err({show_err(e)})", lambda a: f"Ok({show_ok(a)})"
        )

    def __repr__(self) -> str:
        return self.show()


@dataclass(frozen=True, slots=True, repr=False)
class Ok(_ResultOps, Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def fold(self, on_err: Callable[[Any], X], on_ok: Callable[[T], X]) -> X:
        """Catamorphism. Only `on_ok` is called."""
        return on_ok(self.value)

    def fold_const(self, on_err: Any, on_ok: X) -> X:
        """`on_ok` for a success, `on_err` for a failure; payload ignored."""
        return on_ok

    def get_or_else(self, default: Any) -> T:
        return self.value

    def get_or_call(self, supplier: Callable[[], Any]) -> T:
        return self.value

    def value_or(self, f: Callable[[Any], Any]) -> T:
        return self.value

    def to_optional(self) -> T | None:
        """Discards the error on failure; here, the value itself."""
        return self.value

    def to_list(self) -> list[T]:
        return [self.value]

    def to_either(self) -> Right[T]:
        return Right(self.value)

    def to_nel(self) -> Ok[T]:
        return self

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def bimap(self, f: Callable[[Any], Any], g: Callable[[T], U]) -> Ok[U]:
        return Ok(g(self.value))

    def swap(self) -> Err[T]:
        return Err(self.value)

    def traverse(self, f: Callable[[T], Any], effect: Any) -> Any:
        """Run `f` and rewrap its outcome inside `effect` (needs `map`)."""
        return effect.map(f(self.value), Ok)

    def bitraverse(
        self, f: Callable[[Any], Any], g: Callable[[T], Any], effect: Any
    ) -> Any:
        return effect.map(g(self.value), Ok)

    def for_each(self, f: Callable[[T], Any]) -> None:
        f(self.value)

    def fold_right(self, z: U, f: Callable[[T, U], U]) -> U:
        return f(self.value, z)

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def forall(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def filter(self, predicate: Callable[[T], bool], zero: Any) -> Ok[T] | Err[Any]:
        """Keep if `predicate` holds, else Err(zero) (the error monoid's identity)."""
        return self if predicate(self.value) else Err(zero)

    def excepting(self, pf: Callable[[T], Any]) -> Ok[T] | Err[Any]:
        """
        Fail with `pf(value)` unless it returns None.

        `pf` is a partial mapping from value to error; None marks the value
        as outside its domain and the success passes through.
        """
        error = pf(self.value)
        return self if error is None else Err(error)

    def and_then(self, f: Callable[[T], Any]) -> Any:
        """Short-circuiting bind. Never accumulates."""
        return f(self.value)


@dataclass(frozen=True, slots=True, repr=False)
class Err(_ResultOps, Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def fold(self, on_err: Callable[[E], X], on_ok: Callable[[Any], X]) -> X:
        """Catamorphism. Only `on_err` is called."""
        return on_err(self.error)

    def fold_const(self, on_err: X, on_ok: Any) -> X:
        return on_err

    def get_or_else(self, default: U) -> U:
        return default

    def get_or_call(self, supplier: Callable[[], U]) -> U:
        return supplier()

    def value_or(self, f: Callable[[E], U]) -> U:
        return f(self.error)

    def to_optional(self) -> None:
        """Sweeps the error under the carpet."""
        return None

    def to_list(self) -> list[Any]:
        return []

    def to_either(self) -> Left[E]:
        return Left(self.error)

    def to_nel(self) -> Err[NonEmptyList[E]]:
        return Err(NonEmptyList(self.error))

    # The error payload never depends on the success type: the same instance
    # serves as a failure of any success type.
    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], U]) -> Err[U]:
        return Err(f(self.error))

    def bimap(self, f: Callable[[E], U], g: Callable[[Any], Any]) -> Err[U]:
        return Err(f(self.error))

    def swap(self) -> Ok[E]:
        return Ok(self.error)

    def traverse(self, f: Callable[[Any], Any], effect: Any) -> Any:
        """Lift this failure into `effect` without calling `f`."""
        return effect.pure(self)

    def bitraverse(
        self, f: Callable[[E], Any], g: Callable[[Any], Any], effect: Any
    ) -> Any:
        return effect.map(f(self.error), Err)

    def for_each(self, f: Callable[[Any], Any]) -> None:
        return None

    def fold_right(self, z: U, f: Callable[[Any, U], U]) -> U:
        return z

    def exists(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def forall(self, predicate: Callable[[Any], bool]) -> bool:
        return True

    def filter(self, predicate: Callable[[Any], bool], zero: Any) -> Err[E]:
        return self

    def excepting(self, pf: Callable[[Any], Any]) -> Err[E]:
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:
        return self


# Type aliases
Result = Err[E] | Ok[T]
ResultNel = Err[NonEmptyList[E]] | Ok[T]
Combine = Callable[[T, T], T]

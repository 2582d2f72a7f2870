"""
Capability instances over Result.

Each instance bundles the operations a generic algorithm needs and the
combination functions they depend on, so callers pass one object instead of
relying on implicit lookup.

Usage:
    from amass import instances, semigroup

    F = instances.ResultApplicativeError(semigroup.concat)
    F.handle_error(F.raise_error(["boom"]), lambda e: F.pure(0))  # Ok(0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .effects import Applicative, Functor
from .either import Either, Left, Right
from .semigroup import Monoid
from .types import Err, Ok, Ordering, Result


class ResultFunctor:
    """Covariant map over the success side (error type fixed)."""

    def map(self, fa: Result, f: Callable[[Any], Any]) -> Result:
        return fa.map(f)


class ErrFunctor:
    """Covariant map over the error side (success type fixed)."""

    def map(self, fa: Result, f: Callable[[Any], Any]) -> Result:
        return fa.map_err(f)


class ResultTraverse(ResultFunctor):
    """Traversal through the success side."""

    def traverse(
        self, fa: Result, f: Callable[[Any], Any], effect: Applicative
    ) -> Any:
        return fa.traverse(f, effect)

    def sequence(self, fa: Result, effect: Applicative) -> Any:
        return fa.traverse(lambda ga: ga, effect)

    def fold_right(self, fa: Result, z: Any, f: Callable[[Any, Any], Any]) -> Any:
        return fa.fold_right(z, f)

    def cozip(self, fa: Result) -> Either:
        """
        Push a Left/Right held in a success outward.

        Err(e)          -> Left(Err(e))
        Ok(Left(a))     -> Left(Ok(a))
        Ok(Right(b))    -> Right(Ok(b))
        """
        match fa:
            case Err():
                return Left(fa)
            case Ok(Left(a)):
                return Left(Ok(a))
            case Ok(Right(b)):
                return Right(Ok(b))
        raise TypeError(f"cozip() expects Ok(Left|Right) or Err, got {fa!r}")

    def pextract(self, fa: Result) -> Either:
        """
        Pull the value out, or the failure as-is.

        Err(e) -> Left(Err(e)), Ok(a) -> Right(a). A short-circuiting caller
        can act on the Right and re-inject with from_either/Ok.
        """
        return fa.fold(lambda _: Left(fa), Right)


class ResultBitraverse:
    """Bifunctor and bitraversal over both sides."""

    def bimap(
        self, fab: Result, f: Callable[[Any], Any], g: Callable[[Any], Any]
    ) -> Result:
        return fab.bimap(f, g)

    def bitraverse(
        self,
        fab: Result,
        f: Callable[[Any], Any],
        g: Callable[[Any], Any],
        effect: Functor | Applicative,
    ) -> Any:
        return fab.bitraverse(f, g, effect)


@dataclass(frozen=True, slots=True)
class ResultApplicativeError:
    """
    Applicative with error raising and recovery.

    `ap` accumulates failures with `combine`; `alt` is left-biased choice.
    """

    combine: Callable[[Any, Any], Any]

    def pure(self, a: Any) -> Ok:
        return Ok(a)

    def map(self, fa: Result, f: Callable[[Any], Any]) -> Result:
        return fa.map(f)

    def ap(self, fa: Result, ff: Result) -> Result:
        return fa.ap(ff, self.combine)

    def alt(self, a: Result, b: Any) -> Result:
        return a.or_else(b)

    def raise_error(self, e: Any) -> Err:
        return Err(e)

    def handle_error(self, fa: Result, f: Callable[[Any], Result]) -> Result:
        return fa.fold(f, lambda _: fa)

    def as_applicative(self) -> Applicative:
        return Applicative(pure=self.pure, map=self.map, ap=self.ap)


@dataclass(frozen=True, slots=True)
class ResultPlus:
    """Choice that accumulates when both sides fail (find_success)."""

    combine: Callable[[Any, Any], Any]

    def plus(self, a: Result, b: Any) -> Result:
        return a.find_success(b, self.combine)


class ResultMonad:
    """
    Opt-in short-circuiting bind.

    flat_map stops at the first failure; it cannot accumulate because the
    next step needs the previous success value.
    """

    def pure(self, a: Any) -> Ok:
        return Ok(a)

    def flat_map(self, fa: Result, f: Callable[[Any], Result]) -> Result:
        return fa.and_then(f)


@dataclass(frozen=True, slots=True)
class ResultSemigroup:
    """Result.append as a semigroup."""

    combine_err: Callable[[Any, Any], Any]
    combine_ok: Callable[[Any, Any], Any]

    def __call__(self, a: Result, b: Result) -> Result:
        return a.append(b, self.combine_err, self.combine_ok)


@dataclass(frozen=True, slots=True)
class ResultMonoid:
    """Result.append with identity Ok(ok_monoid.empty)."""

    combine_err: Callable[[Any, Any], Any]
    ok_monoid: Monoid

    @property
    def empty(self) -> Ok:
        return Ok(self.ok_monoid.empty)

    def __call__(self, a: Result, b: Result) -> Result:
        return a.append(b, self.combine_err, self.ok_monoid.combine)

    def combine_all(self, results: Any) -> Result:
        acc: Result = self.empty
        for result in results:
            acc = self(acc, result)
        return acc


@dataclass(frozen=True, slots=True)
class ResultOrder:
    """Ordering (and the consistent equality) delegating to the payloads."""

    cmp_err: Callable[[Any, Any], int] | None = None
    cmp_ok: Callable[[Any, Any], int] | None = None

    def order(self, a: Result, b: Result) -> Ordering:
        return a.compare(b, self.cmp_err, self.cmp_ok)

    def equal(self, a: Result, b: Result) -> bool:
        return self.order(a, b) == Ordering.EQ


@dataclass(frozen=True, slots=True)
class ResultEqual:
    eq_err: Callable[[Any, Any], bool] | None = None
    eq_ok: Callable[[Any, Any], bool] | None = None

    def equal(self, a: Result, b: Result) -> bool:
        return a.equals(b, self.eq_err, self.eq_ok)


@dataclass(frozen=True, slots=True)
class ResultShow:
    show_err: Callable[[Any], str] = repr
    show_ok: Callable[[Any], str] = repr

    def show(self, fa: Result) -> str:
        return fa.show(self.show_err, self.show_ok)


class ResultAssociative:
    """Regroup nested results without changing which payload is present."""

    def reassociate_left(self, f: Result) -> Result:
        """Result[A, Result[B, C]] -> Result[Result[A, B], C]"""
        return f.fold(
            lambda a: Err(Err(a)),
            lambda inner: inner.fold(lambda b: Err(Ok(b)), Ok),
        )

    def reassociate_right(self, f: Result) -> Result:
        """Result[Result[A, B], C] -> Result[A, Result[B, C]]"""
        return f.fold(
            lambda inner: inner.fold(Err, lambda b: Ok(Err(b))),
            lambda c: Ok(Ok(c)),
        )

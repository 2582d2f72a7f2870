"""
Constructors for results.

Build results from plain values, from Left/Right, from a predicate test,
or from code that raises.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .context import is_strict
from .either import Either
from .logging import logger
from .nel import NonEmptyList
from .types import Err, Ok, Result, ResultNel

T = TypeVar("T")
E = TypeVar("E")


def success(value: T) -> Ok[T]:
    """Construct a success."""
    return Ok(value)


def failure(error: E) -> Err[E]:
    """Construct a failure."""
    return Err(error)


def failure_nel(error: E) -> Err[NonEmptyList[E]]:
    """Construct a failure whose error is a one-element NonEmptyList."""
    return Err(NonEmptyList(error))


def lift(value: T, predicate: Callable[[T], bool], fail: E) -> Result[E, T]:
    """
    Lift a value through a predicate test.

    Note the polarity: a predicate that holds marks the value as bad.

    Returns:
        Err(fail) if predicate(value) is true
        Ok(value) otherwise

    Usage:
        lift(-3, lambda n: n < 0, "negative")  # Err("negative")
    """
    return Err(fail) if predicate(value) else Ok(value)


def lift_nel(value: T, predicate: Callable[[T], bool], fail: E) -> ResultNel[E, T]:
    """Like lift, with the failure wrapped in a NonEmptyList."""
    return lift(value, predicate, fail).to_nel()


def from_either(either: Either) -> Result:
    """Left becomes Err, Right becomes Ok. Inverse of Result.to_either()."""
    return either.fold(Err, Ok)


def attempt(
    fn: Callable[..., T],
    *args: Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: Any,
) -> Result[BaseException, T]:
    """
    Call `fn` and capture a raised exception as a failure.

    Args:
        fn: Callable to run
        *args, **kwargs: Passed through to fn
        catch: Exception type(s) to capture; anything else propagates.
               Consumed here, never forwarded: to pass a `catch` keyword
               to fn, wrap it (`attempt(lambda: fn(catch=...))`).

    Returns:
        Ok(fn(*args, **kwargs)) or Err(exception)

    Raises:
        The captured exception, in strict mode (see result_context)

    Usage:
        attempt(int, "42")   # Ok(42)
        attempt(int, "4x2")  # Err(ValueError(...))
    """
    try:
        return Ok(fn(*args, **kwargs))
    except catch as e:
        if is_strict():
            raise
        logger.debug("captured %s from %r", type(e).__name__, fn)
        return Err(e)

"""
Trampolined iteration over a result.

The step functions return `Left(x)` to stop with `x`, or `Right(result)` to
go round again with a new result. Runs in a plain loop, so the number of
steps is not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from .either import Either, Left

if TYPE_CHECKING:
    from .types import Result

X = TypeVar("X")


def loop_success(
    result: Result,
    success: Callable[[Any], Either],
    failure: Callable[[Any], X],
) -> X:
    """
    Spin on the success value until a terminal value is produced.

    Args:
        result: Starting result
        success: Called with each success value; Left stops, Right continues
        failure: Called once with the error if a failure is reached

    Usage:
        def countdown(n):
            return Left("done") if n == 0 else Right(Ok(n - 1))

        loop_success(Ok(100_000), countdown, str)  # "done"
    """
    current = result
    while current.is_ok():
        step = success(current.value)
        if isinstance(step, Left):
            return step.value
        current = step.value
    return failure(current.error)


def loop_failure(
    result: Result,
    success: Callable[[Any], X],
    failure: Callable[[Any], Either],
) -> X:
    """Mirror of loop_success: spin on the failure value instead."""
    current = result
    while current.is_err():
        step = failure(current.error)
        if isinstance(step, Left):
            return step.value
        current = step.value
    return success(current.value)

"""
Accumulation across many results.

map_n is the applicative `applyN`: it is built from repeated `ap` calls and
reports every failure, in argument order, combined with `combine`.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from .types import Err, Ok, Result

T = TypeVar("T")
U = TypeVar("U")


def _append_to(values: tuple) -> Callable[[Any], tuple]:
    return lambda value: (*values, value)


def map_n(
    f: Callable[..., U],
    *results: Result,
    combine: Callable[[Any, Any], Any],
) -> Result:
    """
    Apply `f` to the values of all results, or collect all their errors.

    Args:
        f: Function taking one argument per result
        *results: Results to combine
        combine: Associative combination for the error payload

    Returns:
        Ok(f(*values)) if every result is Ok
        Err(e1 + e2 + ...) otherwise, over the failed results in order

    Raises:
        TypeError: If no results are given

    Usage:
        map_n(User, check_name(d), check_age(d), combine=operator.add)
    """
    if not results:
        raise TypeError("map_n() requires at least one result")

    acc = results[0].map(lambda value: (value,))
    for result in results[1:]:
        # ap puts the function side's errors first, keeping argument order
        acc = result.ap(acc.map(_append_to), combine)
    return acc.map(lambda values: f(*values))


def sequence(
    results: Iterable[Result], combine: Callable[[Any, Any], Any]
) -> Result:
    """
    Turn many results into one result of a list.

    Returns:
        Ok([v1, v2, ...]) if all are Ok (Ok([]) for no results)
        Err(combined errors) otherwise
    """
    acc: Result = Ok(())
    for result in results:
        acc = result.ap(acc.map(_append_to), combine)
    return acc.map(list)


def traverse(
    items: Iterable[T],
    f: Callable[[T], Result],
    combine: Callable[[Any, Any], Any],
) -> Result:
    """Map each item through `f` and sequence the outcomes."""
    return sequence((f(item) for item in items), combine)


def partition(results: Iterable[Result]) -> tuple[list[Any], list[Any]]:
    """
    Split results into (errors, values), preserving order.

    Usage:
        errors, values = partition([Ok(1), Err("x"), Ok(2)])
        # errors == ["x"], values == [1, 2]
    """
    errors: list[Any] = []
    values: list[Any] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err(error):
                errors.append(error)
            case _:
                raise TypeError(
                    f"partition() expects Ok or Err, got {type(result).__name__}"
                )
    return errors, values

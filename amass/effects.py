"""
Target-effect capabilities for traverse and bitraverse.

`Result.traverse(f, effect)` needs to know how to `map` over whatever `f`
returns, and how to `pure` an already-known failure into it. The effect is
passed explicitly rather than inferred from the return value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .types import Ok


@dataclass(frozen=True, slots=True)
class Functor:
    """Only `map(fa, f)`; enough for bitraverse."""

    map: Callable[[Any, Callable[[Any], Any]], Any]


@dataclass(frozen=True, slots=True)
class Applicative:
    """
    Effect with `pure`, `map` and `ap`.

    ap(fa, ff) applies the function(s) in `ff` to the value(s) in `fa`.
    """

    pure: Callable[[Any], Any]
    map: Callable[[Any, Callable[[Any], Any]], Any]
    ap: Callable[[Any, Any], Any]

    def map2(self, fa: Any, fb: Any, f: Callable[[Any, Any], Any]) -> Any:
        return self.ap(fb, self.map(fa, lambda a: lambda b: f(a, b)))


def _optional_map(fa: Any, f: Callable[[Any], Any]) -> Any:
    return None if fa is None else f(fa)


def _optional_ap(fa: Any, ff: Any) -> Any:
    return None if fa is None or ff is None else ff(fa)


# The plain value is its own effect.
IDENTITY = Applicative(
    pure=lambda a: a,
    map=lambda fa, f: f(fa),
    ap=lambda fa, ff: ff(fa),
)

# Nondeterminism: one outcome per element.
LIST = Applicative(
    pure=lambda a: [a],
    map=lambda fa, f: [f(a) for a in fa],
    ap=lambda fa, ff: [f(a) for f in ff for a in fa],
)

# None means "absent"; a present None cannot be represented.
OPTIONAL = Applicative(
    pure=lambda a: a,
    map=_optional_map,
    ap=_optional_ap,
)


def result_applicative(combine: Callable[[Any, Any], Any]) -> Applicative:
    """Result itself as an effect, accumulating errors with `combine`."""
    return Applicative(
        pure=Ok,
        map=lambda fa, f: fa.map(f),
        ap=lambda fa, ff: fa.ap(ff, combine),
    )

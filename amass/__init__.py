"""
amass - accumulating results.

Usage:
    import operator
    from amass import Err, Ok, map_n

    map_n(lambda a, b: a + b, Err(["a"]), Err(["b"]), combine=operator.add)
    # Err(['a', 'b'])
"""

from . import effects, instances, semigroup
from .collect import map_n, partition, sequence, traverse
from .context import is_strict, result_context
from .core import (
    attempt,
    failure,
    failure_nel,
    from_either,
    lift,
    lift_nel,
    success,
)
from .either import Either, Left, Right
from .loops import loop_failure, loop_success
from .nel import NonEmptyList
from .semigroup import Monoid, Semigroup
from .types import Err, Ok, Ordering, Result, ResultNel

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "ResultNel",
    "Ordering",
    "NonEmptyList",
    # Either encoding
    "Left",
    "Right",
    "Either",
    # Constructors
    "success",
    "failure",
    "failure_nel",
    "lift",
    "lift_nel",
    "from_either",
    "attempt",
    # Accumulation
    "map_n",
    "sequence",
    "traverse",
    "partition",
    "loop_success",
    "loop_failure",
    # Capabilities
    "Semigroup",
    "Monoid",
    "semigroup",
    "effects",
    "instances",
    # Configuration
    "result_context",
    "is_strict",
]

"""
Context manager for result configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict mode
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def result_context(*, strict: bool = False):
    """
    Context manager for result configuration.

    Args:
        strict: If True, exception bridges (attempt, amass.schema) re-raise
               the exception instead of returning it wrapped in Err.

    Example:
        from amass import attempt, result_context

        attempt(int, "x")  # Err(ValueError(...))

        with result_context(strict=True):
            attempt(int, "x")  # ValueError!
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)

"""
Guard combinators
=================

Validation над Result: turn a success into an error when a check fails.
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import ErrorValue, Predicate
from ..result import Result
from ..result import error as _fail


def ensure[T](
    result: Result[T],
    *,
    predicate: Predicate[T],
    error: Callable[[T], ErrorValue | str],
) -> Result[T]:
    """Turn Ok into Error if value FAILS validation check."""
    match result:
        case Result(value, _, True) if not predicate(value):
            return _fail(error(value))
        case _:
            return result


def reject[T](
    result: Result[T],
    *,
    predicate: Predicate[T],
    error: Callable[[T], ErrorValue | str],
) -> Result[T]:
    """Turn Ok into Error if value MATCHES condition. Dual of ensure."""
    match result:
        case Result(value, _, True) if predicate(value):
            return _fail(error(value))
        case _:
            return result


__all__ = ("ensure", "reject")

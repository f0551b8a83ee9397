"""Recover combinators

Turn an error Result back into a success."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import ErrorValue
from ..result import Result, ok


def recover[T](result: Result[T], *, default: T) -> Result[T]:
    """Turn any Error into Ok with fallback value."""
    match result:
        case Result(_, _, True):
            return result
        case _:
            return ok(default)


def recover_with[T](
    result: Result[T],
    *,
    handler: Callable[[ErrorValue], T],
) -> Result[T]:
    """Turn any Error into Ok using recovery function."""
    match result:
        case Result(_, _, True):
            return result
        case _:
            return ok(handler(typing.cast(ErrorValue, result.error)))


__all__ = ("recover", "recover_with")

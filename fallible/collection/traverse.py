"""Traverse combinators

Apply a fallible handler across many items, stopping at the first error."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._helpers import identity
from ..result import Result, error, ok

def traverse[A, T](
    items: Iterable[A],
    handler: Callable[[A], Result[T]],
) -> Result[list[T]]:
    """
    Monadic map: A -> Result[T]. Sequential to preserve effect order.

    The handler is not called for items after the first error.
    """
    values: list[T] = []
    for item in items:
        r = handler(item)
        match r:
            case Result(v, _, True):
                values.append(typing.cast(T, v))
            case Result(_, e, False):
                return error(e)
    return ok(values)

def sequence[T](results: Iterable[Result[T]]) -> Result[list[T]]:
    """
    Flip structure: [Result[T]] -> Result[[T]].

    Implemented as traverse(id).
    """
    return traverse(results, handler=identity)

__all__ = ("sequence", "traverse")

"""
Fold combinators
================

Fallible fold: build up state through sequential steps.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ..result import Result, error, ok


def fold[A, T](
    items: Iterable[A],
    handler: Callable[[T, A], Result[T]],
    *,
    initial: T,
) -> Result[T]:
    """
    Fallible fold: acc = handler(acc, item) for each item, stopping at the first error.

    Example:
        def add_line(total: int, line: str) -> Result[int]:
            return L.call(int, line).map(lambda n: total + n)

        fold(["1", "2", "3"], add_line, initial=0)  # Ok(6)
    """
    acc = initial
    for item in items:
        r = handler(acc, item)
        match r:
            case Result(new_acc, _, True):
                acc = typing.cast(T, new_acc)
            case Result(_, e, False):
                return error(e)
    return ok(acc)


__all__ = ("fold",)

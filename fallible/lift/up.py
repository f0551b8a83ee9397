"""
Подъем значений в Result.

Functions for turning plain values, Optional, kungfu results and
exception-based code into a Result.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error as KError
from kungfu import Ok as KOk
from kungfu import Result as KResult

from .._types import ErrorValue
from ..result import Result, error, ok


def pure[T](value: T) -> Result[T]:
    """
    Lift pure value into a successful Result. Alias for ok().

    Example:
        from fallible import lift as L

        user = L.up.pure(User(id=42))  # Ok(User(id=42))

    **Grammar:** `L.up.pure(value)` reads as "lift up pure value"
    """
    return ok(value)


def fail(message_or_error: ErrorValue | str) -> Result[typing.Never]:
    """
    Create a failed Result. Dual of pure(), alias for error().

    Example:
        from fallible import lift as L

        missing = L.up.fail(NotFoundError("file.txt"))
        denied = L.up.fail("permission denied")  # MessageError
    """
    return error(message_or_error)


def optional[T](
    value: T | None,
    *,
    error: Callable[[], ErrorValue | str],
) -> Result[T]:
    """
    Convert Optional to Result. None becomes error(error()).

    **When to use:** dict lookups, cache checks, config reads - anywhere
    you get Optional and need to convert None to an error.

    Example:
        from fallible import lift as L

        def get_user(user_id: int) -> Result[User]:
            return L.up.optional(users.get(user_id), error=lambda: NotFound(user_id))

    NOTE: error is a thunk to avoid building the error when the value is present.
    """
    if value is None:
        return fail(error())
    return ok(value)


def catching[T](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], ErrorValue | str] | None = None,
) -> Result[T]:
    """
    Execute thunk, catch exceptions and convert them to an error Result.

    **When to use:** Bridge between exception-based code and Result-based code.

    Example:
        from fallible import lift as L
        import json

        def parse_json(raw: str) -> Result[dict]:
            return L.up.catching(
                lambda: json.loads(raw),
                on_error=lambda e: ParseError(str(e)),
            )

    NOTE: Catches all Exception subclasses. Without on_error the exception
          itself becomes the error value.
    """
    try:
        return ok(thunk())
    except Exception as exc:
        if on_error is None:
            return error(exc)
        return error(on_error(exc))


def from_kungfu[T, E](value: KResult[T, E]) -> Result[T]:
    """
    Convert a kungfu Result into a Result.

    Non-exception kungfu errors are rendered into MessageError.

    Example:
        from kungfu import Ok
        from fallible import lift as L

        L.up.from_kungfu(Ok(42))  # Ok(42)
    """
    match value:
        case KOk(v):
            return ok(v)
        case KError(e):
            return error(e if isinstance(e, Exception) else str(e))
        case _:
            raise TypeError(f"from_kungfu(): expected kungfu Ok or Error, got {value!r}")


__all__ = (
    "pure",
    "fail",
    "optional",
    "catching",
    "from_kungfu",
)

"""
Опускание Result в значение.

The unwrap protocol: get the value out of a Result and observe the error
without raising.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from kungfu import Error as KError
from kungfu import Ok as KOk
from kungfu import Result as KResult

from .._errors import UnwrapError
from .._types import ErrorValue
from ..result import NO_ERROR, NO_VALUE, Result


@dataclass(slots=True)
class ErrorSlot:
    """
    Caller-owned output slot for unwrap_into().

    Truthy when it holds an error, so it reads naturally in guards:

        slot = ErrorSlot()
        handle = open_file("file.txt").try_(slot)
        if slot:
            ...
    """

    error: ErrorValue | None = NO_ERROR

    def __bool__(self) -> bool:
        return self.error is not NO_ERROR


def unwrap[T](result: Result[T]) -> tuple[T | None, ErrorValue | None]:
    """
    Split a Result into (value, error). Never raises.

    **When to use:** Standard way to observe a Result with a guard statement.

    Example:
        from fallible import lift as L

        contents, err = L.down.unwrap(read_file(handle))
        if err is not None:
            return error(err)

    NOTE: The check is on the error, not on the value - ok(0) and ok("")
          unwrap to (0, None) and ("", None).
    """
    if result.is_ok:
        return typing.cast(T, result.value), NO_ERROR
    return NO_VALUE, result.error


def unwrap_into[T](result: Result[T], slot: ErrorSlot) -> T | None:
    """
    Return the value, write the error (or None) into slot.

    Exactly one write into slot per call. Never raises.
    """
    value, slot.error = unwrap(result)
    return value


def or_else[T](result: Result[T], default: T) -> T:
    """
    Return value or default.

    Example:
        from fallible import lift as L

        name = L.down.or_else(lookup_name(42), default="Guest")
    """
    return result.unwrap_or(default)


def unsafe[T](result: Result[T]) -> T:
    """
    Unwrap, raising UnwrapError on an error Result.

    **When to use:** At the edge of the program, where an error means a bug
    and should crash loudly. The stored error is chained as __cause__.
    """
    if result.is_ok:
        return typing.cast(T, result.value)
    err = typing.cast(ErrorValue, result.error)
    raise UnwrapError(err) from err


def to_kungfu[T](result: Result[T]) -> KResult[T, ErrorValue]:
    """
    Convert a Result into a kungfu Ok / Error.

    Example:
        from fallible import lift as L, ok

        L.down.to_kungfu(ok(42))  # kungfu Ok(42)
    """
    if result.is_ok:
        return KOk(typing.cast(T, result.value))
    return KError(typing.cast(ErrorValue, result.error))


__all__ = (
    "ErrorSlot",
    "unwrap",
    "unwrap_into",
    "or_else",
    "unsafe",
    "to_kungfu",
)

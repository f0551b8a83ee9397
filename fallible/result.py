"""
Result container
================

Immutable holder of exactly one of {value, error}.

The branch is selected by the explicit ``is_ok`` flag, never by the truthiness
of the value: ``ok(0)``, ``ok(False)`` and ``ok("")`` are all successes.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._errors import MessageError, describe_error
from ._types import ErrorValue

if typing.TYPE_CHECKING:
    from .lift.down import ErrorSlot

# Sentinels: "no value" on the error branch, "no error" on the ok branch
NO_VALUE: typing.Final = None
NO_ERROR: typing.Final = None


@dataclass(frozen=True, slots=True, repr=False)
class Result[T]:
    """
    Success value or error value, never both.

    Build with ok() / error(). Pattern matching works on the fields:

        match result:
            case Result(value, None, True):
                ...
            case Result(_, err, False):
                ...
    """

    value: T | None
    error: ErrorValue | None
    is_ok: bool

    def __post_init__(self) -> None:
        if self.is_ok and self.error is not NO_ERROR:
            raise ValueError("Result: ok branch cannot carry an error")
        if not self.is_ok and self.error is NO_ERROR:
            raise ValueError("Result: error branch must carry an error")

    @property
    def is_error(self) -> bool:
        return not self.is_ok

    # Functor / monad operations

    def map[U](self, f: Callable[[T], U], /) -> Result[U]:
        """Apply f to the success value, pass errors through."""
        if self.is_ok:
            return ok(f(typing.cast(T, self.value)))
        return typing.cast(Result[U], self)

    def map_err(self, f: Callable[[ErrorValue], ErrorValue | str], /) -> Result[T]:
        """Apply f to the error value, pass successes through."""
        if self.is_ok:
            return self
        return error(f(typing.cast(ErrorValue, self.error)))

    def then[U](self, f: Callable[[T], Result[U]], /) -> Result[U]:
        """
        Monadic bind: run f on success, short-circuit on error.

        Example:
            ok(" 42 ").map(str.strip).then(parse_int)
        """
        if self.is_ok:
            return f(typing.cast(T, self.value))
        return typing.cast(Result[U], self)

    # Observation

    def unwrap_or(self, default: T, /) -> T:
        """Value on success, default on error."""
        if self.is_ok:
            return typing.cast(T, self.value)
        return default

    def try_(self, slot: ErrorSlot, /) -> T | None:
        """
        Method form of unwrap_into(): value or None, error written into slot.

        Example:
            slot = ErrorSlot()
            contents = read_file(handle).try_(slot)
            if slot:
                return error(slot.error)
        """
        from .lift.down import unwrap_into
        return unwrap_into(self, slot)

    def __repr__(self) -> str:
        if self.is_ok:
            return f"Ok({self.value!r})"
        return f"Error({self.error!r})"

    def __str__(self) -> str:
        if self.is_ok:
            return f"Ok({self.value})"
        return f"Error({describe_error(typing.cast(ErrorValue, self.error))})"


def ok[T](value: T = True) -> Result[T]:
    """
    Build a successful Result.

    Without an argument the payload is True, for steps that only signal
    "done" (closing a file, flushing a buffer).
    """
    return Result(value, NO_ERROR, True)


def error(message_or_error: ErrorValue | str) -> Result[typing.Never]:
    """
    Build a failed Result.

    A plain message is wrapped into MessageError; exceptions are kept as-is.
    """
    if isinstance(message_or_error, Exception):
        return Result(NO_VALUE, message_or_error, False)
    return Result(NO_VALUE, MessageError(str(message_or_error)), False)


__all__ = ("NO_ERROR", "NO_VALUE", "Result", "error", "ok")

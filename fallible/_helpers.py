"""Internal helpers for fallible.

Common functions used across multiple modules.
These are not part of the public API but can be used when writing custom steps."""

from __future__ import annotations

import typing

from kungfu import Error as KError
from kungfu import Ok as KOk

from .result import Result, ok

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def is_kungfu_result(obj: object) -> bool:
    """True for kungfu Ok / Error instances."""
    return isinstance(obj, (KOk, KError))

def as_result(obj: object) -> Result[typing.Any]:
    """
    Normalize a final value into Result.

    - Result: returned unchanged (no double wrapping)
    - kungfu Ok / Error: converted
    - anything else: wrapped with ok()
    """
    if isinstance(obj, Result):
        return obj
    if is_kungfu_result(obj):
        from .lift.up import from_kungfu
        return from_kungfu(obj)  # type: ignore[arg-type]
    return ok(obj)

__all__ = (
    "identity",
    "is_kungfu_result",
    "as_result",
)

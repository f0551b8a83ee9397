"""
Core type definitions for fallible.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Generator

if typing.TYPE_CHECKING:
    from .result import Result

# ============================================================================
# Type aliases
# ============================================================================

# ErrorValue = anything renderable as an error description
# NOTE: Failure subclasses are preferred, but foreign exceptions are accepted
#       so that contained faults fit the same slot.
type ErrorValue = Exception

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# StepItem = one checkpoint yielded by a producer generator.
# Anything that is not an error or a Result is ignored by the evaluator.
type StepItem = ErrorValue | Result[typing.Any] | object

# Steps = the generator a producer returns in sequence mode.
# The value sent back is the unwrapped checkpoint value (or None).
type Steps[T] = Generator[StepItem, typing.Any, T | Result[T] | None]

# Producer = zero-arg callable driven by run_sequence
type Producer[T] = Callable[[], Steps[T] | Result[T] | T]

__all__ = (
    "ErrorValue",
    "Predicate",
    "StepItem",
    "Steps",
    "Producer",
)

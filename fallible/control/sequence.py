"""
Short-circuit evaluator
=======================

Drive a generator of checkpoints and collapse it into one Result,
stopping at the first error.

    from fallible import error, ok, run_sequence

    def steps():
        handle = yield open_file("file.txt")   # Ok value is sent back
        contents = yield read_file(handle)
        yield close_file(handle)
        return contents

    run_sequence(steps)  # Ok("hello") or the first Error

Step items:
- Exception                 -> stop, error(item)
- Result with error         -> stop, fresh error(result.error)
- Result without error      -> checkpoint, its value is sent back
- kungfu Ok / Error         -> same as Result
- anything else             -> ignored, None is sent back
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Generator
from dataclasses import dataclass
from functools import wraps

from .._helpers import as_result, is_kungfu_result
from .._errors import describe_error
from .._types import ErrorValue, Producer, Steps
from ..result import Result, error

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SequencePolicy:
    """
    Evaluator configuration.

    default_return: final value used when the generator returns None
    close_on_error: close the generator after a short-circuit (runs its finally blocks)
    contain_faults: turn exceptions raised while driving into error Results
    """

    default_return: object = True
    close_on_error: bool = True
    contain_faults: bool = True

    def __post_init__(self) -> None:
        if self.default_return is None:
            raise ValueError("SequencePolicy.default_return must not be None")

    @classmethod
    def strict(cls) -> SequencePolicy:
        """Let faults propagate instead of containing them. Useful in tests and debugging."""
        return cls(contain_faults=False)


DEFAULT_POLICY: typing.Final = SequencePolicy()


def _name(producer: Callable[..., object]) -> str:
    return getattr(producer, "__qualname__", repr(producer))


def _checkpoint(item: object) -> Result[typing.Any] | None:
    """Classify a step item. None means the item is ignored."""
    if isinstance(item, Result):
        return item
    if is_kungfu_result(item):
        from ..lift.up import from_kungfu
        return from_kungfu(item)  # type: ignore[arg-type]
    if isinstance(item, Exception):
        return error(item)
    return None


def _close(steps: Steps[typing.Any], *, name: str) -> None:
    """Close the generator. Faults from its cleanup never replace the step error."""
    try:
        steps.close()
    except Exception:
        logger.debug("%s: fault while closing after short-circuit", name, exc_info=True)


def _drive[T](steps: Steps[T], *, policy: SequencePolicy, name: str) -> Result[T]:
    sent: object = None
    index = 0
    while True:
        try:
            item = steps.send(sent)
        except StopIteration as stop:
            final = policy.default_return if stop.value is None else stop.value
            return as_result(final)

        checkpoint = _checkpoint(item)
        if checkpoint is not None and checkpoint.is_error:
            failure = typing.cast(ErrorValue, checkpoint.error)
            logger.debug("%s: short-circuit at step %d: %s", name, index, describe_error(failure))
            if policy.close_on_error:
                _close(steps, name=name)
            return error(failure)

        sent = checkpoint.value if checkpoint is not None else None
        index += 1


def _evaluate[T](producer: Producer[T], policy: SequencePolicy) -> Result[T]:
    produced = producer()
    if not isinstance(produced, Generator):
        return as_result(produced)
    return _drive(produced, policy=policy, name=_name(producer))


def run_sequence[T](
    producer: Producer[T],
    *,
    policy: SequencePolicy = DEFAULT_POLICY,
) -> Result[T]:
    """
    Invoke producer and return the first error it yields, or its final value.

    - Producer returns a plain value -> ok(value)
    - Producer returns a Result -> returned unchanged
    - Producer returns a generator -> driven step by step (see module docstring);
      after an error no further items are requested
    - Generator returns None -> ok(policy.default_return), i.e. ok(True)
    - Generator returns a Result -> returned unchanged (no double wrapping)

    Exceptions raised by the producer are contained and returned as
    error(exc), unless policy.contain_faults is False.

    Example:
        result = run_sequence(lambda: 42)  # Ok(42)

        def steps():
            yield ok("a")
            yield error("boom")
            yield ok("c")  # never requested
            return "done"

        run_sequence(steps)  # Error(MessageError('boom'))
    """
    if not policy.contain_faults:
        return _evaluate(producer, policy)
    try:
        return _evaluate(producer, policy)
    except Exception as exc:
        logger.debug("%s: contained fault", _name(producer), exc_info=True)
        return error(exc)


# Same thing, named after what it looks for
any_error = run_sequence


def short_circuit[T, **P](
    func: Callable[P, Steps[T] | Result[T] | T],
) -> Callable[P, Result[T]]:
    """
    Decorator: calling the generator function runs it through run_sequence.

    Example:
        @short_circuit
        def load(path: str):
            handle = yield open_file(path)
            contents = yield read_file(handle)
            yield close_file(handle)
            return contents

        load("file.txt")  # Result[str]
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
        @wraps(func)
        def producer() -> Steps[T] | Result[T] | T:
            return func(*args, **kwargs)

        return run_sequence(producer)

    return wrapper


__all__ = (
    "DEFAULT_POLICY",
    "SequencePolicy",
    "any_error",
    "run_sequence",
    "short_circuit",
)

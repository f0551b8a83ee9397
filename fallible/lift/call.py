"""
Вызов функций с автоматическим лифтингом.

Functions and decorators for calling exception-raising code and getting a
Result back.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from .._helpers import as_result
from ..result import Result, error


def call[T, **P](
    func: Callable[P, T | Result[T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T]:
    """
    Call func with arguments and lift the outcome into Result.

    - Raised Exception -> error(exc)
    - Returned Result (or kungfu Ok/Error) -> passed through
    - Any other return value -> ok(value)

    **Design philosophy:**
    - Pure functions stay exception-based and easy to test
    - Lift at call site = maximum locality, clear intent

    Example:
        from fallible import lift as L

        result = L.call(int, "42")      # Ok(42)
        result = L.call(int, "forty")   # Error(ValueError(...))

    **Grammar:** `L.call(func, *args, **kwargs)` reads as "call function with args"
    """
    try:
        outcome = func(*args, **kwargs)
    except Exception as exc:
        return error(exc)
    return as_result(outcome)


def lifted[T, **P](
    func: Callable[P, T | Result[T]],
) -> Callable[P, Result[T]]:
    """
    Decorator: make func return Result instead of raising.

    **When to use:** For frequently-used functions where you want them to
    return Result directly. Prefer `call()` at call site for one-offs.

    Example:
        from fallible import lift as L

        @L.lifted
        def parse_port(raw: str) -> int:
            port = int(raw)
            if not 0 < port < 65536:
                raise ValueError(f"port out of range: {port}")
            return port

        parse_port("8080")   # Ok(8080)
        parse_port("99999")  # Error(ValueError('port out of range: 99999'))
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
        return call(func, *args, **kwargs)

    return wrapper


__all__ = (
    "call",
    "lifted",
)

from __future__ import annotations


class Failure(Exception):
    """
    Base class for structured (domain) errors carried inside a Result.

    Subclasses add their own fields and override describe() or __str__
    to render them. Two failures are equal when they have the same type
    and the same description.
    """

    def describe(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure) or type(self) is not type(other):
            return NotImplemented
        return self.describe() == other.describe()

    def __hash__(self) -> int:
        return hash((type(self), self.describe()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"


class MessageError(Failure):
    """Plain free-text error built from a message string."""

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnwrapError(Exception):
    """unsafe() was called on a failed Result."""

    error: Exception

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(f"Called unsafe() on an error result: {describe_error(error)}")


def describe_error(error: Exception) -> str:
    """Human-readable description of any error value."""
    if isinstance(error, Failure):
        return error.describe()
    text = str(error)
    return text if text else type(error).__name__


__all__ = ("Failure", "MessageError", "UnwrapError", "describe_error")

"""Unwrap protocol: pair form, output slot, raising helpers."""

from __future__ import annotations

import pytest

from fallible import (
    NO_ERROR,
    NO_VALUE,
    ErrorSlot,
    Failure,
    MessageError,
    UnwrapError,
    error,
    ok,
    or_else,
    unsafe,
    unwrap,
    unwrap_into,
)


class Missing(Failure):
    pass


def test_unwrap_ok_returns_value_and_no_error() -> None:
    for value in ("hello", 0, False, "", None, {"k": 1}):
        got, err = unwrap(ok(value))
        assert got == value
        assert err is NO_ERROR


def test_unwrap_error_returns_no_value_and_error() -> None:
    got, err = unwrap(error("boom"))
    assert got is NO_VALUE
    assert err == MessageError("boom")

    structured = Missing("user 7")
    got, err = unwrap(error(structured))
    assert got is NO_VALUE
    assert err is structured


def test_unwrap_into_writes_slot_once() -> None:
    slot = ErrorSlot()
    assert not slot

    assert unwrap_into(error("boom"), slot) is NO_VALUE
    assert slot
    assert slot.error == MessageError("boom")

    # a later success clears the slot
    assert unwrap_into(ok(0), slot) == 0
    assert not slot
    assert slot.error is NO_ERROR


def test_try_method_matches_unwrap_into() -> None:
    slot = ErrorSlot()
    assert ok("x").try_(slot) == "x"
    assert slot.error is None
    assert error("bad").try_(slot) is None
    assert slot.error == MessageError("bad")


def test_or_else() -> None:
    assert or_else(ok(""), default="guest") == ""
    assert or_else(error("boom"), default="guest") == "guest"


def test_unsafe_raises_with_cause() -> None:
    assert unsafe(ok(3)) == 3

    cause = Missing("user 7")
    with pytest.raises(UnwrapError) as info:
        unsafe(error(cause))
    assert info.value.error is cause
    assert info.value.__cause__ is cause
    assert "user 7" in str(info.value)

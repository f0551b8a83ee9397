"""Result container and constructors."""

from __future__ import annotations

import dataclasses

import pytest

from fallible import NO_ERROR, NO_VALUE, Failure, MessageError, Result, error, ok


class QuotaExceeded(Failure):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"quota of {limit} exceeded")


def test_ok_holds_value_and_no_error() -> None:
    r = ok(42)
    assert r.is_ok and not r.is_error
    assert r.value == 42
    assert r.error is NO_ERROR


def test_ok_defaults_to_true() -> None:
    assert ok().value is True


def test_error_wraps_plain_message() -> None:
    r = error("boom")
    assert r.is_error
    assert r.value is NO_VALUE
    assert isinstance(r.error, MessageError)
    assert r.error.message == "boom"
    assert str(r.error) == "boom"


def test_error_keeps_structured_error() -> None:
    quota = QuotaExceeded(10)
    r = error(quota)
    assert r.error is quota
    assert r.error.describe() == "quota of 10 exceeded"


def test_error_keeps_foreign_exception() -> None:
    exc = KeyError("id")
    assert error(exc).error is exc


def test_falsy_values_are_successes() -> None:
    for value in (0, False, "", None, []):
        assert ok(value).is_ok


def test_equality_is_structural() -> None:
    assert ok(1) == ok(1)
    assert ok(1) != ok(2)
    assert error("boom") == error("boom")
    assert error("boom") != error("bang")
    assert ok(None) != error("x")


def test_result_is_immutable() -> None:
    r = ok(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.value = 2  # type: ignore[misc]


def test_invariant_is_checked_on_direct_construction() -> None:
    with pytest.raises(ValueError):
        Result(1, MessageError("x"), True)
    with pytest.raises(ValueError):
        Result(None, None, False)


def test_repr_and_str() -> None:
    assert repr(ok(42)) == "Ok(42)"
    assert repr(error("boom")) == "Error(MessageError('boom'))"
    assert str(error(QuotaExceeded(3))) == "Error(quota of 3 exceeded)"


def test_map_and_then_short_circuit_on_error() -> None:
    assert ok(2).map(lambda x: x * 10) == ok(20)
    assert ok(2).then(lambda x: ok(x + 1)) == ok(3)
    assert ok(2).then(lambda _: error("nope")) == error("nope")

    calls: list[int] = []

    def record(x: int) -> int:
        calls.append(x)
        return x

    failed: Result[int] = error("boom")
    assert failed.map(record) == error("boom")
    assert failed.then(lambda x: ok(record(x))) == error("boom")
    assert calls == []


def test_map_err_only_touches_errors() -> None:
    assert ok(1).map_err(lambda e: f"wrapped: {e}") == ok(1)
    assert error("boom").map_err(lambda e: f"wrapped: {e}") == error("wrapped: boom")


def test_unwrap_or() -> None:
    assert ok(0).unwrap_or(5) == 0
    assert error("boom").unwrap_or(5) == 5


def test_pattern_matching() -> None:
    match ok("hi"):
        case Result(value, None, True):
            assert value == "hi"
        case _:
            pytest.fail("expected ok branch")

    match error("boom"):
        case Result(_, err, False):
            assert err == MessageError("boom")
        case _:
            pytest.fail("expected error branch")


def test_failure_never_equals_foreign_values() -> None:
    boom = MessageError("boom")
    assert boom != "boom"
    assert boom != ValueError("boom")
    assert boom != QuotaExceeded(1)
    assert boom.__eq__("boom") is NotImplemented

"""traverse / sequence / fold."""

from __future__ import annotations

from fallible import Result, error, fold, lift as L, ok, sequence, traverse


def test_traverse_collects_values() -> None:
    assert traverse(["1", "2", "3"], lambda s: L.call(int, s)) == ok([1, 2, 3])


def test_traverse_stops_at_first_error() -> None:
    seen: list[str] = []

    def parse(raw: str) -> Result[int]:
        seen.append(raw)
        return L.call(int, raw)

    result = traverse(["1", "x", "3"], parse)
    assert isinstance(result.error, ValueError)
    assert seen == ["1", "x"]


def test_traverse_empty() -> None:
    assert traverse([], lambda s: ok(s)) == ok([])


def test_sequence() -> None:
    assert sequence([ok(1), ok(0)]) == ok([1, 0])
    assert sequence([ok(1), error("boom"), error("later")]) == error("boom")


def test_fold() -> None:
    def add_line(total: int, line: str) -> Result[int]:
        return L.call(int, line).map(lambda n: total + n)

    assert fold(["1", "2", "3"], add_line, initial=0) == ok(6)
    assert fold([], add_line, initial=10) == ok(10)
    assert fold(["1", "two"], add_line, initial=0).is_error

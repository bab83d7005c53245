"""Tests for qa.core.result module."""

import pytest

from qa.core.result import Err, Ok, Result


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_map_is_noop(self) -> None:
        err: Result[int, str] = Err("boom")
        assert err.map(lambda x: x * 2) == Err("boom")


def test_pattern_matching() -> None:
    match Ok("8.3.0"):
        case Ok(value):
            assert value == "8.3.0"
        case Err():
            pytest.fail("expected Ok")

"""Tests for qa.output.console module."""

from __future__ import annotations

import pytest

from qa.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


def test_style_str() -> None:
    assert str(Style.HEADER) == "header"
    assert {s.name for s in Style} == {"DEFAULT", "SUCCESS", "ERROR", "WARNING", "DIM", "HEADER"}


def test_mock_console_records_styles() -> None:
    console = MockConsole()
    console.header("8.3.0")
    console.print("gz: path")
    console.success("accepted")
    console.warning("incomplete")
    console.error("rejected")
    console.newline()

    assert console.messages == [
        "8.3.0",
        "gz: path",
        "OK accepted",
        "warning: incomplete",
        "error: rejected",
        "",
    ]
    assert console.count(Style.HEADER) == 1
    assert console.count(Style.DEFAULT) == 2


def test_rich_console_prints_without_markup(capsys: pytest.CaptureFixture[str]) -> None:
    console: ConsoleProtocol = RichConsole()
    console.print("[inactive] 7.4.33", Style.DIM)
    console.warning("no [RC] build yet")

    out = capsys.readouterr().out
    assert "[inactive] 7.4.33" in out
    assert "warning: no [RC] build yet" in out


def test_mock_console_satisfies_protocol() -> None:
    console: ConsoleProtocol = MockConsole()
    console.success("ok")

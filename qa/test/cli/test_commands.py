from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from qa import __version__
from qa.cli.app import app
from qa.cli.context import CLIContext
from qa.core.config import CONFIG_ENV_VAR, Config
from qa.core.errors import ErrorCode
from qa.core.result import Ok
from qa.output.console import MockConsole, Style
from qa.releases.enricher import enrich
from qa.releases.loader import parse_releases

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    # The --config callback writes os.environ; register it so it is restored.
    monkeypatch.setenv(CONFIG_ENV_VAR, "")


def _ctx(table: dict[str, object] | None = None) -> CLIContext:
    data = table or {
        "8.3.0": {
            "active": True,
            "release": {
                "type": "RC",
                "number": 5,
                "date": "26 Oct 2023",
                "baseurl": "https://downloads.php.net/~jakub/",
                "sha256_gz": "abc",
            },
        },
        "8.0.29": {"active": True, "release": {"type": "RC", "number": 0}},
        "7.4.33": {"active": False, "release": {"type": "RC", "number": 2}},
    }
    parsed = parse_releases(data)
    assert isinstance(parsed, Ok)
    return CLIContext(
        config=Config(),
        entries=parsed.value,
        qa=enrich(parsed.value),
        console=MockConsole(),
    )


def _patch_context(monkeypatch: pytest.MonkeyPatch, module: object, ctx: CLIContext) -> None:
    monkeypatch.setattr(module, "build_context", lambda: ctx)


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_reported_uses_builtin_table() -> None:
    result = runner.invoke(app, ["reported"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[-2:] == ["8.3.0-dev", "8.3.0RC5"]


def test_api_json() -> None:
    result = runner.invoke(app, ["api", "--indent", "0"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["8.3.0"]["release"]["version"] == "8.3.0RC5"
    assert "8.0.29" not in data["releases"]
    assert "\n" not in result.stdout.rstrip("\n")


def test_api_single_version() -> None:
    result = runner.invoke(app, ["api", "--version", "8.2.12"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert list(data) == ["8.2.12"]
    assert data["8.2.12"]["files"]["bz2"]["path"].endswith("/php-8.2.12RC1.tar.bz2")


def test_config_points_at_release_file(tmp_path: Path) -> None:
    table = tmp_path / "releases.toml"
    table.write_text(
        '["8.4.0"]\nactive = true\n\n["8.4.0".release]\ntype = "alpha"\nnumber = 1\n',
        encoding="utf-8",
    )
    config = tmp_path / "qa.toml"
    config.write_text('[releases]\nfile = "releases.toml"\n', encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config), "reported"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["8.4.0-dev", "8.4.0alpha1"]


def test_missing_release_file_is_io_error(tmp_path: Path) -> None:
    config = tmp_path / "qa.toml"
    config.write_text('[releases]\nfile = "missing.toml"\n', encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config), "reported"])
    assert result.exit_code == int(ErrorCode.IO_ERROR)


def test_invalid_config_is_config_error(tmp_path: Path) -> None:
    config = tmp_path / "qa.toml"
    config.write_text("[api]\nindent = -1\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config), "api"])
    assert result.exit_code == int(ErrorCode.CONFIG_ERROR)


def test_config_option_must_exist(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.toml"), "reported"])
    assert result.exit_code == int(ErrorCode.USER_ERROR)


def test_show_lists_active_releases(monkeypatch: pytest.MonkeyPatch) -> None:
    import qa.cli.commands.show as show_cmd

    ctx = _ctx()
    _patch_context(monkeypatch, show_cmd, ctx)
    show_cmd.show(include_inactive=False)

    console = ctx.console
    assert isinstance(console, MockConsole)
    assert console.messages[0] == "8.3.0 - 8.3.0RC5 (26 Oct 2023)"
    assert "gz: https://downloads.php.net/~jakub/php-8.3.0RC5.tar.gz" in console.messages
    assert "  sha256: abc" in console.messages
    assert "warning: no RC build yet" in console.messages
    assert "7.4.33" not in console.text


def test_show_all_includes_inactive(monkeypatch: pytest.MonkeyPatch) -> None:
    import qa.cli.commands.show as show_cmd

    ctx = _ctx()
    _patch_context(monkeypatch, show_cmd, ctx)
    show_cmd.show(include_inactive=True)

    assert isinstance(ctx.console, MockConsole)
    assert "7.4.33 - 7.4.33RC2 [inactive]" in ctx.console.messages


def test_show_incomplete_release(monkeypatch: pytest.MonkeyPatch) -> None:
    import qa.cli.commands.show as show_cmd

    ctx = _ctx(
        {
            "8.3.0": {
                "active": True,
                "release": {"type": "RC", "number": 5, "baseurl": "https://example.org/"},
            }
        }
    )
    _patch_context(monkeypatch, show_cmd, ctx)
    show_cmd.show(include_inactive=False)

    assert isinstance(ctx.console, MockConsole)
    assert "warning: release files are incomplete, not linked" in ctx.console.messages


def test_check_report_accepts(monkeypatch: pytest.MonkeyPatch) -> None:
    import qa.cli.commands.check_report as check_cmd

    ctx = _ctx()
    _patch_context(monkeypatch, check_cmd, ctx)
    check_cmd.check_report("8.3.0RC5")

    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.count(Style.SUCCESS) == 1


def test_check_report_rejects(monkeypatch: pytest.MonkeyPatch) -> None:
    import qa.cli.commands.check_report as check_cmd

    ctx = _ctx()
    _patch_context(monkeypatch, check_cmd, ctx)
    with pytest.raises(typer.Exit) as exc:
        check_cmd.check_report("8.3.0")

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert isinstance(ctx.console, MockConsole)
    assert "hint: report the dev version instead: 8.3.0-dev" in ctx.console.messages


def test_lint_strict_fails_on_warnings(monkeypatch: pytest.MonkeyPatch) -> None:
    import qa.cli.commands.lint as lint_cmd

    ctx = _ctx({"8.3": {"active": True, "release": {"type": "RC", "number": 0}}})
    _patch_context(monkeypatch, lint_cmd, ctx)

    lint_cmd.lint(strict=False)
    with pytest.raises(typer.Exit) as exc:
        lint_cmd.lint(strict=True)

    assert exc.value.exit_code == int(ErrorCode.CONFIG_ERROR)
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.count(Style.WARNING) == 2


def test_lint_clean_table(monkeypatch: pytest.MonkeyPatch) -> None:
    import qa.cli.commands.lint as lint_cmd

    ctx = _ctx()
    _patch_context(monkeypatch, lint_cmd, ctx)
    lint_cmd.lint(strict=True)

    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.messages == ["OK 3 entries look fine"]

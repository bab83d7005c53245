from __future__ import annotations

from dataclasses import dataclass

import typer

from qa.core.config import Config, load_config, resolve_config_path
from qa.core.errors import ErrorCode
from qa.core.result import Err
from qa.output.console import ConsoleProtocol, RichConsole
from qa.releases.enricher import enrich
from qa.releases.errors import ReleaseTableError
from qa.releases.model import QaReleases, ReleaseEntry
from qa.releases.service import load_entries


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    entries: tuple[ReleaseEntry, ...]
    qa: QaReleases
    console: ConsoleProtocol


def table_error_exit_code(error: ReleaseTableError) -> ErrorCode:
    if error.kind in ("not_found", "unreadable"):
        return ErrorCode.IO_ERROR
    return ErrorCode.CONFIG_ERROR


def build_context() -> CLIContext:
    config = Config()
    config_path = resolve_config_path(None)
    if config_path is not None:
        config_result = load_config(config_path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        config = config_result.value

    entries_result = load_entries(config.releases.file)
    if isinstance(entries_result, Err):
        error = entries_result.error
        typer.echo(f"error: {error.pretty()}", err=True)
        raise typer.Exit(code=int(table_error_exit_code(error)))

    entries = entries_result.value
    return CLIContext(
        config=config,
        entries=entries,
        qa=enrich(entries),
        console=RichConsole(),
    )

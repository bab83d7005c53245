from __future__ import annotations

import os
from pathlib import Path

import typer

from qa import __version__
from qa.cli.commands.api_cmd import api
from qa.cli.commands.check_report import check_report
from qa.cli.commands.lint import lint
from qa.cli.commands.reported import reported
from qa.cli.commands.show import show
from qa.core.config import CONFIG_ENV_VAR
from qa.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(show)
app.command()(reported)
app.command()(api)
app.command("check-report")(check_report)
app.command()(lint)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help=f"Config file (overrides ${CONFIG_ENV_VAR})",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if config is not None:
        path = config.expanduser()
        if not path.is_file():
            typer.echo(f"error: --config '{path}' is not a file", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[CONFIG_ENV_VAR] = str(path)


def main() -> None:
    app()

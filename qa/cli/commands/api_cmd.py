from __future__ import annotations

import typer

from qa.cli.context import build_context
from qa.releases.api import select_current, to_api_dict, to_json


def api(
    indent: int | None = typer.Option(
        None, "--indent", min=0, help="JSON indentation (default from config, 0 for compact)."
    ),
    only_releases: bool = typer.Option(
        False, "--only-releases", help="Only current QA releases, without the full table."
    ),
    version: str | None = typer.Option(
        None, "--version", "-v", help="Only this version (implies --only-releases)."
    ),
) -> None:
    """Print the enriched release table as JSON."""
    ctx = build_context()

    if only_releases or version is not None:
        obj: object = select_current(ctx.qa, version=version)
    else:
        obj = to_api_dict(ctx.qa)

    typer.echo(to_json(obj, indent=ctx.config.api.indent if indent is None else indent), nl=False)

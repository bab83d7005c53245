from __future__ import annotations

import typer

from qa.cli.context import build_context


def reported() -> None:
    """Print versions allowed to send test reports, one per line."""
    ctx = build_context()
    for version in ctx.qa.reported:
        typer.echo(version)

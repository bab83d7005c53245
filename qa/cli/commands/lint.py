from __future__ import annotations

import typer

from qa.cli.context import build_context
from qa.core.errors import ErrorCode
from qa.releases.loader import validate_entries


def lint(
    strict: bool = typer.Option(False, "--strict", help="Fail when any warning is found."),
) -> None:
    """Check the release table for entries that would produce broken links."""
    ctx = build_context()

    warnings = validate_entries(ctx.entries)
    for w in warnings:
        ctx.console.warning(w)

    if not warnings:
        ctx.console.success(f"{len(ctx.entries)} entries look fine")
        return
    if strict:
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

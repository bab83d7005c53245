from __future__ import annotations

import typer

from qa.cli.context import build_context
from qa.core.errors import ErrorCode
from qa.output.console import Style
from qa.releases.reports import decide_report


def check_report(
    version: str = typer.Argument(..., help="Version string from the test report, e.g. 8.3.0-dev"),
) -> None:
    """Exit 0 if test reports for VERSION are accepted."""
    ctx = build_context()

    decision = decide_report(ctx.qa, version)
    if decision.accepted:
        ctx.console.success(f"{decision.version}: {decision.reason}")
        return

    ctx.console.error(f"{decision.version}: rejected")
    ctx.console.print(f"hint: {decision.reason}", Style.DIM)
    raise typer.Exit(code=int(ErrorCode.USER_ERROR))

from __future__ import annotations

import typer

from qa.cli.context import build_context
from qa.output.console import ConsoleProtocol, Style
from qa.releases.model import EnrichedEntry


def show(
    include_inactive: bool = typer.Option(False, "--all", help="Also list inactive versions."),
) -> None:
    """List QA releases with their download links."""
    ctx = build_context()

    shown = [e for e in ctx.qa.entries if e.active or include_inactive]
    if not shown:
        ctx.console.print("no active QA releases", Style.DIM)
        return

    for entry in shown:
        _print_entry(ctx.console, entry)


def _title(entry: EnrichedEntry) -> str:
    info = entry.release.info
    parts = [entry.version]
    if info.number > 0:
        stage = entry.release.version or info.qualified_version(entry.version)
        parts.append(f"- {stage}")
    if info.date:
        parts.append(f"({info.date})")
    if not entry.active:
        parts.append("[inactive]")
    return " ".join(parts)


def _print_entry(console: ConsoleProtocol, entry: EnrichedEntry) -> None:
    console.header(_title(entry))
    if entry.dev_version is not None:
        console.print(f"dev version: {entry.dev_version}", Style.DIM)

    release = entry.release
    for f in release.files:
        console.print(f"{f.archive.value}: {f.path}")
        for algo, value in f.checksums:
            console.print(f"  {algo.value}: {value or '(empty)'}", Style.DIM)

    if not entry.active:
        return
    if release.info.number <= 0:
        console.warning(f"no {release.info.type or 'QA'} build yet")
    elif release.enabled is False:
        console.warning("release files are incomplete, not linked")
    elif not release.files:
        console.warning("no baseurl, downloads are not linked")

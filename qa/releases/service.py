from __future__ import annotations

from functools import cache
from pathlib import Path

from qa.core.result import Ok, Result
from qa.releases.enricher import enrich
from qa.releases.errors import ReleaseTableError
from qa.releases.loader import load_releases_file, parse_releases
from qa.releases.model import QaReleases, ReleaseEntry
from qa.releases.table import QA_RELEASES


def load_entries(path: Path | None = None) -> Result[tuple[ReleaseEntry, ...], ReleaseTableError]:
    """Raw entries from ``path``, or from the built-in table when None."""
    if path is None:
        return parse_releases(QA_RELEASES)
    return load_releases_file(path)


@cache
def builtin_qa_releases() -> QaReleases:
    """The enriched built-in table, computed once per process."""
    return enrich(load_entries().unwrap())


def load_qa_releases(path: Path | None = None) -> Result[QaReleases, ReleaseTableError]:
    if path is None:
        return Ok(builtin_qa_releases())
    return load_entries(path).map(enrich)

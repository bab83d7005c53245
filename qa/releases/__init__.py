"""QA release table and the data derived from it.

Typical use:

    from qa.releases import builtin_qa_releases

    qa = builtin_qa_releases()
    qa.is_reported("8.3.0RC5")
"""

from __future__ import annotations

from qa.releases.enricher import enrich
from qa.releases.loader import load_releases_file, parse_releases
from qa.releases.model import (
    ArchiveType,
    ChecksumAlgorithm,
    EnrichedEntry,
    EnrichedRelease,
    QaReleases,
    ReleaseEntry,
    ReleaseFile,
    ReleaseInfo,
)
from qa.releases.service import builtin_qa_releases, load_qa_releases

__all__ = [
    "ArchiveType",
    "ChecksumAlgorithm",
    "EnrichedEntry",
    "EnrichedRelease",
    "QaReleases",
    "ReleaseEntry",
    "ReleaseFile",
    "ReleaseInfo",
    "builtin_qa_releases",
    "enrich",
    "load_qa_releases",
    "load_releases_file",
    "parse_releases",
]

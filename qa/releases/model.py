from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class ChecksumAlgorithm(Enum):
    """Checksum algorithms a QA release may publish.

    Raw release records carry one field per algorithm and archive type,
    named ``<algorithm>_<archive>`` (e.g. ``sha256_gz``). Fields for
    algorithms not listed here are ignored.
    """

    SHA256 = "sha256"

    def field_name(self, archive: ArchiveType) -> str:
        return f"{self.value}_{archive.value}"


class ArchiveType(Enum):
    """Tarball compressions published for each QA release, in link order."""

    BZ2 = "bz2"
    GZ = "gz"
    XZ = "xz"


def _no_checksums() -> dict[tuple[ChecksumAlgorithm, ArchiveType], str]:
    return {}


def _no_raw() -> dict[str, object]:
    return {}


@dataclass(frozen=True, slots=True)
class ReleaseInfo:
    """Hand-maintained data about the next QA build of one version.

    ``number`` is 0 while no build of this stage exists yet. ``raw`` keeps the
    table record exactly as written (field order, unknown fields) for the API.
    """

    type: str
    number: int
    date: str = ""
    baseurl: str = ""
    checksums: Mapping[tuple[ChecksumAlgorithm, ArchiveType], str] = field(
        default_factory=_no_checksums
    )
    raw: Mapping[str, object] = field(default_factory=_no_raw)

    def qualified_version(self, version: str) -> str:
        """Version with the stage appended, e.g. ``8.3.0RC5``."""
        return f"{version}{self.type}{self.number}"

    def checksum(self, algorithm: ChecksumAlgorithm, archive: ArchiveType) -> str | None:
        return self.checksums.get((algorithm, archive))


@dataclass(frozen=True, slots=True)
class ReleaseEntry:
    version: str
    active: bool
    release: ReleaseInfo


@dataclass(frozen=True, slots=True)
class ReleaseFile:
    """One downloadable tarball of a QA release."""

    archive: ArchiveType
    checksums: tuple[tuple[ChecksumAlgorithm, str], ...]
    path: str

    def checksum(self, algorithm: ChecksumAlgorithm) -> str | None:
        for algo, value in self.checksums:
            if algo is algorithm:
                return value
        return None


@dataclass(frozen=True, slots=True)
class EnrichedRelease:
    """ReleaseInfo plus the fields derived from it.

    ``enabled`` is False when the release must not be linked publicly, and
    None when no decision was made (numbered release without a base URL).
    """

    info: ReleaseInfo
    version: str | None = None
    files: tuple[ReleaseFile, ...] = ()
    enabled: bool | None = None

    def file(self, archive: ArchiveType) -> ReleaseFile | None:
        for f in self.files:
            if f.archive is archive:
                return f
        return None

    @property
    def is_published(self) -> bool:
        return self.enabled is not False


@dataclass(frozen=True, slots=True)
class EnrichedEntry:
    version: str
    active: bool
    release: EnrichedRelease
    # Only active entries get a dev version.
    dev_version: str | None = None


@dataclass(frozen=True, slots=True)
class QaReleases:
    """The enriched release table.

    - entries: every input entry, in table order
    - reported: versions allowed to report to the QA mailing list
    - releases: active entries with a numbered QA build, keyed by version
    """

    entries: tuple[EnrichedEntry, ...]
    reported: tuple[str, ...]
    releases: Mapping[str, EnrichedRelease]

    def entry(self, version: str) -> EnrichedEntry | None:
        for e in self.entries:
            if e.version == version:
                return e
        return None

    def is_reported(self, version: str) -> bool:
        return version in self.reported


def release_filename(version: str, info: ReleaseInfo, archive: ArchiveType) -> str:
    """Tarball name on the download host, e.g. ``php-8.3.0RC5.tar.gz``."""
    return f"php-{info.qualified_version(version)}.tar.{archive.value}"

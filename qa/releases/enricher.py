from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from qa.releases.model import (
    ArchiveType,
    ChecksumAlgorithm,
    EnrichedEntry,
    EnrichedRelease,
    QaReleases,
    ReleaseEntry,
    ReleaseFile,
    release_filename,
)


def dev_version(version: str) -> str:
    return f"{version}-dev"


def release_files(entry: ReleaseEntry) -> tuple[ReleaseFile, ...]:
    """Downloadable tarballs of a numbered release, in ArchiveType order.

    An archive is listed only when at least one checksum is known for it.
    """
    info = entry.release
    files: list[ReleaseFile] = []
    for archive in ArchiveType:
        checksums: list[tuple[ChecksumAlgorithm, str]] = []
        for algo in ChecksumAlgorithm:
            value = info.checksum(algo, archive)
            if value is not None:
                checksums.append((algo, value))
        if not checksums:
            continue
        files.append(
            ReleaseFile(
                archive=archive,
                checksums=tuple(checksums),
                path=info.baseurl + release_filename(entry.version, info, archive),
            )
        )
    return tuple(files)


def _enrich_release(entry: ReleaseEntry) -> EnrichedRelease:
    info = entry.release
    if info.number <= 0:
        # No build of this stage exists yet.
        return EnrichedRelease(info=info, enabled=False)
    if not info.baseurl:
        return EnrichedRelease(info=info)

    files = release_files(entry)
    return EnrichedRelease(
        info=info,
        version=info.qualified_version(entry.version),
        files=files,
        enabled=False if not files else None,
    )


def enrich(entries: Iterable[ReleaseEntry]) -> QaReleases:
    """Derive report versions and download files from the release table.

    Inactive entries are kept as-is. Every active entry reports its
    ``-dev`` version; active entries with a numbered build also report the
    qualified version (e.g. ``8.3.0RC5``) and, when a base URL is known,
    link one tarball per archive type that has a checksum.
    """
    enriched: list[EnrichedEntry] = []
    reported: list[str] = []

    for entry in entries:
        if not entry.active:
            enriched.append(
                EnrichedEntry(
                    version=entry.version,
                    active=False,
                    release=EnrichedRelease(info=entry.release),
                )
            )
            continue

        dev = dev_version(entry.version)
        reported.append(dev)
        if entry.release.number > 0:
            reported.append(entry.release.qualified_version(entry.version))

        enriched.append(
            EnrichedEntry(
                version=entry.version,
                active=True,
                release=_enrich_release(entry),
                dev_version=dev,
            )
        )

    releases = {
        e.version: e.release for e in enriched if e.active and e.release.info.number != 0
    }

    return QaReleases(
        entries=tuple(enriched),
        reported=tuple(reported),
        releases=MappingProxyType(releases),
    )

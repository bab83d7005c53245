"""Plain-data rendering of the enriched table for the QA API.

The layout matches what status page consumers already read:

    {
      "8.3.0": {"active": true, "dev_version": "8.3.0-dev", "release": {...}},
      "reported": ["8.3.0-dev", "8.3.0RC5"],
      "releases": {"8.3.0": {...}}
    }
"""

from __future__ import annotations

import json

from qa.releases.model import EnrichedEntry, EnrichedRelease, QaReleases


def release_to_dict(release: EnrichedRelease) -> dict[str, object]:
    info = release.info
    if info.raw:
        # Table record as written, unknown fields included.
        obj: dict[str, object] = dict(info.raw)
    else:
        obj = {
            "type": info.type,
            "number": info.number,
            "date": info.date,
            "baseurl": info.baseurl,
        }
        for (algo, archive), value in info.checksums.items():
            obj[algo.field_name(archive)] = value

    if release.version is not None:
        obj["version"] = release.version
    if release.files:
        files: dict[str, object] = {}
        for f in release.files:
            file_obj: dict[str, object] = {algo.value: value for algo, value in f.checksums}
            file_obj["path"] = f.path
            files[f.archive.value] = file_obj
        obj["files"] = files
    if release.enabled is not None:
        obj["enabled"] = release.enabled
    return obj


def entry_to_dict(entry: EnrichedEntry) -> dict[str, object]:
    obj: dict[str, object] = {
        "active": entry.active,
        "release": release_to_dict(entry.release),
    }
    if entry.dev_version is not None:
        obj["dev_version"] = entry.dev_version
    return obj


def to_api_dict(qa: QaReleases) -> dict[str, object]:
    out: dict[str, object] = {e.version: entry_to_dict(e) for e in qa.entries}
    out["reported"] = list(qa.reported)
    out["releases"] = {v: release_to_dict(r) for v, r in qa.releases.items()}
    return out


def select_current(qa: QaReleases, *, version: str | None = None) -> dict[str, object]:
    """Only the current QA releases, optionally narrowed to one version.

    An unknown version yields an empty mapping.
    """
    releases = qa.releases
    if version is not None:
        found = releases.get(version)
        return {version: release_to_dict(found)} if found is not None else {}
    return {v: release_to_dict(r) for v, r in releases.items()}


def to_json(obj: object, *, indent: int | None = 2) -> str:
    return json.dumps(obj, indent=indent if indent else None, ensure_ascii=False) + "\n"

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from urllib.parse import urlsplit

from qa.core.result import Err, Ok, Result
from qa.core.structured import StrDict, as_str_dict, get_bool, get_table
from qa.releases.errors import ReleaseTableError
from qa.releases.model import ArchiveType, ChecksumAlgorithm, ReleaseEntry, ReleaseInfo


_VERSION_RE = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")


def _invalid(version: str, message: str) -> Err[ReleaseTableError]:
    return Err(
        ReleaseTableError(
            kind="invalid_table",
            message=f"{version}: {message}",
        )
    )


def _str_field(version: str, release: StrDict, key: str) -> Result[str, ReleaseTableError]:
    """Raw string value of ``key``, "" when absent. Values are kept as written."""
    value = release.get(key)
    if value is None:
        return Ok("")
    if not isinstance(value, str):
        return _invalid(version, f"release.{key} must be a string (got {value!r})")
    return Ok(value)


def _parse_release(version: str, release: StrDict) -> Result[ReleaseInfo, ReleaseTableError]:
    number_obj = release.get("number")
    if number_obj is None:
        number_obj = 0
    if isinstance(number_obj, bool) or not isinstance(number_obj, int):
        return _invalid(version, f"release.number must be an integer (got {number_obj!r})")
    if number_obj < 0:
        return _invalid(version, f"release.number must be >= 0 (got {number_obj})")

    strings: dict[str, str] = {}
    for key in ("type", "date", "baseurl"):
        parsed = _str_field(version, release, key)
        if isinstance(parsed, Err):
            return parsed
        strings[key] = parsed.value

    checksums: dict[tuple[ChecksumAlgorithm, ArchiveType], str] = {}
    for archive in ArchiveType:
        for algo in ChecksumAlgorithm:
            key = algo.field_name(archive)
            if release.get(key) is None:
                continue
            value = _str_field(version, release, key)
            if isinstance(value, Err):
                return value
            # Empty strings count as provided.
            checksums[(algo, archive)] = value.value

    return Ok(
        ReleaseInfo(
            type=strings["type"],
            number=number_obj,
            date=strings["date"],
            baseurl=strings["baseurl"],
            checksums=checksums,
            raw=MappingProxyType(dict(release)),
        )
    )


def _parse_entry(version: str, obj: object) -> Result[ReleaseEntry, ReleaseTableError]:
    entry = as_str_dict(obj)
    if entry is None:
        return _invalid(version, "entry must be a table")

    if "active" in entry and get_bool(entry, "active") is None:
        return _invalid(version, "active must be true or false")
    active = get_bool(entry, "active") or False

    if "release" in entry:
        release = get_table(entry, "release")
        if release is None:
            return _invalid(version, "release must be a table")
    else:
        release = {}

    info = _parse_release(version, release)
    if isinstance(info, Err):
        return info
    return Ok(ReleaseEntry(version=version, active=active, release=info.value))


def parse_releases(data: Mapping[str, object]) -> Result[tuple[ReleaseEntry, ...], ReleaseTableError]:
    """Turn an untyped release table into typed entries, keeping table order.

    Missing fields fall back to "not provided" (inactive, number 0, empty
    strings); fields with an unexpected type are errors. Keys and string
    values are kept exactly as written.
    """
    entries: list[ReleaseEntry] = []
    for version, obj in data.items():
        parsed = _parse_entry(version, obj)
        if isinstance(parsed, Err):
            return parsed
        entries.append(parsed.value)
    return Ok(tuple(entries))


def load_releases_file(path: Path) -> Result[tuple[ReleaseEntry, ...], ReleaseTableError]:
    """Load a release table from TOML.

    Top-level tables are version strings:

        ["8.3.0"]
        active = true

        ["8.3.0".release]
        type = "RC"
        number = 5
    """
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(
            ReleaseTableError(
                kind="not_found",
                message=f"release table not found: {path}",
                hint="check [releases].file in the config",
            )
        )
    except (PermissionError, UnicodeDecodeError) as e:
        return Err(ReleaseTableError(kind="unreadable", message=f"cannot read {path}: {e}"))
    except tomllib.TOMLDecodeError as e:
        return Err(ReleaseTableError(kind="invalid_toml", message=f"{path}: {e}"))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ReleaseTableError(kind="invalid_table", message=f"{path}: expected a table"))
    return parse_releases(data)


def validate_entries(entries: Iterable[ReleaseEntry]) -> list[str]:
    """Return warnings about suspicious entries.

    Warnings never prevent enrichment; they point at data that would produce
    broken links or reports.
    """
    warnings: list[str] = []
    for e in entries:
        if _VERSION_RE.match(e.version) is None:
            warnings.append(f"{e.version}: version is not MAJOR.MINOR.PATCH")

        info = e.release
        if info.baseurl:
            parts = urlsplit(info.baseurl)
            if parts.scheme not in ("http", "https") or not parts.netloc:
                warnings.append(f"{e.version}: baseurl is not an http(s) URL: {info.baseurl}")
            elif not info.baseurl.endswith("/"):
                warnings.append(f"{e.version}: baseurl should end with '/': {info.baseurl}")

        if not e.active:
            continue
        if info.number > 0 and not info.type:
            warnings.append(f"{e.version}: release.number is set but release.type is empty")
        if info.number > 0 and not info.baseurl:
            warnings.append(f"{e.version}: numbered release has no baseurl, no files are linked")
        if info.number > 0 and info.baseurl and not info.checksums:
            warnings.append(f"{e.version}: no checksums, release will be disabled")
    return warnings

from __future__ import annotations

from dataclasses import dataclass

from qa.releases.model import QaReleases


@dataclass(frozen=True, slots=True)
class ReportDecision:
    """Whether a submitted test report is forwarded to the QA mailing list."""

    version: str
    accepted: bool
    reason: str


def accepts_report(qa: QaReleases, version: str) -> bool:
    return qa.is_reported(version.strip())


def decide_report(qa: QaReleases, version: str) -> ReportDecision:
    v = version.strip()
    if qa.is_reported(v):
        return ReportDecision(version=v, accepted=True, reason="version is under QA")

    entry = qa.entry(v)
    if entry is not None and not entry.active:
        reason = f"{v} is not under QA (inactive)"
    elif entry is not None:
        reason = f"report the dev version instead: {entry.dev_version}"
    else:
        reason = "version is not in the QA release table"
    return ReportDecision(version=v, accepted=False, reason=reason)

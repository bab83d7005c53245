from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class ReleaseTableError:
    """Why a release table could not be loaded."""

    kind: Literal[
        "not_found",
        "unreadable",
        "invalid_toml",
        "invalid_table",
    ]
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message

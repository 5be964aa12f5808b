"""Data models shared across the image resource checker."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class Verdict(str, Enum):
    """Classification of an image asset after counting its references."""

    USED = "used"
    UNUSED = "unused"


class RunFailure(str, Enum):
    """Reasons a run stops before producing a complete report."""

    MISSING_CATALOG = "missing_catalog"
    MISSING_PROJECT = "missing_project"
    UNREADABLE_PROJECT = "unreadable_project"


@dataclass(frozen=True, slots=True)
class UsageReportEntry:
    """Outcome of checking a single asset against the project tree."""

    asset_name: str
    identifier: str
    occurrences: int
    verdict: Verdict


@dataclass(slots=True)
class ScanOptions:
    """Caller-supplied settings for a run."""

    extensions: Tuple[str, ...] = ()
    threshold: int = 0
    anxious: bool = False
    progress: bool = True


@dataclass(slots=True)
class RunResult:
    """Entries produced by a run plus the failure that stopped it, if any."""

    entries: List[UsageReportEntry] = field(default_factory=list)
    failure: RunFailure | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def unused(self) -> List[UsageReportEntry]:
        return [entry for entry in self.entries if entry.verdict is Verdict.UNUSED]

"""Outcome data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from glyphscrub.outcomes.errors import ErrorKind
from glyphscrub.rewrite.rewriter import RewriteStats


class OutcomeKind(str, Enum):
    CLEANED = "cleaned"
    WOULD_CHANGE = "would_change"  # dry-run
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass
class FileOutcome:
    """What happened to one file (or one pruned directory)."""

    path: Path
    kind: OutcomeKind
    reason: Optional[str] = None  # skip reason or error message
    error_kind: Optional[ErrorKind] = None
    stats: Optional[RewriteStats] = None
    is_directory: bool = False

    @classmethod
    def cleaned(cls, path: Path, stats: RewriteStats) -> "FileOutcome":
        return cls(path=path, kind=OutcomeKind.CLEANED, stats=stats)

    @classmethod
    def would_change(cls, path: Path, stats: RewriteStats) -> "FileOutcome":
        return cls(path=path, kind=OutcomeKind.WOULD_CHANGE, stats=stats)

    @classmethod
    def skipped(cls, path: Path, reason: str, *, is_directory: bool = False) -> "FileOutcome":
        return cls(path=path, kind=OutcomeKind.SKIPPED, reason=reason, is_directory=is_directory)

    @classmethod
    def error(cls, path: Path, error_kind: ErrorKind, cause: str) -> "FileOutcome":
        return cls(path=path, kind=OutcomeKind.ERROR, reason=cause, error_kind=error_kind)


@dataclass
class RunResult:
    """Complete result of one walk."""

    root: Path
    dry_run: bool = False
    outcomes: List[FileOutcome] = field(default_factory=list)
    ignored: List[str] = field(default_factory=list)  # root-relative paths
    binary: List[str] = field(default_factory=list)
    duration_ms: float = 0.0

    def _of(self, kind: OutcomeKind) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.kind is kind]

    @property
    def cleaned(self) -> List[FileOutcome]:
        return self._of(OutcomeKind.CLEANED)

    @property
    def would_change(self) -> List[FileOutcome]:
        return self._of(OutcomeKind.WOULD_CHANGE)

    @property
    def skipped(self) -> List[FileOutcome]:
        return self._of(OutcomeKind.SKIPPED)

    @property
    def errors(self) -> List[FileOutcome]:
        return self._of(OutcomeKind.ERROR)

    @property
    def chars_removed(self) -> int:
        return sum(o.stats.removed for o in self.outcomes if o.stats)

    @property
    def homoglyphs_replaced(self) -> int:
        return sum(o.stats.homoglyphs for o in self.outcomes if o.stats)

    @property
    def line_endings_converted(self) -> int:
        return sum(o.stats.line_endings for o in self.outcomes if o.stats)

"""Configuration schema — immutable scan options and output settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal, Optional


class LineEnding(str, Enum):
    NONE = "none"
    CRLF = "crlf"
    LF = "lf"


@dataclass(frozen=True)
class ScanOptions:
    """Everything the walker and rewriter need, built once before traversal."""

    root: Path
    dry_run: bool = False
    force: bool = False  # bypass hidden-attribute and ignore-pattern checks
    line_ending: LineEnding = LineEnding.NONE
    preserve_timestamp: bool = False


@dataclass
class OutputConfig:
    format: Literal["terminal", "json"] = "terminal"
    output: Optional[Path] = None
    show_summary: bool = True

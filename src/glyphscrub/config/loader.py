"""Build ScanOptions / OutputConfig from CLI flags and GLYPHSCRUB_* env vars."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from glyphscrub.config.defaults import ENV_DRY_RUN, ENV_FORMAT, ENV_LINE_ENDING
from glyphscrub.config.schema import LineEnding, OutputConfig, ScanOptions


def resolve_line_ending(crlf: bool, lf: bool) -> LineEnding:
    """Map the two CLI flags to one mode. CRLF wins when both are set."""
    if crlf:
        return LineEnding.CRLF
    if lf:
        return LineEnding.LF
    return LineEnding.NONE


def _env_line_ending() -> Optional[LineEnding]:
    val = os.environ.get(ENV_LINE_ENDING, "").strip().lower()
    try:
        return LineEnding(val) if val else None
    except ValueError:
        return None


def build_options(
    root: str | Path,
    *,
    dry_run: bool = False,
    force: bool = False,
    crlf: bool = False,
    lf: bool = False,
    preserve_timestamp: bool = False,
) -> ScanOptions:
    """Canonicalize the root, resolve flags, apply env overrides, then freeze."""
    line_ending = resolve_line_ending(crlf, lf)
    if line_ending is LineEnding.NONE:
        line_ending = _env_line_ending() or LineEnding.NONE

    if os.environ.get(ENV_DRY_RUN) == "1":
        dry_run = True

    return ScanOptions(
        root=Path(root).resolve(),
        dry_run=dry_run,
        force=force,
        line_ending=line_ending,
        preserve_timestamp=preserve_timestamp,
    )


def build_output_config(
    format: Optional[str] = None,
    output: Optional[str] = None,
) -> OutputConfig:
    """CLI --format beats GLYPHSCRUB_FORMAT; unknown env values are ignored."""
    cfg = OutputConfig()
    if val := os.environ.get(ENV_FORMAT):
        if val in ("terminal", "json"):
            cfg.format = val  # type: ignore[assignment]
    if format:
        if format not in ("terminal", "json"):
            raise ValueError(f"Invalid format: {format}")
        cfg.format = format  # type: ignore[assignment]
    if output:
        cfg.output = Path(output)
    return cfg

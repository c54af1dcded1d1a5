"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from glyphscrub.outcomes.models import RunResult


def to_dict(result: RunResult) -> Dict[str, Any]:
    """Convert RunResult to a JSON-serialisable dict."""
    files: List[Dict[str, Any]] = []
    for o in result.outcomes:
        files.append({
            "path": str(o.path),
            "outcome": o.kind.value,
            **({"directory": True} if o.is_directory else {}),
            **({"reason": o.reason} if o.reason else {}),
            **({"error_kind": o.error_kind.value} if o.error_kind else {}),
            **({
                "format_chars": o.stats.format_chars,
                "zero_width": o.stats.zero_width,
                "homoglyphs": o.stats.homoglyphs,
                "line_endings": o.stats.line_endings,
            } if o.stats else {}),
        })

    return {
        "version": "1.0",
        "root": str(result.root),
        "dry_run": result.dry_run,
        "cleaned": len(result.cleaned),
        "would_change": len(result.would_change),
        "skipped": len(result.skipped),
        "errors": len(result.errors),
        "chars_removed": result.chars_removed,
        "homoglyphs_replaced": result.homoglyphs_replaced,
        "line_endings_converted": result.line_endings_converted,
        "files": files,
        "ignored": result.ignored,
        "binary": result.binary,
        "duration_ms": result.duration_ms,
    }


def render(result: RunResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)

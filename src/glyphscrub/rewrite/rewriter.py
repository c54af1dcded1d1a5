"""Ordered rewrite pipeline applied to a whole file's text.

Order matters:
  1. drop Unicode general category Cf (bidi controls, joiners, ...)
  2. drop the explicit zero-width fallback set
  3. map Cyrillic homoglyphs to Latin
  4. convert line endings (CRLF or LF), last so it sees cleaned text

The pipeline is pure: no I/O, no platform checks.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Tuple

from glyphscrub.config.schema import LineEnding, ScanOptions
from glyphscrub.rewrite.tables import HOMOGLYPH_TABLE, HOMOGLYPHS, ZERO_WIDTH_TABLE

_BARE_LF_RE = re.compile(r"(?<!\r)\n")


@dataclass
class RewriteStats:
    """Per-file counts of what the pipeline changed."""

    format_chars: int = 0
    zero_width: int = 0
    homoglyphs: int = 0
    line_endings: int = 0

    @property
    def removed(self) -> int:
        return self.format_chars + self.zero_width

    @property
    def total(self) -> int:
        return self.removed + self.homoglyphs + self.line_endings


def strip_format_chars(text: str) -> str:
    return "".join(ch for ch in text if unicodedata.category(ch) != "Cf")


def strip_zero_width(text: str) -> str:
    return text.translate(ZERO_WIDTH_TABLE)


def replace_homoglyphs(text: str) -> str:
    return text.translate(HOMOGLYPH_TABLE)


def to_crlf(text: str) -> str:
    """Turn every LF not already preceded by CR into CRLF."""
    return _BARE_LF_RE.sub("\r\n", text)


def to_lf(text: str) -> str:
    return text.replace("\r\n", "\n")


def convert_line_endings(text: str, mode: LineEnding) -> Tuple[str, int]:
    """Return (converted_text, number_of_line_endings_changed)."""
    if mode is LineEnding.CRLF:
        count = len(_BARE_LF_RE.findall(text))
        return (to_crlf(text) if count else text), count
    if mode is LineEnding.LF:
        count = text.count("\r\n")
        return (to_lf(text) if count else text), count
    return text, 0


def transform_with_stats(text: str, options: ScanOptions) -> Tuple[str, RewriteStats]:
    """Run the full pipeline and report what each step changed."""
    stats = RewriteStats()

    step = strip_format_chars(text)
    stats.format_chars = len(text) - len(step)

    before = len(step)
    step = strip_zero_width(step)
    stats.zero_width = before - len(step)

    stats.homoglyphs = sum(1 for ch in step if ch in HOMOGLYPHS)
    if stats.homoglyphs:
        step = replace_homoglyphs(step)

    step, stats.line_endings = convert_line_endings(step, options.line_ending)
    return step, stats


def transform(text: str, options: ScanOptions) -> str:
    """Return *text* with invisible and confusable characters cleaned out."""
    return transform_with_stats(text, options)[0]

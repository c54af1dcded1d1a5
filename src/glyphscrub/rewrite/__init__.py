"""Text rewrite pipeline — format chars, zero-width, homoglyphs, line endings."""

from glyphscrub.rewrite.rewriter import RewriteStats, transform, transform_with_stats
from glyphscrub.rewrite.tables import HOMOGLYPHS, ZERO_WIDTH

__all__ = [
    "HOMOGLYPHS",
    "RewriteStats",
    "ZERO_WIDTH",
    "transform",
    "transform_with_stats",
]

"""Console reporting and end-of-run renderers."""

from glyphscrub.output.reporter import Reporter

__all__ = ["Reporter"]

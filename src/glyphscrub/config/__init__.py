"""Scan options, output settings, and env-var overrides."""

from glyphscrub.config.loader import build_options, build_output_config
from glyphscrub.config.schema import LineEnding, OutputConfig, ScanOptions

__all__ = [
    "LineEnding",
    "OutputConfig",
    "ScanOptions",
    "build_options",
    "build_output_config",
]

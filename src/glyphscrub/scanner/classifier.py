"""Text vs. binary heuristic.

A NUL byte anywhere in the first SNIFF_SIZE bytes means binary. This is not
an encoding or BOM detector: UTF-16 text is classified binary, and a file
that passes may still fail to decode later.
"""

from __future__ import annotations

from pathlib import Path

from glyphscrub.config.defaults import SNIFF_SIZE


def is_text_file(path: Path, sample_size: int = SNIFF_SIZE) -> bool:
    """Return True for text, False for binary or unreadable files."""
    try:
        with path.open("rb") as fh:
            sample = fh.read(sample_size)
    except OSError:
        return False
    return b"\x00" not in sample

"""Per-directory ignore patterns (.gitignore) and glob matching.

File format:
  - One shell glob per line (``*``, ``?``, ``[...]``).
  - Blank lines and lines starting with ``#`` are skipped.
  - Surrounding whitespace is trimmed.

Patterns are matched with :func:`fnmatch.fnmatch` against the path relative
to the scan root, in POSIX form. ``fnmatch`` normalizes case with
``os.path.normcase``, so matching is case-sensitive on POSIX hosts and
case-insensitive on Windows, the same as each host's default filesystem.
"""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

from glyphscrub.config.defaults import IGNORE_FILENAME


def parse_patterns(text: str) -> Tuple[str, ...]:
    patterns = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return tuple(patterns)


def is_excluded(relative_path: str, patterns: Sequence[str]) -> bool:
    """Return True if *relative_path* matches any pattern (load order)."""
    return matching_pattern(relative_path, patterns) is not None


def matching_pattern(relative_path: str, patterns: Sequence[str]) -> Optional[str]:
    """Return the first pattern matching *relative_path*, or None."""
    for pat in patterns:
        if fnmatch(relative_path, pat):
            return pat
    return None


class IgnoreRules:
    """Lazily loaded, cached ignore patterns keyed by directory.

    One instance lives for one run; it is owned by the walker and never
    shared through module globals.
    """

    def __init__(self, filename: str = IGNORE_FILENAME) -> None:
        self.filename = filename
        self._cache: Dict[Path, Tuple[str, ...]] = {}

    def load(self, directory: Path) -> Tuple[str, ...]:
        """Return the patterns for *directory*; a missing file means none."""
        cached = self._cache.get(directory)
        if cached is not None:
            return cached
        path = directory / self.filename
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                patterns = parse_patterns(f.read())
        except OSError:
            patterns = ()
        self._cache[directory] = patterns
        return patterns

    def __len__(self) -> int:
        return len(self._cache)

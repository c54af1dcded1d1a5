"""Write-permission probe with a per-run verdict cache.

The probe never mutates what it checks:
  - directory: create and immediately delete a uniquely named temp file
  - file: open read-write, close without writing

Every failure collapses to ``False``; :meth:`PermissionProbe.can_write`
never raises. The first verdict for a path wins for the rest of the run.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict

from glyphscrub.config.defaults import PROBE_PREFIX


class PermissionProbe:
    def __init__(self) -> None:
        self._verdicts: Dict[Path, bool] = {}

    def can_write(self, path: Path) -> bool:
        if path in self._verdicts:
            return self._verdicts[path]
        verdict = self._probe(path)
        self._verdicts[path] = verdict
        return verdict

    def _probe(self, path: Path) -> bool:
        try:
            if path.is_dir():
                return _probe_directory(path)
            return _probe_file(path)
        except Exception:
            return False

    def __contains__(self, path: Path) -> bool:
        return path in self._verdicts


def _probe_directory(directory: Path) -> bool:
    fd, name = tempfile.mkstemp(prefix=PROBE_PREFIX, dir=directory)
    try:
        os.close(fd)
    finally:
        os.unlink(name)
    return True


def _probe_file(path: Path) -> bool:
    # POSIX has no share-deny mode; an r+b open is the closest equivalent.
    with open(path, "r+b"):
        pass
    return True

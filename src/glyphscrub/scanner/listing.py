"""Directory listing and hidden-attribute checks."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import List

_FILE_ATTRIBUTE_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)


@dataclass(frozen=True)
class Entry:
    path: Path
    is_dir: bool
    is_file: bool
    is_symlink: bool
    hidden: bool
    mtime_ns: int


def _hidden(name: str, st: os.stat_result) -> bool:
    if name.startswith("."):
        return True
    attrs = getattr(st, "st_file_attributes", 0)
    return bool(attrs & _FILE_ATTRIBUTE_HIDDEN)


def is_hidden(path: Path) -> bool:
    """Dot-name on any host, or the Windows hidden attribute."""
    return _hidden(path.name, os.lstat(path))


def list_children(directory: Path, *, include_hidden: bool = False) -> List[Entry]:
    """Return the immediate children of *directory*, sorted by name.

    Raises OSError if the directory cannot be listed.
    """
    entries: List[Entry] = []
    with os.scandir(directory) as it:
        for de in it:
            try:
                st = de.stat(follow_symlinks=False)
            except OSError:
                continue  # vanished between listing and stat
            hidden = _hidden(de.name, st)
            if hidden and not include_hidden:
                continue
            entries.append(
                Entry(
                    path=Path(de.path),
                    is_dir=stat.S_ISDIR(st.st_mode),
                    is_file=stat.S_ISREG(st.st_mode),
                    is_symlink=stat.S_ISLNK(st.st_mode),
                    hidden=hidden,
                    mtime_ns=st.st_mtime_ns,
                )
            )
    entries.sort(key=lambda e: e.path.name)
    return entries

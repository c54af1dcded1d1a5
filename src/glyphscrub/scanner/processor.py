"""Per-file processing: probe, read, rewrite, write back, restore mtime.

Each call is fault-isolated. Whatever goes wrong for one file becomes a
FileOutcome for that file and never propagates to the walker.
"""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

from glyphscrub.config.defaults import WRITE_PREFIX
from glyphscrub.config.schema import ScanOptions
from glyphscrub.outcomes.errors import classify_error
from glyphscrub.outcomes.models import FileOutcome, OutcomeKind
from glyphscrub.output.reporter import Reporter
from glyphscrub.rewrite.rewriter import transform_with_stats
from glyphscrub.scanner.probe import PermissionProbe


class FileProcessor:
    def __init__(
        self,
        probe: Optional[PermissionProbe] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.probe = probe or PermissionProbe()
        self.reporter = reporter or Reporter()

    def process(self, path: Path, options: ScanOptions) -> FileOutcome:
        """Clean one file that has already been classified as text."""
        try:
            outcome = self._process(path, options)
        except Exception as exc:
            outcome = FileOutcome.error(path, classify_error(exc), str(exc))
        self._report(outcome)
        return outcome

    def _process(self, path: Path, options: ScanOptions) -> FileOutcome:
        if not options.dry_run and not self.probe.can_write(path):
            return FileOutcome.skipped(path, "no write permission")

        try:
            st = os.stat(path)
            with open(path, "r", encoding="utf-8", newline="") as f:
                original = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            return FileOutcome.error(path, classify_error(exc), str(exc))

        cleaned, stats = transform_with_stats(original, options)

        if options.dry_run:
            return FileOutcome.would_change(path, stats)

        try:
            _write_replace(path, cleaned, st)
        except OSError as exc:
            return FileOutcome.error(path, classify_error(exc, writing=True), str(exc))

        if options.preserve_timestamp:
            try:
                os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns))
            except OSError as exc:
                self.reporter.warning(f"Could not restore timestamp on {path}: {exc}")

        return FileOutcome.cleaned(path, stats)

    def _report(self, outcome: FileOutcome) -> None:
        # Rewrites that changed nothing only show up in verbose output.
        # Dry-run outcomes are always reported.
        if outcome.kind is OutcomeKind.CLEANED and not outcome.stats.total:
            self.reporter.verbose(f"cleaned (no changes): {outcome.path}")
            return
        self.reporter.outcome(outcome)


def _write_replace(path: Path, text: str, st: os.stat_result) -> None:
    """Write *text* to a sibling temp file, then swap it over *path*.

    The original stays intact until ``os.replace``; permission bits are
    copied from *st*.
    """
    fd, tmp = tempfile.mkstemp(prefix=WRITE_PREFIX, dir=path.parent)
    os.close(fd)
    try:
        with open(tmp, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.chmod(tmp, stat.S_IMODE(st.st_mode))
        os.replace(tmp, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp)
        raise

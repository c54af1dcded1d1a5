"""Breadth-first walk that admits entries and dispatches text files.

Per directory, in order:
  1. load that directory's ignore patterns (cached)
  2. outside dry-run, probe write access; a denied directory is pruned
  3. list children (hidden entries only with ``force``)
  4. admit each child; enqueue directories, classify and process files
"""

from __future__ import annotations

import os
import time
from collections import deque
from pathlib import Path
from typing import Deque, Optional, Sequence

from glyphscrub.config.schema import ScanOptions
from glyphscrub.outcomes.errors import RootUnavailableError, classify_error
from glyphscrub.outcomes.models import FileOutcome, RunResult
from glyphscrub.output.reporter import Reporter
from glyphscrub.scanner.classifier import is_text_file
from glyphscrub.scanner.ignore import IgnoreRules, matching_pattern
from glyphscrub.scanner.listing import Entry, is_hidden, list_children
from glyphscrub.scanner.probe import PermissionProbe
from glyphscrub.scanner.processor import FileProcessor


def relative_to_root(path: Path, root: Path) -> str:
    """Root-relative POSIX path with no leading separator."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path).lstrip("/\\")


def should_process(path: Path, root: Path, patterns: Sequence[str], force: bool) -> bool:
    """Admission policy for one directory entry."""
    if force:
        return True
    if not os.path.lexists(path):
        return False
    try:
        if is_hidden(path):
            return False
    except OSError:
        return False
    return matching_pattern(relative_to_root(path, root), patterns) is None


class Walker:
    """Owns the traversal queue and the per-run caches."""

    def __init__(
        self,
        *,
        reporter: Optional[Reporter] = None,
        probe: Optional[PermissionProbe] = None,
        ignore_rules: Optional[IgnoreRules] = None,
        processor: Optional[FileProcessor] = None,
    ) -> None:
        self.reporter = reporter or Reporter()
        self.probe = probe or PermissionProbe()
        self.ignore_rules = ignore_rules or IgnoreRules()
        self.processor = processor or FileProcessor(self.probe, self.reporter)

    def check_root(self, options: ScanOptions) -> None:
        """Raise RootUnavailableError if the walk cannot start."""
        root = options.root
        if not root.is_dir():
            raise RootUnavailableError(f"Scan root is not a directory: {root}")
        if not options.dry_run and not self.probe.can_write(root):
            raise RootUnavailableError(f"No write permission on scan root: {root}")

    def run(self, options: ScanOptions) -> RunResult:
        """Walk the tree under ``options.root``. Returns a RunResult."""
        start = time.perf_counter()
        self.check_root(options)

        result = RunResult(root=options.root, dry_run=options.dry_run)
        queue: Deque[Path] = deque([options.root])

        while queue:
            current = queue.popleft()
            patterns = self.ignore_rules.load(current)

            if not options.dry_run and not self.probe.can_write(current):
                self._record(result, FileOutcome.skipped(current, "no write permission", is_directory=True))
                continue

            try:
                children = list_children(current, include_hidden=options.force)
            except OSError as exc:
                outcome = FileOutcome.error(current, classify_error(exc), str(exc))
                outcome.is_directory = True
                self._record(result, outcome)
                continue

            for entry in children:
                try:
                    self._visit(entry, patterns, options, queue, result)
                except Exception as exc:
                    self._record(result, FileOutcome.error(entry.path, classify_error(exc), str(exc)))

        result.duration_ms = (time.perf_counter() - start) * 1000
        return result

    def _visit(
        self,
        entry: Entry,
        patterns: Sequence[str],
        options: ScanOptions,
        queue: Deque[Path],
        result: RunResult,
    ) -> None:
        rel = relative_to_root(entry.path, options.root)

        if not should_process(entry.path, options.root, patterns, options.force):
            result.ignored.append(rel)
            self.reporter.verbose(f"ignored: {rel}")
            return

        if entry.is_symlink:
            self.reporter.verbose(f"symlink, not followed: {rel}")
            return

        if entry.is_dir:
            queue.append(entry.path)
            return

        if not entry.is_file:
            self.reporter.verbose(f"not a regular file: {rel}")
            return

        if not is_text_file(entry.path):
            result.binary.append(rel)
            self.reporter.verbose(f"binary: {rel}")
            return

        result.outcomes.append(self.processor.process(entry.path, options))

    def _record(self, result: RunResult, outcome: FileOutcome) -> None:
        result.outcomes.append(outcome)
        self.reporter.outcome(outcome)

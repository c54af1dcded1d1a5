"""Shared test fixtures — quiet reporters, option builders, sample trees."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from glyphscrub.config.schema import LineEnding, ScanOptions
from glyphscrub.output.reporter import Reporter

ZWSP = "\u200b"
RLO = "\u202e"
BOM = "\ufeff"


@pytest.fixture
def reporter() -> Reporter:
    """A verbose reporter writing into an in-memory buffer."""
    return Reporter(Console(file=io.StringIO(), width=200), verbose=True)


@pytest.fixture
def make_options():
    def _make(root: Path, **kwargs) -> ScanOptions:
        kwargs.setdefault("line_ending", LineEnding.NONE)
        return ScanOptions(root=root.resolve(), **kwargs)

    return _make


def write_bytes(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def write_text(path: Path, text: str) -> Path:
    return write_bytes(path, text.encode("utf-8"))


def read_text(path: Path) -> str:
    return path.read_bytes().decode("utf-8")


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Root with a dirty a.txt, a .gitignore for *.log, and a dirty b.log."""
    write_text(tmp_path / "a.txt", f"h{ZWSP}ello\r\n")
    write_text(tmp_path / ".gitignore", "*.log\n")
    write_text(tmp_path / "b.log", f"log{ZWSP}line\r\n")
    return tmp_path

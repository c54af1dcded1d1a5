"""Tests for the CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from conftest import ZWSP, read_text, write_text
from glyphscrub.cli import app
from glyphscrub.scanner.probe import PermissionProbe

runner = CliRunner()


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "glyphscrub" in result.output


class TestClean:
    def test_cleans_tree(self, sample_tree: Path):
        result = runner.invoke(app, ["clean", str(sample_tree), "--lf"])
        assert result.exit_code == 0
        assert (sample_tree / "a.txt").read_bytes() == b"hello\n"
        assert read_text(sample_tree / "b.log") == f"log{ZWSP}line\r\n"

    def test_dry_run(self, sample_tree: Path):
        result = runner.invoke(app, ["clean", str(sample_tree), "--dry-run"])
        assert result.exit_code == 0
        assert read_text(sample_tree / "a.txt") == f"h{ZWSP}ello\r\n"

    def test_crlf_beats_lf(self, tmp_path: Path):
        f = write_text(tmp_path / "a.txt", "x\ny\r\n")
        result = runner.invoke(app, ["clean", str(tmp_path), "--crlf", "--lf"])
        assert result.exit_code == 0
        assert f.read_bytes() == b"x\r\ny\r\n"

    def test_force_includes_hidden(self, tmp_path: Path):
        f = write_text(tmp_path / ".rc", f"r{ZWSP}\n")
        runner.invoke(app, ["clean", str(tmp_path), "--force"])
        assert read_text(f) == "r\n"

    def test_json_report_file(self, sample_tree: Path, tmp_path_factory):
        report = tmp_path_factory.mktemp("out") / "report.json"
        result = runner.invoke(
            app, ["clean", str(sample_tree), "--format", "json", "--output", str(report)]
        )
        assert result.exit_code == 0
        data = json.loads(report.read_text())
        assert data["cleaned"] == 1
        assert data["ignored"] == ["b.log"]

    def test_file_errors_are_not_fatal(self, tmp_path: Path):
        (tmp_path / "bad.txt").write_bytes(b"\xffbad\n")
        result = runner.invoke(app, ["clean", str(tmp_path)])
        assert result.exit_code == 0

    def test_markup_like_names(self, tmp_path: Path):
        f = write_text(tmp_path / "x[" / "y].txt", f"y{ZWSP}\n")
        write_text(tmp_path / "[b]" / "z.txt", f"z{ZWSP}\n")
        result = runner.invoke(app, ["clean", str(tmp_path), "--verbose"])
        assert result.exit_code == 0
        assert read_text(f) == "y\n"
        assert "y].txt" in result.output

    def test_markup_like_root_dry_run(self, tmp_path: Path):
        root = tmp_path / "[/x]"
        write_text(root / "a.txt", f"a{ZWSP}\n")
        result = runner.invoke(app, ["clean", str(root), "--dry-run", "--verbose"])
        assert result.exit_code == 0
        assert "Would clean" in result.output


class TestExitCodes:
    def test_missing_root(self, tmp_path: Path):
        result = runner.invoke(app, ["clean", str(tmp_path / "nope")])
        assert result.exit_code == 2

    def test_bad_format(self, tmp_path: Path):
        result = runner.invoke(app, ["clean", str(tmp_path), "--format", "xml"])
        assert result.exit_code == 2

    def test_unwritable_root(self, sample_tree: Path, monkeypatch):
        monkeypatch.setattr(PermissionProbe, "_probe", lambda self, path: False)
        result = runner.invoke(app, ["clean", str(sample_tree)])
        assert result.exit_code == 2
        assert read_text(sample_tree / "a.txt") == f"h{ZWSP}ello\r\n"

    def test_unwritable_root_dry_run_ok(self, sample_tree: Path, monkeypatch):
        monkeypatch.setattr(PermissionProbe, "_probe", lambda self, path: False)
        result = runner.invoke(app, ["clean", str(sample_tree), "--dry-run"])
        assert result.exit_code == 0

    def test_missing_markup_like_root(self, tmp_path: Path):
        result = runner.invoke(app, ["clean", str(tmp_path / "[/gone]")])
        assert result.exit_code == 2

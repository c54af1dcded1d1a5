"""Tests for ignore-pattern loading and matching."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from glyphscrub.scanner.ignore import IgnoreRules, is_excluded, matching_pattern, parse_patterns


class TestParsePatterns:
    def test_comments_and_blanks_skipped(self):
        text = "# comment\n\n*.log\n   \nbuild\n"
        assert parse_patterns(text) == ("*.log", "build")

    def test_whitespace_trimmed(self):
        assert parse_patterns("  *.tmp  \n\tdist\t\n") == ("*.tmp", "dist")

    def test_file_order_kept(self):
        assert parse_patterns("b\na\nc\n") == ("b", "a", "c")

    def test_crlf_file(self):
        assert parse_patterns("*.log\r\n*.tmp\r\n") == ("*.log", "*.tmp")


class TestIsExcluded:
    def test_star(self):
        assert is_excluded("b.log", ["*.log"]) is True
        assert is_excluded("b.txt", ["*.log"]) is False

    def test_star_crosses_separators(self):
        assert is_excluded("sub/b.log", ["*.log"]) is True

    def test_question_mark(self):
        assert is_excluded("a1.txt", ["a?.txt"]) is True
        assert is_excluded("a12.txt", ["a?.txt"]) is False

    def test_character_class(self):
        assert is_excluded("v2", ["v[0-9]"]) is True
        assert is_excluded("vx", ["v[0-9]"]) is False

    def test_no_patterns(self):
        assert is_excluded("anything", []) is False

    def test_first_match_in_load_order(self):
        assert matching_pattern("build/a.log", ["build*", "*.log"]) == "build*"

    @pytest.mark.skipif(os.name == "nt", reason="Windows matching is case-insensitive")
    def test_case_sensitive_on_posix(self):
        assert is_excluded("A.LOG", ["*.log"]) is False


class TestIgnoreRules:
    def test_missing_file_is_empty(self, tmp_path: Path):
        assert IgnoreRules().load(tmp_path) == ()

    def test_loads_gitignore(self, tmp_path: Path):
        (tmp_path / ".gitignore").write_text("# c\n*.log\nbuild\n")
        assert IgnoreRules().load(tmp_path) == ("*.log", "build")

    def test_cached_per_directory(self, tmp_path: Path):
        ignore = tmp_path / ".gitignore"
        ignore.write_text("*.log\n")
        rules = IgnoreRules()
        first = rules.load(tmp_path)
        ignore.write_text("*.txt\n")
        assert rules.load(tmp_path) == first
        assert len(rules) == 1

    def test_separate_instances_do_not_share(self, tmp_path: Path):
        ignore = tmp_path / ".gitignore"
        ignore.write_text("*.log\n")
        IgnoreRules().load(tmp_path)
        ignore.write_text("*.txt\n")
        assert IgnoreRules().load(tmp_path) == ("*.txt",)

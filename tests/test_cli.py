"""Tests for the command line interface."""

from __future__ import annotations

import json
import logging
import os

import pytest
from click.testing import CliRunner

from ls2.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestUsage:
    def test_no_arguments(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 1
        assert result.output == "Usage: ls2 <path> [exact-match-pattern]\n"

    def test_too_many_arguments(self, runner, sample_tree):
        result = runner.invoke(main, [str(sample_tree), "a", "b"])
        assert result.exit_code == 1
        assert result.output.startswith("Usage: ls2 <path> [exact-match-pattern]")


class TestListMode:
    def test_lists_tree(self, runner, sample_tree):
        result = runner.invoke(main, [str(sample_tree)])
        assert result.exit_code == 0
        assert sorted(result.output.splitlines()) == sorted([
            "a.txt (10 bytes)",
            "sub/ (directory)",
            "    b.txt (20 bytes)",
            "    deep/ (directory)",
            "        c.txt (30 bytes)",
        ])

    def test_empty_directory(self, runner, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(main, [str(empty)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_missing_path_is_not_fatal(self, runner, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            result = runner.invoke(main, [str(tmp_path / "missing")])

        assert result.exit_code == 0
        assert result.output == ""
        assert "Cannot open directory" in caplog.text

    def test_human_flag(self, runner, tmp_path):
        (tmp_path / "d").mkdir()
        (tmp_path / "d" / "f").write_bytes(b"x" * 1536)
        result = runner.invoke(main, ["--human", str(tmp_path / "d")])
        assert result.output == "f (1.5 KB)\n"

    def test_settings_file_applies(self, runner, tmp_path, isolate_config, sample_tree):
        config = isolate_config / "ls2"
        config.mkdir()
        (config / "settings.json").write_text(
            json.dumps({"output": {"indent_width": 2, "human_sizes": True}})
        )

        result = runner.invoke(main, [str(sample_tree / "sub")])
        assert "  c.txt (30 B)" in result.output.splitlines()


class TestSearchMode:
    def test_search_output(self, runner, sample_tree):
        result = runner.invoke(main, [str(sample_tree), "b.txt"])
        root = str(sample_tree)

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Looking for: b.txt",
            f"{root}/",
            f"    {root}/sub/",
            f"    {root}/sub/b.txt",
        ]

    def test_no_matches_exits_zero(self, runner, sample_tree):
        result = runner.invoke(main, [str(sample_tree), "nothing"])
        assert result.exit_code == 0
        assert result.output == "Looking for: nothing\n"

    def test_missing_path(self, runner, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            result = runner.invoke(main, [str(tmp_path / "missing"), "x"])

        assert result.exit_code == 0
        assert result.output == "Looking for: x\n"
        assert "Cannot open directory" in caplog.text


class TestUndecodableNames:
    """Names that are not valid UTF-8 are printed as their raw bytes."""

    @pytest.fixture
    def raw_root(self, tmp_path):
        root = tmp_path / "r"
        root.mkdir()
        return root

    def test_list_mode(self, runner, raw_root):
        with open(os.path.join(os.fsencode(raw_root), b"bad\xff"), "wb") as f:
            f.write(b"xyz")

        result = runner.invoke(main, [str(raw_root)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"bad\xff (3 bytes)\n"

    def test_search_mode(self, runner, raw_root):
        bad_dir = os.path.join(os.fsencode(raw_root), b"dir\xff")
        os.mkdir(bad_dir)
        with open(os.path.join(bad_dir, b"k"), "wb"):
            pass

        result = runner.invoke(main, [str(raw_root), "k"])

        root = os.fsencode(raw_root)
        assert result.exit_code == 0
        assert result.stdout_bytes == (
            b"Looking for: k\n"
            + root + b"/\n"
            + b"    " + root + b"/dir\xff/\n"
            + b"    " + root + b"/dir\xff/k\n"
        )

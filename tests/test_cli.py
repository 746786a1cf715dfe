"""Tests for the json_compare.main command-line explorer."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

# Path to the module
CLI_MODULE = "json_compare.main"


def run_cli(*args: str) -> subprocess.CompletedProcess:
    """Run the explorer with the given arguments."""
    return subprocess.run(
        [sys.executable, "-m", CLI_MODULE, *args],
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent,
    )


class TestCLIBasic:
    """Basic CLI functionality tests."""

    def test_help_flag(self):
        """--help should show usage."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_missing_command(self):
        """No sub-command prints help and fails."""
        result = run_cli()
        assert result.returncode == 1

    def test_file_not_found_error(self, right_file):
        """Non-existent file should error with message."""
        result = run_cli("diff", "/nonexistent/file.json", str(right_file))
        assert result.returncode == 1
        assert "not found" in result.stderr.lower()


class TestDiffCommand:
    """Tests for the diff sub-command."""

    def test_table_output(self, left_file, right_file):
        result = run_cli("diff", str(left_file), str(right_file))

        assert result.returncode == 0
        assert "$.version" in result.stdout
        assert "$.tags[1]" in result.stdout
        assert "(absent)" in result.stdout
        assert "Found 3 differences" in result.stdout

    def test_json_output(self, left_file, right_file):
        result = run_cli("diff", str(left_file), str(right_file), "--json")

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data[0] == {"path": "$.version", "kind": "changed", "leftValue": 1, "rightValue": 2}
        assert data[1] == {"path": "$.tags[1]", "kind": "removed", "leftValue": "b"}
        assert data[2] == {"path": "$.meta.active", "kind": "added", "rightValue": True}

    def test_identical(self, left_file):
        result = run_cli("diff", str(left_file), str(left_file))
        assert result.returncode == 0
        assert "identical" in result.stdout

    def test_invalid_document(self, broken_file, right_file):
        result = run_cli("diff", str(broken_file), str(right_file))
        assert result.returncode == 1
        assert "not valid JSON" in result.stderr


class TestPathsCommand:
    def test_display_paths(self, left_file, right_file):
        result = run_cli("paths", str(left_file), str(right_file))
        assert result.returncode == 0
        assert result.stdout.splitlines() == ["version", "tags > 1", "meta > active"]

    def test_root_difference(self, write_json):
        left = write_json("a.json", "1")
        right = write_json("b.json", "2")
        result = run_cli("paths", str(left), str(right))
        assert result.stdout.strip() == "(root)"


class TestAlignCommand:
    def test_markers(self, left_file, right_file):
        result = run_cli("align", str(left_file), str(right_file), "--width", "30")

        assert result.returncode == 0
        lines = result.stdout.splitlines()
        assert any(" + " in line and '"active": true' in line for line in lines)
        assert any(" ~ " in line and '"version"' in line for line in lines)

    def test_row_count_covers_both_sides(self, write_json):
        left = write_json("a.json", {"a": 1})
        right = write_json("b.json", {"a": 1, "b": 2})
        result = run_cli("align", str(left), str(right))
        assert len(result.stdout.splitlines()) == 4


class TestLocateCommand:
    def test_found(self, left_file):
        result = run_cli("locate", str(left_file), "$.tags[1]")

        assert result.returncode == 0
        first, second = result.stdout.splitlines()
        assert "(line 4, column 17)" in first
        assert second == '"b"'

    def test_expected_value(self, left_file):
        result = run_cli("locate", str(left_file), "$.meta.owner", "--value", '"ops"')
        assert result.returncode == 0
        assert result.stdout.splitlines()[1] == '"ops"'

    def test_stale_value(self, left_file):
        result = run_cli("locate", str(left_file), "$.version", "--value", "2")
        assert result.returncode == 1
        assert "not found" in result.stdout

    def test_bad_value(self, left_file):
        result = run_cli("locate", str(left_file), "$.version", "--value", "{oops")
        assert result.returncode == 1
        assert "not valid JSON" in result.stderr

    def test_verbose_logs_reason(self, left_file):
        result = run_cli("-v", "locate", str(left_file), "$.nothing")
        assert result.returncode == 1
        assert "does not resolve" in result.stderr


class TestSearchCommand:
    def test_hits(self, left_file, right_file):
        result = run_cli("search", str(left_file), str(right_file), "OWNER")

        assert result.returncode == 0
        assert "left,right" in result.stdout
        assert "Found 1 matching rows" in result.stdout

    def test_no_hits(self, left_file, right_file):
        result = run_cli("search", str(left_file), str(right_file), "zzz")
        assert "Found 0 matching rows" in result.stdout

"""Tests for path building, parsing and resolving."""

from __future__ import annotations

import pytest

from json_compare.diff_engine import (
    MISSING,
    IndexStep,
    PropertyStep,
    child_index_path,
    child_key_path,
    format_path,
    parent_path,
    parse_path,
    resolve_path,
)


class TestBuildPath:
    """Child paths."""

    def test_key_under_root(self):
        assert child_key_path("$", "a") == "$.a"
        assert child_key_path("", "a") == "$.a"

    def test_key_under_nested(self):
        assert child_key_path("$.a[0]", "b") == "$.a[0].b"

    def test_index(self):
        assert child_index_path("$", 1) == "$[1]"
        assert child_index_path("$.a", 0) == "$.a[0]"
        assert child_index_path("", 2) == "$[2]"

    def test_empty_key_reads_back_as_root(self):
        """Keys are not quoted, so an empty key's path parses to no steps."""
        assert child_key_path("$", "") == "$."
        assert parse_path("$.") == []


class TestParsePath:
    """Path strings to steps."""

    def test_mixed(self):
        assert parse_path("$.a[2].b") == [PropertyStep("a"), IndexStep(2), PropertyStep("b")]

    def test_root(self):
        assert parse_path("$") == []
        assert parse_path("") == []

    def test_without_root_prefix(self):
        assert parse_path("a.b") == [PropertyStep("a"), PropertyStep("b")]

    def test_consecutive_indices(self):
        assert parse_path("$[0][1]") == [IndexStep(0), IndexStep(1)]

    def test_non_integer_bracket_is_skipped(self):
        assert parse_path("$.a[x].b") == [PropertyStep("a"), PropertyStep("b")]

    def test_bracket_whitespace(self):
        assert parse_path("$.a[ 3 ]") == [PropertyStep("a"), IndexStep(3)]

    def test_step_kinds(self):
        assert [step.kind for step in parse_path("$.a[0]")] == ["property", "index"]


class TestResolvePath:
    """Walking parsed values."""

    DOC = {"a": {"b": [10, {"c": None}]}, "list": [1, 2]}

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("$", DOC),
            ("$.a.b[0]", 10),
            ("$.a.b[1].c", None),
            ("$.list[1]", 2),
        ],
    )
    def test_resolves(self, path, expected):
        assert resolve_path(self.DOC, parse_path(path)) == expected

    @pytest.mark.parametrize(
        "path",
        ["$.x", "$.list[2]", "$.list[-1]", "$.a[0]", "$.list.a", "$.a.b[1].c.d"],
    )
    def test_missing(self, path):
        assert resolve_path(self.DOC, parse_path(path)) is MISSING


class TestParentPath:
    """Containing paths."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("$.items[3]", "$.items"),
            ("$.meta.name", "$.meta"),
            ("$.name", "$"),
            ("$[0]", "$"),
            ("$.a[0][1]", "$.a[0]"),
            ("$", "$"),
        ],
    )
    def test_parent(self, path, expected):
        assert parent_path(path) == expected


class TestFormatPath:
    """Display form."""

    def test_nested(self):
        assert format_path("$.meta.tags[0]") == "meta > tags > 0"

    def test_root_index(self):
        assert format_path("$[1].a") == "1 > a"

    def test_root(self):
        assert format_path("$") == ""

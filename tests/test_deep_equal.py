"""Tests for structural equality."""

from __future__ import annotations

import copy

import pytest

from json_compare.diff_engine import deep_equal, scalar_equal


class TestScalarEqual:
    @pytest.mark.parametrize(
        "a,b",
        [(1, 1), (1, 1.0), ("x", "x"), (None, None), (True, True), (False, False)],
    )
    def test_equal(self, a, b):
        assert scalar_equal(a, b)

    @pytest.mark.parametrize(
        "a,b",
        [(True, 1), (0, False), (None, 0), ("", None), ("1", 1), (True, False)],
    )
    def test_not_equal(self, a, b):
        assert not scalar_equal(a, b)


class TestDeepEqual:
    def test_nested_document_equals_copy(self, nested_document):
        assert deep_equal(nested_document, copy.deepcopy(nested_document))

    def test_key_order_ignored(self):
        assert deep_equal({"a": 1, "b": [1]}, {"b": [1], "a": 1})

    def test_array_order_matters(self):
        assert not deep_equal([1, 2], [2, 1])

    def test_extra_key(self):
        assert not deep_equal({"a": 1}, {"a": 1, "b": None})

    def test_different_lengths(self):
        assert not deep_equal([1], [1, 1])

    def test_container_kinds(self):
        assert not deep_equal({}, [])
        assert not deep_equal([], None)
        assert not deep_equal({"a": 1}, "a")

    def test_bool_inside_containers(self):
        assert not deep_equal({"a": [1]}, {"a": [True]})


class TestDeepNesting:
    """Nesting depth is not limited by the interpreter's recursion limit."""

    @staticmethod
    def nest(value, depth):
        for _ in range(depth):
            value = {"a": [value]}
        return value

    def test_equal(self):
        assert deep_equal(self.nest(1, 2000), self.nest(1, 2000))

    def test_innermost_differs(self):
        assert not deep_equal(self.nest(1, 2000), self.nest(True, 2000))

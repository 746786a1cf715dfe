"""Tests for viewer settings and the wrap-around cursor."""

from __future__ import annotations

import pytest

from json_compare.tui.state import CycleCursor, ViewerSettings


class TestCycleCursor:
    """next/prev wrap at both ends."""

    def test_wraps_forward(self):
        cursor = CycleCursor(3)
        assert cursor.current == 0
        assert [cursor.next() for _ in range(3)] == [1, 2, 0]

    def test_wraps_backward(self):
        cursor = CycleCursor(3)
        assert cursor.prev() == 2
        assert cursor.prev() == 1

    def test_empty(self):
        cursor = CycleCursor()
        assert cursor.current == -1
        assert cursor.next() == -1
        assert cursor.prev() == -1

    def test_select(self):
        cursor = CycleCursor(4)
        assert cursor.select(3) == 3
        assert cursor.select(9) == 3
        assert cursor.select(-1) == 3

    def test_reset_clamps(self):
        cursor = CycleCursor(5)
        cursor.select(4)
        assert cursor.reset(2) == 1
        assert cursor.count == 2

    def test_reset_keeps_position(self):
        cursor = CycleCursor(5)
        cursor.select(2)
        assert cursor.reset(6) == 2

    def test_reset_to_start(self):
        cursor = CycleCursor(5)
        cursor.select(3)
        assert cursor.reset(5, keep_position=False) == 0

    def test_reset_to_empty(self):
        cursor = CycleCursor(2)
        assert cursor.reset(0) == -1


class TestViewerSettings:
    def test_defaults(self):
        settings = ViewerSettings()
        assert settings.indent == 2
        assert settings.start_mode == "edit"

    def test_bad_mode(self):
        with pytest.raises(ValueError, match="Unknown mode"):
            ViewerSettings(start_mode="split")

    def test_negative_indent(self):
        with pytest.raises(ValueError):
            ViewerSettings(indent=-1)

    def test_frozen(self):
        settings = ViewerSettings()
        with pytest.raises(AttributeError):
            settings.indent = 4

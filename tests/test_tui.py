"""Integration tests for the Textual viewer.

Each test drives the app headlessly with App.run_test() and inspects the
diff screen's state after simulated key presses.
"""

from __future__ import annotations

import asyncio

from textual.widgets import ContentSwitcher, Input

from json_compare.diff_engine import Side
from json_compare.tui.app import JsonDiffApp
from json_compare.tui.state import ViewerSettings
from json_compare.tui.views.diff_screen import ALIGNED_VIEW, EDIT_VIEW, DiffScreen
from json_compare.tui.widgets import AlignedDiffView, DiffBlockList, DiffDetailModal, JsonEditorPane


def run_app(app: JsonDiffApp, scenario) -> None:
    """Run ``scenario(pilot, screen)`` against a mounted app."""

    async def _run() -> None:
        async with app.run_test(size=(160, 48)) as pilot:
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, DiffScreen)
            await scenario(pilot, screen)

    asyncio.run(_run())


def highlighted(screen: DiffScreen, side: Side) -> str | None:
    editor = screen.query_one(f"#{side.value}-editor", JsonEditorPane)
    if editor.highlight_range is None:
        return None
    return editor.highlight_range.slice(editor.text)


class TestDiffScreenStartup:
    """State right after the documents are loaded."""

    def test_first_difference_selected(self, left_file, right_file):
        async def scenario(pilot, screen):
            assert [r.path for r in screen.comparison.diffs] == [
                "$.version",
                "$.tags[1]",
                "$.meta.active",
            ]
            assert screen.active_diff.path == "$.version"
            assert highlighted(screen, Side.LEFT) == "1"
            assert highlighted(screen, Side.RIGHT) == "2"
            assert screen.query_one(DiffBlockList).row_count == 3
            assert screen.mode == "edit"

        run_app(JsonDiffApp(str(left_file), str(right_file)), scenario)

    def test_start_in_view_mode(self, left_file, right_file):
        async def scenario(pilot, screen):
            assert screen.mode == "view"
            assert screen.query_one(ContentSwitcher).current == ALIGNED_VIEW
            assert screen.query_one(AlignedDiffView).row_count == len(screen.alignment)

        settings = ViewerSettings(start_mode="view")
        run_app(JsonDiffApp(str(left_file), str(right_file), settings), scenario)

    def test_unreadable_file_shows_empty_pane(self, tmp_path, right_file):
        async def scenario(pilot, screen):
            assert not screen.comparison.can_compare
            assert screen.active_diff is None

        run_app(JsonDiffApp(str(tmp_path / "missing.json"), str(right_file)), scenario)


class TestDiffNavigation:
    """Stepping through differences wraps around."""

    def test_next_and_prev(self, left_file, right_file):
        async def scenario(pilot, screen):
            await pilot.press("f7")
            assert screen.active_diff.path == "$.tags[1]"
            assert highlighted(screen, Side.LEFT) == '"b"'
            assert highlighted(screen, Side.RIGHT) == "]"

            await pilot.press("f7")
            assert screen.active_diff.path == "$.meta.active"
            assert highlighted(screen, Side.RIGHT) == "true"
            assert highlighted(screen, Side.LEFT) == "}"

            await pilot.press("f7")
            assert screen.active_diff.path == "$.version"

            await pilot.press("shift+f7")
            assert screen.active_diff.path == "$.meta.active"

        run_app(JsonDiffApp(str(left_file), str(right_file)), scenario)

    def test_detail_modal(self, left_file, right_file):
        async def scenario(pilot, screen):
            await pilot.press("f4")
            await pilot.pause()
            assert isinstance(pilot.app.screen, DiffDetailModal)
            assert pilot.app.screen.record.path == "$.version"

            await pilot.press("escape")
            await pilot.pause()
            assert pilot.app.screen is screen

        run_app(JsonDiffApp(str(left_file), str(right_file)), scenario)


class TestEditing:
    """Edits re-run the comparison."""

    def test_edit_removes_differences(self, left_file, right_file, left_text):
        async def scenario(pilot, screen):
            editor = screen.query_one("#right-editor", JsonEditorPane)
            editor.replace(left_text, (0, 0), editor.document.end)
            await pilot.pause()

            assert screen.comparison.is_identical
            assert screen.active_diff is None
            assert screen.query_one(DiffBlockList).row_count == 0

        run_app(JsonDiffApp(str(left_file), str(right_file)), scenario)

    def test_invalid_edit_keeps_running(self, left_file, right_file):
        async def scenario(pilot, screen):
            editor = screen.query_one("#left-editor", JsonEditorPane)
            editor.replace("{", (0, 0), editor.document.end)
            await pilot.pause()

            assert screen.comparison.error is not None
            assert screen.comparison.diffs == []

        run_app(JsonDiffApp(str(left_file), str(right_file)), scenario)


class TestModesAndSearch:
    """View mode toggling and aligned-view search."""

    def test_toggle_mode(self, left_file, right_file):
        async def scenario(pilot, screen):
            switcher = screen.query_one(ContentSwitcher)
            await pilot.press("f2")
            assert screen.mode == "view"
            assert switcher.current == ALIGNED_VIEW

            await pilot.press("f2")
            assert screen.mode == "edit"
            assert switcher.current == EDIT_VIEW

        run_app(JsonDiffApp(str(left_file), str(right_file)), scenario)

    def test_search_switches_to_view_mode(self, left_file, right_file):
        async def scenario(pilot, screen):
            await pilot.press("ctrl+f")
            assert isinstance(screen.focused, Input)

            await pilot.press(*"owner")
            await pilot.pause()

            assert screen.mode == "view"
            assert len(screen.search_hits) == 1
            assert screen.search_hits[0].sides == (Side.LEFT, Side.RIGHT)

        run_app(JsonDiffApp(str(left_file), str(right_file)), scenario)

    def test_next_match_wraps(self, left_file, right_file):
        async def scenario(pilot, screen):
            await pilot.press("ctrl+f")
            await pilot.press(*"widget")
            await pilot.pause()
            assert len(screen.search_hits) == 1

            await pilot.press("f3")
            assert screen.query_one(AlignedDiffView).cursor_row == screen.search_hits[0].row

        run_app(JsonDiffApp(str(left_file), str(right_file)), scenario)

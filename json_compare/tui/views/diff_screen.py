"""
Diff Screen for editing and comparing two JSON documents.

Edit mode shows both raw texts in editors with the selected difference
highlighted. View mode shows the pretty-printed texts aligned row by row.
The difference list below is shared by both modes.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import ContentSwitcher, Footer, Header, Input, Static, TextArea

from json_compare.diff_engine import (
    AlignmentResult,
    Comparison,
    DiffRecord,
    SearchHit,
    Side,
    align,
    aligned_row_for_diff,
    compare_documents,
    pretty_print,
    resolve_highlight,
    search_alignment,
)
from json_compare.tui.mixins import DualPaneMixin, VimNavigationMixin
from json_compare.tui.state import CycleCursor, ViewerSettings
from json_compare.tui.widgets import (
    AlignedDiffView,
    DiffBlockList,
    DiffDetailModal,
    JsonEditorPane,
)

EDIT_VIEW = "edit-view"
ALIGNED_VIEW = "aligned-view"


class DiffScreen(DualPaneMixin, VimNavigationMixin, Screen):
    """Two JSON documents, their differences and an aligned view.

    Every edit to either document re-runs the comparison. The selected
    difference and the current search hit are tracked with CycleCursor so
    that stepping past either end wraps around.
    """

    CSS = """
    DiffScreen {
        layout: vertical;
    }

    #control-bar {
        height: 3;
        padding: 0 1;
    }

    #diff-status {
        width: 1fr;
        content-align: left middle;
    }

    #search-input {
        width: 40;
    }

    #search-status {
        width: 16;
        content-align: right middle;
    }

    #main-switcher {
        height: 2fr;
    }

    #edit-view {
        height: 1fr;
    }

    #left-panel, #right-panel {
        width: 50%;
    }

    #left-panel.active, #right-panel.active {
        border: solid $secondary;
    }

    #left-editor, #right-editor {
        height: 1fr;
    }

    #aligned-view {
        height: 1fr;
    }

    #diff-list {
        height: 1fr;
        border-top: solid $primary;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("f7", "next_diff", "Next Diff"),
        Binding("shift+f7", "prev_diff", "Prev Diff"),
        Binding("n", "next_diff", "Next Diff", show=False),
        Binding("p", "prev_diff", "Prev Diff", show=False),
        Binding("f2", "toggle_mode", "Edit/View"),
        Binding("ctrl+f", "focus_search", "Search", priority=True),
        Binding("f3", "next_match", "Next Match"),
        Binding("shift+f3", "prev_match", "Prev Match", show=False),
        Binding("f4", "show_detail", "Details"),
        Binding("escape", "leave_search", "Back", show=False),
    ]

    def __init__(
        self,
        left_text: str,
        right_text: str,
        settings: ViewerSettings | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the DiffScreen.

        Args:
            left_text: Initial text of the left document.
            right_text: Initial text of the right document.
            settings: Indent and start mode; defaults apply when omitted.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._initial_left = left_text
        self._initial_right = right_text
        self._settings = settings or ViewerSettings()
        self._mode = self._settings.start_mode
        self._comparison = Comparison()
        self._left_pretty = ""
        self._right_pretty = ""
        self._alignment = AlignmentResult()
        self._diff_cursor = CycleCursor()
        self._search_hits: list[SearchHit] = []
        self._search_cursor = CycleCursor()

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def comparison(self) -> Comparison:
        return self._comparison

    @property
    def alignment(self) -> AlignmentResult:
        return self._alignment

    @property
    def search_hits(self) -> list[SearchHit]:
        return self._search_hits

    @property
    def active_diff(self) -> DiffRecord | None:
        """The selected difference, or None when there are none."""
        index = self._diff_cursor.current
        if index < 0:
            return None
        return self._comparison.diffs[index]

    def compose(self) -> ComposeResult:
        """Compose the control bar, the two modes and the difference list."""
        yield Header()
        with Horizontal(id="control-bar"):
            yield Static("", id="diff-status")
            yield Input(placeholder="Search aligned view...", id="search-input")
            yield Static("", id="search-status")
        with ContentSwitcher(id="main-switcher", initial=self._switcher_id()):
            with Horizontal(id=EDIT_VIEW):
                with Vertical(id="left-panel", classes="active"):
                    yield JsonEditorPane(self._initial_left, side=Side.LEFT, id="left-editor")
                with Vertical(id="right-panel", classes="inactive"):
                    yield JsonEditorPane(self._initial_right, side=Side.RIGHT, id="right-editor")
            yield AlignedDiffView(id=ALIGNED_VIEW)
        yield DiffBlockList(id="diff-list")
        yield Footer()

    def on_mount(self) -> None:
        """Run the first comparison and focus the left editor."""
        self._recompute(highlight=True)
        self._update_panel_styles()
        self._focus_active_widget()

    # ============== Comparison ==============

    def _editor(self, side: Side) -> JsonEditorPane:
        return self.query_one(f"#{side.value}-editor", JsonEditorPane)

    def _recompute(self, highlight: bool = False) -> None:
        """Re-run the comparison and alignment from the editors' texts.

        Args:
            highlight: Also move both editors to the selected difference.
                Left off while typing so the cursor stays where the user is.
        """
        left_text = self._editor(Side.LEFT).text
        right_text = self._editor(Side.RIGHT).text

        self._comparison = compare_documents(left_text, right_text)
        if self._comparison.error:
            self.notify(self._comparison.error, severity="error", timeout=3)

        self._diff_cursor.reset(len(self._comparison.diffs))
        self.query_one(DiffBlockList).load_diffs(self._comparison.diffs)
        self._update_status()

        self._left_pretty = pretty_print(left_text, self._settings.indent)
        self._right_pretty = pretty_print(right_text, self._settings.indent)
        self._alignment = align(self._left_pretty, self._right_pretty)
        self.query_one(AlignedDiffView).load_alignment(self._alignment)
        self._refresh_search(reset=False)

        if highlight:
            self._show_active_diff()

    def _update_status(self) -> None:
        comparison = self._comparison
        if not comparison.can_compare:
            status = "Enter JSON in both panes to compare"
        elif comparison.error:
            status = "Invalid JSON"
        elif comparison.is_identical:
            status = "Documents are identical"
        else:
            count = len(comparison.diffs)
            current = self._diff_cursor.current + 1
            status = f"Difference {current} of {count}"
        self.query_one("#diff-status", Static).update(status)

    def _show_active_diff(self) -> None:
        """Highlight the selected difference in every view."""
        record = self.active_diff
        left_editor = self._editor(Side.LEFT)
        right_editor = self._editor(Side.RIGHT)

        if record is None:
            left_editor.highlight(None)
            right_editor.highlight(None)
            return

        left_editor.highlight(resolve_highlight(left_editor.text, record, Side.LEFT))
        right_editor.highlight(resolve_highlight(right_editor.text, record, Side.RIGHT))

        row = aligned_row_for_diff(self._left_pretty, self._right_pretty, self._alignment, record)
        self.query_one(AlignedDiffView).scroll_to_row(row)
        self.query_one(DiffBlockList).select_index(self._diff_cursor.current)
        self._update_status()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Re-compare whenever either document is edited."""
        self._recompute()

    # ============== Difference navigation ==============

    def action_next_diff(self) -> None:
        if self._diff_cursor.count == 0:
            self.notify("No differences")
            return
        self._diff_cursor.next()
        self._show_active_diff()

    def action_prev_diff(self) -> None:
        if self._diff_cursor.count == 0:
            self.notify("No differences")
            return
        self._diff_cursor.prev()
        self._show_active_diff()

    def on_diff_block_list_diff_selected(self, message: DiffBlockList.DiffSelected) -> None:
        """Make the chosen list row the selected difference."""
        self._diff_cursor.select(message.index)
        self._show_active_diff()

    def action_show_detail(self) -> None:
        """Show both full values of the selected difference."""
        record = self.active_diff
        if record is None:
            self.notify("No difference selected", severity="warning")
            return
        self.app.push_screen(DiffDetailModal(record))

    # ============== Modes ==============

    def _switcher_id(self) -> str:
        return EDIT_VIEW if self._mode == "edit" else ALIGNED_VIEW

    def set_mode(self, mode: str) -> None:
        """Switch between "edit" and "view" mode."""
        if mode == self._mode:
            return
        self._mode = mode
        self.query_one(ContentSwitcher).current = self._switcher_id()
        self._focus_active_widget()

    def action_toggle_mode(self) -> None:
        self.set_mode("view" if self._mode == "edit" else "edit")

    def _focus_active_widget(self) -> None:
        """Focus the active editor in edit mode, the aligned view otherwise."""
        if self._mode == "view":
            self.query_one(AlignedDiffView).focus()
        else:
            self._editor(self._active_panel).focus()

    # ============== Search ==============

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_leave_search(self) -> None:
        if isinstance(self.focused, Input):
            self._focus_active_widget()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Search the aligned view as the query is typed."""
        if event.input.id != "search-input":
            return
        if event.value.strip():
            self.set_mode("view")
            self.query_one("#search-input", Input).focus()
        self._refresh_search(reset=True)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            self.action_next_match()

    def _refresh_search(self, reset: bool) -> None:
        """Re-run the search over the current alignment.

        Args:
            reset: Start again at the first hit (a new query). Otherwise the
                current hit is kept where the hit list still allows it.
        """
        query = self.query_one("#search-input", Input).value
        self._search_hits = search_alignment(self._alignment, query)
        self._search_cursor.reset(len(self._search_hits), keep_position=not reset)
        self._show_current_match()

    def _show_current_match(self) -> None:
        view = self.query_one(AlignedDiffView)
        current = self._search_cursor.current
        view.mark_search(self._search_hits, current)

        status = self.query_one("#search-status", Static)
        if not self.query_one("#search-input", Input).value.strip():
            status.update("")
        elif current < 0:
            status.update("No matches")
        else:
            status.update(f"{current + 1}/{len(self._search_hits)}")
            view.scroll_to_row(self._search_hits[current].row)

    def action_next_match(self) -> None:
        if self._search_cursor.count:
            self._search_cursor.next()
            self._show_current_match()

    def action_prev_match(self) -> None:
        if self._search_cursor.count:
            self._search_cursor.prev()
            self._show_current_match()

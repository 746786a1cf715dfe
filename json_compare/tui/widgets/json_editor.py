"""
JSON editor pane for one side of the comparison.

A TextArea holding the raw document text. The selected difference is shown
by selecting its character range and scrolling it into the middle of the
pane.
"""

from __future__ import annotations

from textual.widgets import TextArea
from textual.widgets.text_area import Selection

from json_compare.diff_engine import Position, Side, offset_to_line_col


class JsonEditorPane(TextArea):
    """Editable raw JSON text with a highlighted difference range.

    Attributes:
        side: Which compared document this pane edits.
        highlight_range: The range currently highlighted, if any.
    """

    def __init__(
        self,
        text: str = "",
        *,
        side: Side,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the editor pane.

        Args:
            text: Initial document text.
            side: Which compared document this pane edits.
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(
            text,
            soft_wrap=False,
            show_line_numbers=True,
            tab_behavior="focus",
            id=id,
            classes=classes,
        )
        self.side = side
        self.highlight_range: Position | None = None

    def highlight(self, position: Position | None) -> None:
        """Select ``position`` and scroll it into view; clear the selection for None."""
        self.highlight_range = position
        if position is None:
            self.selection = Selection.cursor(self.cursor_location)
            return

        start = offset_to_line_col(self.text, position.start)
        end = offset_to_line_col(self.text, position.end)
        self.move_cursor(start, center=True)
        self.selection = Selection(start, end)

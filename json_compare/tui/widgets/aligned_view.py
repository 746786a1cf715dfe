"""
Aligned two-column view of the pretty-printed documents.

Each DataTable row is one aligned row: the left line, the right line, and
background colors from the row status (removed, added, changed). Gap cells
are blank. Search hits are marked on the side that matched, and the
current hit is shown in reverse video.
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import DataTable

from json_compare.diff_engine import (
    AlignmentResult,
    RowStatus,
    SearchHit,
    Side,
    classify_rows,
)

# Background styles per row status for the side that holds content,
# and a fainter one for the gap cell opposite it
CONTENT_STYLES = {
    RowStatus.REMOVED: "on #5c1f24",
    RowStatus.ADDED: "on #1c4a30",
    RowStatus.CHANGED: "on #5c4a12",
}
GAP_STYLES = {
    RowStatus.REMOVED: "on #2a1416",
    RowStatus.ADDED: "on #12261b",
}
SEARCH_STYLE = "on #1f3a5c"
CURRENT_SEARCH_STYLE = "bold reverse"


class AlignedDiffView(DataTable):
    """DataTable showing an AlignmentResult row by row."""

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the aligned view.

        Args:
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(id=id, classes=classes, cursor_type="row", zebra_stripes=False)
        self._result = AlignmentResult()
        self._statuses: list[RowStatus] = []
        self._search_sides: dict[int, tuple[Side, ...]] = {}
        self._current_search_row: int | None = None

    @property
    def alignment(self) -> AlignmentResult:
        return self._result

    @property
    def statuses(self) -> list[RowStatus]:
        return self._statuses

    def load_alignment(self, result: AlignmentResult) -> None:
        """Replace the displayed rows with ``result``."""
        self._result = result
        self._statuses = classify_rows(result)
        self._search_sides = {}
        self._current_search_row = None
        self._render_rows()

    def mark_search(self, hits: list[SearchHit], current: int) -> None:
        """Mark search hits; ``current`` indexes into ``hits`` (-1 for none)."""
        self._search_sides = {hit.row: hit.sides for hit in hits}
        self._current_search_row = hits[current].row if 0 <= current < len(hits) else None
        self._render_rows()

    def scroll_to_row(self, row: int | None) -> None:
        """Move the cursor to ``row``, scrolling it into view."""
        if row is None or not 0 <= row < self.row_count:
            return
        self.move_cursor(row=row)

    def _ensure_columns(self) -> None:
        if not self.columns:
            self.add_column("#", key="row", width=5)
            self.add_column("Left", key="left")
            self.add_column("Right", key="right")

    def _render_rows(self) -> None:
        self._ensure_columns()
        cursor_row = self.cursor_row
        self.clear()

        for row, ((left, right), status) in enumerate(zip(self._result.rows(), self._statuses)):
            self.add_row(
                Text(str(row + 1), style="dim"),
                self._cell(left, status, Side.LEFT, row),
                self._cell(right, status, Side.RIGHT, row),
                key=str(row),
            )

        if 0 <= cursor_row < self.row_count:
            self.move_cursor(row=cursor_row, animate=False)

    def _cell(self, line: str | None, status: RowStatus, side: Side, row: int) -> Text:
        if line is None:
            return Text("", style=GAP_STYLES.get(status, ""))

        style = CONTENT_STYLES.get(status, "")
        if not style and side in self._search_sides.get(row, ()):
            style = SEARCH_STYLE
        if row == self._current_search_row and side in self._search_sides.get(row, ()):
            style = f"{style} {CURRENT_SEARCH_STYLE}".strip()
        return Text(line, style=style, no_wrap=True)

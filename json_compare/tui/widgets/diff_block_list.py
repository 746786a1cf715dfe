"""
Difference list widget.

One row per DiffRecord: the path in display form, a colored kind badge and
one-line previews of both values. Selecting a row (Enter or click) posts a
DiffSelected message with the record's index.
"""

from __future__ import annotations

import json
from typing import Any

from rich.text import Text
from textual.message import Message
from textual.widgets import DataTable

from json_compare.diff_engine import MISSING, DiffRecord, DiffType, format_path

# Maximum characters shown for a value preview
VALUE_PREVIEW_LIMIT = 40

KIND_STYLES = {
    DiffType.ADDED: "bold #a7f3d0 on #065f46",
    DiffType.REMOVED: "bold #fecdd3 on #881337",
    DiffType.CHANGED: "bold #fde68a on #78350f",
}


def preview_value(value: Any, limit: int = VALUE_PREVIEW_LIMIT) -> str:
    """
    One-line preview of a value for the list.

    Strings are shown as-is, other values as compact JSON, absent values
    as ``(empty)``.

    Examples:
        >>> preview_value({"a": 1})
        '{"a": 1}'
        >>> preview_value(MISSING)
        '(empty)'
    """
    if value is MISSING:
        return "(empty)"
    if isinstance(value, str):
        text = value
    else:
        try:
            text = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            text = str(value)
    text = text.replace("\n", "\\n")
    if len(text) > limit:
        return text[:limit - 3] + "..."
    return text


class DiffBlockList(DataTable):
    """DataTable listing the differences between the two documents."""

    class DiffSelected(Message):
        """Posted when a difference row is selected.

        Attributes:
            index: Index of the selected record in the list.
        """

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes, cursor_type="row", zebra_stripes=True)
        self._records: list[DiffRecord] = []

    @property
    def records(self) -> list[DiffRecord]:
        return self._records

    def load_diffs(self, records: list[DiffRecord]) -> None:
        """Replace the listed differences."""
        if not self.columns:
            self.add_column("#", key="idx", width=4)
            self.add_column("Path", key="path", width=36)
            self.add_column("Kind", key="kind", width=9)
            self.add_column("Left", key="left")
            self.add_column("Right", key="right")

        self._records = list(records)
        self.clear()
        for idx, record in enumerate(self._records):
            self.add_row(
                str(idx + 1),
                format_path(record.path) or "(root)",
                Text(f" {record.kind.value} ", style=KIND_STYLES[record.kind]),
                preview_value(record.left_value),
                preview_value(record.right_value),
                key=str(idx),
            )

    def select_index(self, index: int) -> None:
        """Move the cursor to ``index`` without posting DiffSelected."""
        if 0 <= index < self.row_count:
            self.move_cursor(row=index)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Translate row selection into a DiffSelected message."""
        event.stop()
        self.post_message(self.DiffSelected(event.cursor_row))

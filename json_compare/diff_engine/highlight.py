"""
Highlight and scroll targets for a selected difference.

Chains the locator with line arithmetic and the alignment maps:

    locate() -> offset -> line number -> aligned row

so a front end can select the difference in an editable pane and scroll
the aligned two-column view to the matching row.
"""

from __future__ import annotations

from json_compare.diff_engine.json_path import ROOT, parent_path
from json_compare.diff_engine.locator import locate
from json_compare.diff_engine.models import (
    MISSING,
    AlignmentResult,
    DiffRecord,
    Position,
    Side,
)


def offset_to_line_col(text: str, offset: int) -> tuple[int, int]:
    """
    Convert a character offset into a 0-based ``(line, column)`` pair.

    Examples:
        >>> offset_to_line_col("ab\\ncd", 4)
        (1, 1)
    """
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start


def resolve_highlight(text: str, record: DiffRecord, side: Side) -> Position | None:
    """
    Range to highlight for ``record`` in one side's editable text.

    When the value exists on this side it is located directly. When it is
    absent (an added or removed entry), the closing bracket of its parent
    container is highlighted instead; for top-level entries that is the
    last non-whitespace character of the document.

    Args:
        text: The exact text shown in the pane.
        record: The selected difference.
        side: Which pane ``text`` belongs to.

    Returns:
        The range to highlight, or None when nothing can be shown.
    """
    target = record.side_value(side)
    parent = parent_path(record.path)

    if parent == ROOT and target is MISSING:
        last_index = len(text.rstrip()) - 1
        if last_index < 0:
            return None
        return Position(last_index, last_index + 1)

    if target is not MISSING:
        return locate(text, record.path, target)

    parent_position = locate(text, parent)
    if parent_position is None:
        return None
    return Position(parent_position.end - 1, parent_position.end)


def aligned_row_for_diff(
    left_text: str,
    right_text: str,
    alignment: AlignmentResult,
    record: DiffRecord,
) -> int | None:
    """
    Aligned row to scroll to for ``record``.

    Args:
        left_text: The pretty-printed left text the alignment was built from.
        right_text: The pretty-printed right text the alignment was built from.
        alignment: ``align(left_text, right_text)``.
        record: The selected difference.

    Returns:
        The row index, or None when the value cannot be located.
    """
    if record.left_value is not MISSING:
        side, source, target = Side.LEFT, left_text, record.left_value
    else:
        side, source, target = Side.RIGHT, right_text, record.right_value

    position = locate(source, record.path, target)
    if position is None:
        return None

    line, _ = offset_to_line_col(source, position.start)
    line_map = alignment.line_map(side)
    if line >= len(line_map):
        return None
    return line_map[line]

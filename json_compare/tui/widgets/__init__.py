"""TUI widgets for the JSON Compare viewer."""

from json_compare.tui.widgets.aligned_view import AlignedDiffView
from json_compare.tui.widgets.diff_block_list import DiffBlockList, preview_value
from json_compare.tui.widgets.diff_detail_modal import DiffDetailModal
from json_compare.tui.widgets.json_editor import JsonEditorPane

__all__ = [
    # Panes
    "AlignedDiffView",
    "JsonEditorPane",
    # Difference list
    "DiffBlockList",
    "preview_value",
    # Detail modal
    "DiffDetailModal",
]

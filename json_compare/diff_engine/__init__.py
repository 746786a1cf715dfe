"""
Structural diff and text-alignment engine for JSON documents.

This package compares two JSON documents three ways: a tree diff of the
parsed values, an LCS line alignment of the serialized texts, and a
locator mapping a diff path back to a character range in the source.

Usage:
    from json_compare.diff_engine import align, diff, locate

    records = diff({"a": 1, "b": 2}, {"a": 1, "b": 3})
    print(records[0].path)  # "$.b"

    result = align(left_text, right_text)
    print(result.left_lines, result.right_lines)

    position = locate('{"a": {"b": 5}}', "$.a.b", 5)
    print(position.start, position.end)  # 12 13
"""

from json_compare.diff_engine.deep_equal import deep_equal, scalar_equal
from json_compare.diff_engine.documents import (
    DEFAULT_INDENT,
    Comparison,
    DocumentParseError,
    can_compare,
    compare_documents,
    parse_document,
    pretty_print,
    read_document,
)
from json_compare.diff_engine.highlight import (
    aligned_row_for_diff,
    offset_to_line_col,
    resolve_highlight,
)
from json_compare.diff_engine.json_path import (
    ROOT,
    IndexStep,
    PathStep,
    PropertyStep,
    child_index_path,
    child_key_path,
    format_path,
    parent_path,
    parse_path,
    resolve_path,
)
from json_compare.diff_engine.line_alignment import (
    align,
    alignment_token,
    classify_row,
    classify_rows,
)
from json_compare.diff_engine.locator import locate
from json_compare.diff_engine.models import (
    MISSING,
    AlignmentResult,
    DiffRecord,
    DiffType,
    Position,
    RowStatus,
    Side,
)
from json_compare.diff_engine.search import SearchHit, search_alignment
from json_compare.diff_engine.token_scanner import scan_value_end
from json_compare.diff_engine.tree_diff import diff

__all__ = [
    # Models
    "MISSING",
    "AlignmentResult",
    "DiffRecord",
    "DiffType",
    "Position",
    "RowStatus",
    "Side",
    # Tree diff
    "diff",
    "deep_equal",
    "scalar_equal",
    # Line alignment
    "align",
    "alignment_token",
    "classify_row",
    "classify_rows",
    # Paths and locator
    "ROOT",
    "IndexStep",
    "PathStep",
    "PropertyStep",
    "child_index_path",
    "child_key_path",
    "format_path",
    "parent_path",
    "parse_path",
    "resolve_path",
    "locate",
    "scan_value_end",
    # Highlight and search
    "aligned_row_for_diff",
    "offset_to_line_col",
    "resolve_highlight",
    "SearchHit",
    "search_alignment",
    # Documents
    "DEFAULT_INDENT",
    "Comparison",
    "DocumentParseError",
    "can_compare",
    "compare_documents",
    "parse_document",
    "pretty_print",
    "read_document",
]

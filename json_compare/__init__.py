"""
JSON Compare.

Compare two JSON documents: structural differences, a side-by-side aligned
line view, and exact source ranges for every difference.

Entry points:
    uv run python -m json_compare.main diff left.json right.json
    uv run python -m json_compare.tui.app left.json right.json
"""

"""
TUI JSON Compare Viewer.

A Textual-based terminal UI for editing two JSON documents side by side
and stepping through their structural differences.

Usage:
    python -m json_compare.tui.app left.json right.json --mode view

Components:
    - JsonDiffApp: Main application class
    - DiffScreen: Edit mode, aligned view mode and the difference list
    - DiffDetailModal: Full values of one difference
    - CycleCursor: Wrap-around selection used for differences and search hits
"""

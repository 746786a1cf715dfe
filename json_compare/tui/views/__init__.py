"""TUI views for the JSON Compare viewer."""

from json_compare.tui.views.diff_screen import DiffScreen

__all__ = ["DiffScreen"]

"""Mixins for the TUI application."""

from json_compare.tui.mixins.dual_pane import DualPaneMixin
from json_compare.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "DualPaneMixin",
    "VimNavigationMixin",
]

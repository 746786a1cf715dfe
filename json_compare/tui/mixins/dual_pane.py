"""
Dual Pane Mixin for left/right editor switching.

Provides consistent panel switching behavior for the diff screen:
- action_switch_panel(): Toggle between left and right panels
- action_focus_left(): Switch focus to the left panel
- action_focus_right(): Switch focus to the right panel
- _update_panel_styles(): Update active/inactive CSS classes on panels
- _focus_active_widget(): Abstract method subclasses must implement

Usage:
    class MyDualPaneScreen(DualPaneMixin, VimNavigationMixin, Screen):
        BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [...]

        def _focus_active_widget(self) -> None:
            ...
"""

from __future__ import annotations

from textual.binding import Binding
from textual.css.query import NoMatches

from json_compare.diff_engine import Side


class DualPaneMixin:
    """Mixin for screens with a left and a right panel.

    Subclasses must implement _focus_active_widget() to define how focus
    moves within the active panel.

    Class Attributes:
        DUAL_PANE_BINDINGS: Vim navigation plus panel switching bindings.
    """

    DUAL_PANE_BINDINGS = [
        # Vim navigation (j/k/g/G from VimNavigationMixin)
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
        # Panel switching
        Binding("ctrl+left", "focus_left", "Left Panel", show=False),
        Binding("ctrl+right", "focus_right", "Right Panel", show=False),
        Binding("tab", "switch_panel", "Switch Panel", show=True),
        Binding("q", "quit", "Quit", show=False),
    ]

    _active_panel: Side = Side.LEFT
    """Currently active panel."""

    @property
    def is_left_active(self) -> bool:
        return self._active_panel == Side.LEFT

    @property
    def is_right_active(self) -> bool:
        return self._active_panel == Side.RIGHT

    def action_switch_panel(self) -> None:
        """Toggle between left and right panels and move focus."""
        self._active_panel = Side.RIGHT if self._active_panel == Side.LEFT else Side.LEFT
        self._update_panel_styles()
        self._focus_active_widget()

    def action_focus_left(self) -> None:
        if self._active_panel != Side.LEFT:
            self._active_panel = Side.LEFT
            self._update_panel_styles()
        self._focus_active_widget()

    def action_focus_right(self) -> None:
        if self._active_panel != Side.RIGHT:
            self._active_panel = Side.RIGHT
            self._update_panel_styles()
        self._focus_active_widget()

    def action_quit(self) -> None:
        """Exit the application."""
        self.app.exit()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on #left-panel and #right-panel.

        Handles missing panels gracefully.
        """
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, side in [(left, Side.LEFT), (right, Side.RIGHT)]:
            if self._active_panel == side:
                panel.remove_class("inactive")
                panel.add_class("active")
            else:
                panel.remove_class("active")
                panel.add_class("inactive")

    def _focus_active_widget(self) -> None:
        """Focus the appropriate widget in the active panel."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _focus_active_widget()"
        )

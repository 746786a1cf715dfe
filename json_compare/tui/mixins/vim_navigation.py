"""
Vim Navigation Mixin for vim-style keybindings on tables.

Provides j/k/g/G navigation that delegates to the focused DataTable (the
aligned view or the difference list). Editors keep these keys for typing:
a focused TextArea consumes them before the screen bindings run.
"""

from __future__ import annotations

from textual.binding import Binding
from textual.widgets import DataTable


class VimNavigationMixin:
    """Mixin providing vim-style navigation for the focused DataTable.

    - j/k: Move cursor down/up
    - g: Jump to first row
    - G: Jump to last row
    """

    VIM_BINDINGS = [
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
    ]

    def _get_navigable_widget(self) -> DataTable | None:
        """Get the focused widget if it is a DataTable."""
        focused = self.focused
        if isinstance(focused, DataTable):
            return focused
        return None

    def action_vim_down(self) -> None:
        table = self._get_navigable_widget()
        if table is not None:
            table.action_cursor_down()

    def action_vim_up(self) -> None:
        table = self._get_navigable_widget()
        if table is not None:
            table.action_cursor_up()

    def action_vim_top(self) -> None:
        table = self._get_navigable_widget()
        if table is not None and table.row_count > 0:
            table.move_cursor(row=0)

    def action_vim_bottom(self) -> None:
        table = self._get_navigable_widget()
        if table is not None and table.row_count > 0:
            table.move_cursor(row=table.row_count - 1)

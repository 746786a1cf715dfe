"""
Presentation-layer state for the diff viewer.

The engine never owns "which difference is selected" or "which search hit
is current"; the screen keeps one CycleCursor for each.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_compare.diff_engine import DEFAULT_INDENT

MODES = ("edit", "view")


@dataclass(frozen=True)
class ViewerSettings:
    """Startup settings for the viewer, filled from the command line.

    Attributes:
        indent: Indent used to pretty-print both documents for the aligned view.
        start_mode: Initial mode, "edit" (two editors) or "view" (aligned rows).
    """

    indent: int = DEFAULT_INDENT
    start_mode: str = "edit"

    def __post_init__(self) -> None:
        if self.start_mode not in MODES:
            raise ValueError(f"Unknown mode: {self.start_mode}. Use 'edit' or 'view'.")
        if self.indent < 0:
            raise ValueError(f"Indent cannot be negative: {self.indent}")


class CycleCursor:
    """A wrap-around index into a list of ``count`` items.

    Examples:
        >>> cursor = CycleCursor(3)
        >>> cursor.prev()
        2
        >>> cursor.next()
        0
    """

    def __init__(self, count: int = 0) -> None:
        self._count = max(count, 0)
        self._index = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def current(self) -> int:
        """The current index, or -1 when there is nothing to point at."""
        if self._count == 0:
            return -1
        return min(self._index, self._count - 1)

    def next(self) -> int:
        if self._count:
            self._index = (self.current + 1) % self._count
        return self.current

    def prev(self) -> int:
        if self._count:
            self._index = (self.current - 1 + self._count) % self._count
        return self.current

    def select(self, index: int) -> int:
        """Jump to ``index`` (ignored when out of range)."""
        if 0 <= index < self._count:
            self._index = index
        return self.current

    def reset(self, count: int, *, keep_position: bool = True) -> int:
        """Point the cursor at a new list of ``count`` items.

        With ``keep_position`` the index is clamped to the new length,
        otherwise it restarts at 0.
        """
        self._count = max(count, 0)
        if not keep_position:
            self._index = 0
        elif self._count:
            self._index = min(self._index, self._count - 1)
        return self.current

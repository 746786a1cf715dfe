"""
Value types shared by the diff engine.

This module defines the records produced by the three engine algorithms:

    - DiffRecord: one structural difference, produced by ``diff()``
    - AlignmentResult: two gap-padded line columns, produced by ``align()``
    - Position: a half-open character range, produced by ``locate()``

All of them are frozen: every call builds fresh results and nothing in the
engine mutates them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator


class _Missing:
    """Sentinel type for a value that is absent on one side.

    JSON ``null`` parses to ``None``, so ``None`` cannot mean "not there".
    """

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self


MISSING: Any = _Missing()


class DiffType(str, Enum):
    """Kind of a structural difference."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class Side(str, Enum):
    """Which of the two compared documents a value belongs to."""

    LEFT = "left"
    RIGHT = "right"


class RowStatus(str, Enum):
    """Display status of one aligned row."""

    EQUAL = "equal"
    CHANGED = "changed"
    REMOVED = "removed"
    ADDED = "added"


@dataclass(frozen=True)
class DiffRecord:
    """A single difference between two JSON values.

    Attributes:
        path: Locator rooted at ``$`` (e.g. ``$.meta.updatedAt``, ``$.items[0]``).
        left_value: Value on the left (old) side, or MISSING.
        right_value: Value on the right (new) side, or MISSING.
        kind: ADDED, REMOVED or CHANGED.
    """

    path: str
    left_value: Any
    right_value: Any
    kind: DiffType

    def side_value(self, side: Side) -> Any:
        """Return the value recorded for ``side`` (MISSING when absent)."""
        return self.left_value if side == Side.LEFT else self.right_value

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict, omitting absent sides."""
        result: dict[str, Any] = {"path": self.path, "kind": self.kind.value}
        if self.left_value is not MISSING:
            result["leftValue"] = self.left_value
        if self.right_value is not MISSING:
            result["rightValue"] = self.right_value
        return result


@dataclass(frozen=True)
class Position:
    """Half-open character range ``[start, end)`` into an exact source text."""

    start: int
    end: int

    def slice(self, text: str) -> str:
        """Return the substring of ``text`` covered by this range."""
        return text[self.start:self.end]


@dataclass(frozen=True)
class AlignmentResult:
    """Two equal-length line columns plus original-line to row maps.

    Attributes:
        left_lines: Aligned left lines; ``None`` marks a gap row.
        right_lines: Aligned right lines; ``None`` marks a gap row.
        left_map: ``left_map[k]`` is the row holding original left line ``k``.
        right_map: ``right_map[k]`` is the row holding original right line ``k``.
    """

    left_lines: list[str | None] = field(default_factory=list)
    right_lines: list[str | None] = field(default_factory=list)
    left_map: list[int] = field(default_factory=list)
    right_map: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.left_lines)

    def rows(self) -> Iterator[tuple[str | None, str | None]]:
        """Iterate over ``(left_line, right_line)`` pairs, top to bottom."""
        return zip(self.left_lines, self.right_lines)

    def line_map(self, side: Side) -> list[int]:
        """Return the original-line to row map for ``side``."""
        return self.left_map if side == Side.LEFT else self.right_map

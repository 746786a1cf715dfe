"""Case-insensitive search over an aligned two-column view."""

from __future__ import annotations

from dataclasses import dataclass

from json_compare.diff_engine.models import AlignmentResult, Side


@dataclass(frozen=True)
class SearchHit:
    """An aligned row containing the query on one or both sides."""

    row: int
    sides: tuple[Side, ...]


def search_alignment(result: AlignmentResult, query: str) -> list[SearchHit]:
    """
    Find the aligned rows whose left or right line contains ``query``.

    Each row is reported once, with every side that matched, in ascending
    row order. A blank query matches nothing.

    Examples:
        >>> from json_compare.diff_engine import align
        >>> hits = search_alignment(align('"Name": 1', '"Name": 2'), "name")
        >>> [(h.row, [s.value for s in h.sides]) for h in hits]
        [(0, ['left', 'right'])]
    """
    if not query.strip():
        return []

    needle = query.lower()
    hits: list[SearchHit] = []

    for row, (left, right) in enumerate(result.rows()):
        sides: list[Side] = []
        if left is not None and needle in left.lower():
            sides.append(Side.LEFT)
        if right is not None and needle in right.lower():
            sides.append(Side.RIGHT)
        if sides:
            hits.append(SearchHit(row, tuple(sides)))

    return hits

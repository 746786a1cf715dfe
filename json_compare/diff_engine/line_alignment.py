"""
Line alignment of two serialized JSON texts.

Lines are matched with a longest-common-subsequence over per-line
"alignment tokens" and laid out as two equal-length columns padded with
gaps (``None``), so that matching content sits on the same row even when
insertions and deletions shift line numbers.

Alignment token:
    - A line that starts with a quoted object key and a colon aligns by
      the key's text, so ``"a": 1`` and ``"a": 2,`` share a row.
    - Any other line aligns by its whitespace-stripped content.
"""

from __future__ import annotations

import re

from json_compare.diff_engine.models import AlignmentResult, RowStatus

_KEY_LINE = re.compile(r'^\s*"((?:[^"\\]|\\.)*)"\s*:')


def alignment_token(line: str) -> str:
    """
    Return the token a line is matched by.

    Examples:
        >>> alignment_token('    "name": "x",')
        'name'
        >>> alignment_token("  ],")
        '],'
    """
    match = _KEY_LINE.match(line)
    if match:
        return match.group(1)
    return line.strip()


def align(text_a: str, text_b: str) -> AlignmentResult:
    """
    Align two texts line by line.

    Ties while backtracking favor consuming a right-only line, so within a
    run of unmatched lines the left-only lines come first.

    Args:
        text_a: The left text.
        text_b: The right text.

    Returns:
        An AlignmentResult whose columns, with gaps removed, reproduce
        ``text_a.split("\\n")`` and ``text_b.split("\\n")`` exactly.
    """
    lines_a = text_a.split("\n")
    lines_b = text_b.split("\n")
    tokens_a = [alignment_token(line) for line in lines_a]
    tokens_b = [alignment_token(line) for line in lines_b]
    n = len(lines_a)
    m = len(lines_b)

    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        row = table[i]
        prev = table[i - 1]
        token = tokens_a[i - 1]
        for j in range(1, m + 1):
            if token == tokens_b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    left_lines: list[str | None] = []
    right_lines: list[str | None] = []
    i, j = n, m

    while i > 0 or j > 0:
        if i > 0 and j > 0 and tokens_a[i - 1] == tokens_b[j - 1]:
            left_lines.append(lines_a[i - 1])
            right_lines.append(lines_b[j - 1])
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            left_lines.append(None)
            right_lines.append(lines_b[j - 1])
            j -= 1
        else:
            left_lines.append(lines_a[i - 1])
            right_lines.append(None)
            i -= 1

    left_lines.reverse()
    right_lines.reverse()

    return AlignmentResult(
        left_lines=left_lines,
        right_lines=right_lines,
        left_map=_build_map(left_lines),
        right_map=_build_map(right_lines),
    )


def _build_map(aligned: list[str | None]) -> list[int]:
    """Row index of each non-gap entry, in original line order."""
    return [row for row, line in enumerate(aligned) if line is not None]


def _normalize_line(line: str) -> str:
    line = line.strip()
    if line.endswith(","):
        line = line[:-1]
    return line


def classify_row(left_line: str | None, right_line: str | None) -> RowStatus:
    """
    Display status of one aligned row.

    Lines that differ only in indentation or a trailing comma are EQUAL.
    """
    if right_line is None:
        return RowStatus.REMOVED
    if left_line is None:
        return RowStatus.ADDED
    if _normalize_line(left_line) != _normalize_line(right_line):
        return RowStatus.CHANGED
    return RowStatus.EQUAL


def classify_rows(result: AlignmentResult) -> list[RowStatus]:
    """Classify every row of an alignment."""
    return [classify_row(left, right) for left, right in result.rows()]

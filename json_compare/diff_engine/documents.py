"""
Document handling for the two compared JSON texts.

Reads, parses and pretty-prints the raw input texts and runs the tree diff
over them. Parse failures of a whole document are reported here, once, so
that the engine functions downstream can stay silent about bad input.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from json_compare.diff_engine.models import DiffRecord, Side
from json_compare.diff_engine.tree_diff import diff

DEFAULT_INDENT = 2


class DocumentParseError(ValueError):
    """Raised when one of the compared documents is not valid JSON."""

    def __init__(self, side: Side, message: str, line: int, column: int) -> None:
        self.side = side
        self.line = line
        self.column = column
        super().__init__(
            f"{side.value} document is not valid JSON: {message} "
            f"(line {line}, column {column})"
        )


@dataclass(frozen=True)
class Comparison:
    """Outcome of comparing two raw JSON texts.

    Attributes:
        diffs: The difference records (empty when nothing can be compared).
        error: A user-facing message when either text fails to parse.
        can_compare: Whether both texts were non-blank.
    """

    diffs: list[DiffRecord] = field(default_factory=list)
    error: str | None = None
    can_compare: bool = False

    @property
    def is_identical(self) -> bool:
        """Both documents parsed and no differences were found."""
        return self.can_compare and self.error is None and not self.diffs


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(text: str) -> Any:
    """Parse JSON text, rejecting the NaN/Infinity extensions ``json`` allows.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    return json.loads(text, parse_constant=_reject_constant)


def parse_document(text: str, side: Side) -> Any:
    """
    Parse one compared document.

    Args:
        text: The raw document text.
        side: Which side the text belongs to (used in the error message).

    Returns:
        The parsed value.

    Raises:
        DocumentParseError: If the text is not valid JSON.
    """
    try:
        return loads_strict(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(side, e.msg, e.lineno, e.colno) from e
    except (ValueError, RecursionError) as e:
        raise DocumentParseError(side, str(e) or "nesting too deep", 1, 1) from e


def pretty_print(text: str, indent: int = DEFAULT_INDENT) -> str:
    """Re-serialize ``text`` with ``indent``; return it unchanged if it does not parse."""
    try:
        return json.dumps(loads_strict(text), indent=indent, ensure_ascii=False)
    except (ValueError, RecursionError):
        return text


def can_compare(left_text: str, right_text: str) -> bool:
    """Both texts contain something other than whitespace."""
    return bool(left_text.strip()) and bool(right_text.strip())


def compare_documents(left_text: str, right_text: str) -> Comparison:
    """
    Parse both texts and diff them.

    Never raises: blank input yields an empty Comparison, invalid input a
    Comparison carrying an error message.

    Examples:
        >>> compare_documents('{"a": 1}', '{"a": 2}').diffs[0].path
        '$.a'
    """
    if not can_compare(left_text, right_text):
        return Comparison()

    try:
        left = parse_document(left_text, Side.LEFT)
        right = parse_document(right_text, Side.RIGHT)
    except DocumentParseError as e:
        return Comparison(error=str(e), can_compare=True)

    return Comparison(diffs=diff(left, right), can_compare=True)


def read_document(path: str | Path) -> str:
    """Read a document file as raw UTF-8 text.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

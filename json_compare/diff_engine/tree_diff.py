"""
Tree diff for parsed JSON values.

This module walks two parsed JSON values in lock-step and returns a flat
list of DiffRecord entries addressed by ``$``-rooted paths.

Diff Types:
    - added: Path exists only on the right side
    - removed: Path exists only on the left side
    - changed: Path exists on both sides with different values, or the two
      sides disagree on container shape (object vs array vs primitive)

A container shape mismatch is reported as one ``changed`` record at that
path; its children are never expanded.
"""

from __future__ import annotations

from typing import Any

from json_compare.diff_engine.deep_equal import scalar_equal
from json_compare.diff_engine.json_path import ROOT, child_index_path, child_key_path
from json_compare.diff_engine.models import MISSING, DiffRecord, DiffType


def diff(left: Any, right: Any) -> list[DiffRecord]:
    """
    Calculate differences between two parsed JSON values.

    Args:
        left: The left (old) value.
        right: The right (new) value.

    Returns:
        Difference records in depth-first walk order. Empty when the two
        values are structurally equal.

    Examples:
        >>> diff({"a": 1, "b": 2}, {"a": 1, "b": 3})
        [DiffRecord(path='$.b', left_value=2, right_value=3, kind=<DiffType.CHANGED: 'changed'>)]
    """
    records: list[DiffRecord] = []
    # Children are pushed in reverse so they pop in document order.
    pending: list[tuple[Any, Any, str]] = [(left, right, ROOT)]

    while pending:
        children = _walk(*pending.pop(), records)
        pending.extend(reversed(children))

    return records


def _walk(
    left: Any,
    right: Any,
    path: str,
    records: list[DiffRecord],
) -> list[tuple[Any, Any, str]]:
    """
    Compare ``left`` and ``right`` at ``path`` and append any differences.

    Returns:
        The child pairs still to be compared when both sides are the same
        kind of container, otherwise an empty list.
    """
    if left is MISSING and right is MISSING:
        return []

    if left is MISSING:
        records.append(DiffRecord(path, left, right, DiffType.ADDED))
        return []

    if right is MISSING:
        records.append(DiffRecord(path, left, right, DiffType.REMOVED))
        return []

    if isinstance(left, list) and isinstance(right, list):
        return _compare_lists(left, right, path)

    left_is_object = isinstance(left, dict)
    right_is_object = isinstance(right, dict)

    if left_is_object and right_is_object:
        return _compare_dicts(left, right, path)

    if (
        left_is_object != right_is_object
        or isinstance(left, list) != isinstance(right, list)
    ):
        records.append(DiffRecord(path, left, right, DiffType.CHANGED))
        return []

    if not scalar_equal(left, right):
        records.append(DiffRecord(path, left, right, DiffType.CHANGED))
    return []


def _compare_dicts(
    left: dict[str, Any],
    right: dict[str, Any],
    path: str,
) -> list[tuple[Any, Any, str]]:
    """
    Pair up two objects key by key.

    Visits the union of both key sets once each: left keys in their order,
    then keys that only exist on the right.
    """
    keys = list(left)
    keys.extend(key for key in right if key not in left)

    return [
        (left.get(key, MISSING), right.get(key, MISSING), child_key_path(path, key))
        for key in keys
    ]


def _compare_lists(
    left: list[Any],
    right: list[Any],
    path: str,
) -> list[tuple[Any, Any, str]]:
    """Pair up two arrays index by index up to the longer length."""
    max_len = max(len(left), len(right))
    children = []

    for idx in range(max_len):
        left_item = left[idx] if idx < len(left) else MISSING
        right_item = right[idx] if idx < len(right) else MISSING
        children.append((left_item, right_item, child_index_path(path, idx)))

    return children

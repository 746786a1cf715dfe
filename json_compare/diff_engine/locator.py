"""
Path-to-position locator.

Recovers the exact character range of the value addressed by a ``$`` path
inside a JSON source text, so that a viewer can highlight, select and
scroll to it. Offsets always refer to the exact text passed in, which may
be hand-formatted, minified or pretty-printed.

Strategy by the last path step:
    - Object property ``K``: visit every member key that decodes to ``K``
      (escaped spellings such as ``\\u00e9`` or ``\\/`` included), scan the
      value that follows and return the first one that parses deep-equal
      to the value actually found at the path.
    - Array index ``n``: locate the parent array, then walk its elements
      with the token scanner and return the ``n``-th one. If that fails,
      fall back to a literal search for the serialized value, starting
      inside the first ``parentKey`` array when the parent step is a named
      property.
    - No steps (``$``): the whole document, without surrounding whitespace.

Every failure is reported as ``None``; nothing here raises for string input.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator

from json_compare.diff_engine.deep_equal import deep_equal
from json_compare.diff_engine.documents import loads_strict
from json_compare.diff_engine.json_path import (
    IndexStep,
    PathStep,
    PropertyStep,
    parse_path,
    resolve_path,
)
from json_compare.diff_engine.models import MISSING, Position
from json_compare.diff_engine.token_scanner import (
    scan_string_end,
    scan_value_end,
    skip_whitespace,
)

_LOG = logging.getLogger(__name__)


def locate(text: str, path: str, expected: Any = MISSING) -> Position | None:
    """
    Find the character range of the value at ``path`` inside ``text``.

    Args:
        text: The JSON source text.
        path: A ``$``-rooted path, e.g. ``$.meta.updatedAt`` or ``$.items[0]``.
        expected: Optional value the caller believes is at ``path``. When
            given and not deep-equal to what the text holds, the lookup is
            treated as stale and nothing is returned.

    Returns:
        A Position whose ``slice(text)`` is the value's JSON literal, or
        None when the text does not parse, the path does not resolve, the
        expected value does not match, or the value cannot be found.

    Examples:
        >>> locate('{"a": {"b": 5}}', "$.a.b", 5)
        Position(start=12, end=13)
    """
    try:
        parsed = loads_strict(text)
    except (ValueError, RecursionError) as exc:
        _LOG.debug("locate %s: text is not valid JSON: %s", path, exc)
        return None

    steps = parse_path(path)
    target = resolve_path(parsed, steps)
    if target is MISSING:
        _LOG.debug("locate %s: path does not resolve", path)
        return None

    if expected is not MISSING and not deep_equal(target, expected):
        _LOG.debug("locate %s: expected value is stale", path)
        return None

    position = _locate_steps(text, parsed, steps)
    if position is None:
        _LOG.debug("locate %s: value not found in text", path)
    return position


def _locate_steps(text: str, parsed: Any, steps: list[PathStep]) -> Position | None:
    """
    Locate the value at ``steps``; the path is known to resolve.

    The last property step is found by its key, then each trailing index
    step walks into the array found one step earlier.
    """
    anchor = len(steps)
    while anchor > 0 and isinstance(steps[anchor - 1], IndexStep):
        anchor -= 1

    if anchor == 0:
        position = _locate_root(text)
    else:
        target = resolve_path(parsed, steps[:anchor])
        position = _locate_property(text, steps[anchor - 1].name, target)

    for end in range(anchor + 1, len(steps) + 1):
        prefix = steps[:end]
        position = _locate_array_element(text, position, prefix, resolve_path(parsed, prefix))

    return position


def _locate_root(text: str) -> Position | None:
    start = skip_whitespace(text, 0)
    end = scan_value_end(text, start)
    if end is None:
        return None
    return Position(start, end)


def _member_value_starts(text: str, name: str) -> Iterator[int]:
    """
    Yield the value offset of every object member whose key decodes to ``name``.

    Keys are compared after decoding, so ``"caf\\u00e9"`` and ``"café"``
    both match ``café``. Outside of string tokens valid JSON holds no
    quote, so stepping from one string token to the next visits them all.
    """
    pos = text.find('"')
    while pos != -1:
        end = scan_string_end(text, pos)
        if end is None:
            return

        colon = skip_whitespace(text, end)
        if colon < len(text) and text[colon] == ":":
            try:
                key = json.loads(text[pos:end])
            except ValueError:
                key = None
            if key == name:
                yield skip_whitespace(text, colon + 1)

        pos = text.find('"', end)


def _locate_property(text: str, name: str, target: Any) -> Position | None:
    """First ``name`` member whose value parses deep-equal to ``target``."""
    for value_start in _member_value_starts(text, name):
        value_end = scan_value_end(text, value_start)
        if value_end is None:
            continue

        try:
            candidate = loads_strict(text[value_start:value_end])
        except (ValueError, RecursionError):
            continue

        if deep_equal(candidate, target):
            return Position(value_start, value_end)

    return None


def _locate_array_element(
    text: str,
    parent: Position | None,
    steps: list[PathStep],
    target: Any,
) -> Position | None:
    index = steps[-1].index

    if parent is not None and text[parent.start] == "[":
        element = _nth_element(text, parent.start, index)
        if element is not None and _holds(text, element, target):
            return element

    return _find_by_content(text, steps, target)


def _nth_element(text: str, array_start: int, index: int) -> Position | None:
    """Walk the elements of the array opening at ``array_start``."""
    pos = skip_whitespace(text, array_start + 1)
    count = 0

    while pos < len(text) and text[pos] != "]":
        end = scan_value_end(text, pos)
        if end is None:
            return None
        if count == index:
            return Position(pos, end)

        pos = skip_whitespace(text, end)
        if pos >= len(text) or text[pos] != ",":
            return None
        pos = skip_whitespace(text, pos + 1)
        count += 1

    return None


def _holds(text: str, position: Position, target: Any) -> bool:
    try:
        return deep_equal(loads_strict(position.slice(text)), target)
    except (ValueError, RecursionError):
        return False


def _find_by_content(text: str, steps: list[PathStep], target: Any) -> Position | None:
    """
    Literal search for the compact serialization of ``target``.

    When the parent step is a named property the search only starts after
    the first ``parentKey`` member whose value is an array, and gives up if
    there is none. The first occurrence wins, so duplicate values earlier
    in that window shadow the requested element.
    """
    search_start = 0
    if len(steps) >= 2 and isinstance(steps[-2], PropertyStep):
        search_start = next(
            (
                value_start + 1
                for value_start in _member_value_starts(text, steps[-2].name)
                if text.startswith("[", value_start)
            ),
            -1,
        )
        if search_start == -1:
            return None

    try:
        needle = json.dumps(target, ensure_ascii=False, separators=(",", ":"))
    except RecursionError:
        return None

    index = text.find(needle, search_start)
    if index == -1:
        return None
    return Position(index, index + len(needle))

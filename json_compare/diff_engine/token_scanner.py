"""
Token scanner for JSON source text.

Given an offset known to be the first character of a JSON value, find the
offset one past the end of that value. The scanner does not validate: it
only tracks enough structure (string escapes, bracket depth) to know where
a value stops. Every failure returns ``None``.
"""

from __future__ import annotations

NUMBER_CHARS = frozenset("0123456789.eE+-")
NUMBER_START_CHARS = frozenset("0123456789-")
WHITESPACE = " \t\r\n"

_LITERALS = {"t": "true", "f": "false", "n": "null"}
_CLOSERS = {"{": "}", "[": "]"}


def scan_value_end(text: str, start: int) -> int | None:
    """
    Return the end offset of the JSON value starting at ``start``.

    Dispatches on the first character:
        - ``"``: string, honoring backslash escapes
        - digit or ``-``: maximal run of ``[0-9.eE+-]``
        - ``t``/``f``/``n``: exact ``true``/``false``/``null`` literal
        - ``{`` or ``[``: bracket depth count, skipping string contents

    Args:
        text: The source text.
        start: Offset of the value's first character.

    Returns:
        The offset one past the value's last character, or None for an
        unterminated string, unbalanced brackets, a bad literal, or an
        offset that does not start a value.

    Examples:
        >>> scan_value_end('{"a": [1, "]"]}', 6)
        14
    """
    if start < 0 or start >= len(text):
        return None

    first = text[start]

    if first == '"':
        return scan_string_end(text, start)

    if first in NUMBER_START_CHARS:
        pos = start
        while pos < len(text) and text[pos] in NUMBER_CHARS:
            pos += 1
        return pos

    if first in _LITERALS:
        literal = _LITERALS[first]
        if text.startswith(literal, start):
            return start + len(literal)
        return None

    if first in _CLOSERS:
        return _scan_container_end(text, start, first, _CLOSERS[first])

    return None


def scan_string_end(text: str, start: int) -> int | None:
    """Return the offset one past the closing quote of the string at ``start``."""
    pos = start + 1
    length = len(text)
    while pos < length:
        char = text[pos]
        if char == "\\":
            pos += 2
            continue
        if char == '"':
            return pos + 1
        pos += 1
    return None


def _scan_container_end(text: str, start: int, opener: str, closer: str) -> int | None:
    """Bracket depth counting that steps over quoted strings."""
    depth = 1
    pos = start + 1
    length = len(text)
    while pos < length:
        char = text[pos]
        if char == '"':
            string_end = scan_string_end(text, pos)
            if string_end is None:
                return None
            pos = string_end
            continue
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return pos + 1
        pos += 1
    return None


def skip_whitespace(text: str, pos: int) -> int:
    """Advance ``pos`` past JSON whitespace."""
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos

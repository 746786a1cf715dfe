"""
JSON path strings: building, parsing and resolving.

Paths are rooted at ``$`` and use ``.name`` for object properties and
``[n]`` for array indices, e.g. ``$.meta.tags[0].label``.

Usage:
    from json_compare.diff_engine.json_path import parse_path, resolve_path

    steps = parse_path("$.features[0]")
    # [PropertyStep(name='features'), IndexStep(index=0)]
    value = resolve_path({"features": ["a"]}, steps)  # 'a'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from json_compare.diff_engine.models import MISSING

ROOT = "$"

_TRAILING_INDEX = re.compile(r"\[\d+\]$")
_INDEX_SEGMENT = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True)
class PropertyStep:
    """Step into an object property."""

    name: str

    @property
    def kind(self) -> str:
        return "property"


@dataclass(frozen=True)
class IndexStep:
    """Step into an array element."""

    index: int

    @property
    def kind(self) -> str:
        return "index"


PathStep = Union[PropertyStep, IndexStep]


def child_key_path(base: str, key: str) -> str:
    """Extend ``base`` with an object property.

    Keys are not quoted: an empty key under the root gives ``$.``, which
    ``parse_path`` reads back as the root itself.
    """
    if not base or base == ROOT:
        return f"{ROOT}.{key}"
    return f"{base}.{key}"


def child_index_path(base: str, index: int) -> str:
    """Extend ``base`` with an array index."""
    return f"{base or ROOT}[{index}]"


def parse_path(path: str) -> list[PathStep]:
    """
    Parse a path string into an ordered list of steps.

    A leading ``$.`` or bare ``$`` is stripped. Dots split properties only
    outside brackets; bracket content must be an integer, anything else is
    skipped without producing a step. ``$`` alone yields no steps (the
    whole document).

    Args:
        path: The path string, e.g. ``$.a.b[0].c``.

    Returns:
        The parsed steps.

    Examples:
        >>> parse_path("$.a[2].b")
        [PropertyStep(name='a'), IndexStep(index=2), PropertyStep(name='b')]
        >>> parse_path("$")
        []
    """
    if path.startswith(ROOT + "."):
        path = path[2:]
    elif path.startswith(ROOT):
        path = path[1:]

    steps: list[PathStep] = []
    current = ""
    in_brackets = False

    for char in path:
        if char == "[":
            if current:
                steps.append(PropertyStep(current))
                current = ""
            in_brackets = True
        elif char == "]":
            if in_brackets:
                index = _parse_index(current)
                if index is not None:
                    steps.append(IndexStep(index))
                current = ""
                in_brackets = False
        elif char == "." and not in_brackets:
            if current:
                steps.append(PropertyStep(current))
                current = ""
        else:
            current += char

    if current and not in_brackets:
        steps.append(PropertyStep(current))

    return steps


def _parse_index(text: str) -> int | None:
    """Parse bracket content as an integer, or None when it is not one."""
    try:
        return int(text.strip())
    except ValueError:
        return None


def resolve_path(value: Any, steps: list[PathStep]) -> Any:
    """
    Walk ``value`` by ``steps``.

    Returns:
        The value at that path, or MISSING when a key is absent, an index is
        out of range (negative indices never resolve), or a step addresses
        the wrong kind of container.
    """
    current = value
    for step in steps:
        if isinstance(step, PropertyStep):
            if not isinstance(current, dict) or step.name not in current:
                return MISSING
            current = current[step.name]
        else:
            if not isinstance(current, list) or not 0 <= step.index < len(current):
                return MISSING
            current = current[step.index]
    return current


def parent_path(path: str) -> str:
    """
    Return the path of the container holding ``path``.

    Examples:
        >>> parent_path("$.items[3]")
        '$.items'
        >>> parent_path("$.meta.name")
        '$.meta'
        >>> parent_path("$.name")
        '$'
    """
    if path.endswith("]"):
        return _TRAILING_INDEX.sub("", path)
    last_dot = path.rfind(".")
    if last_dot > 0:
        return path[:last_dot]
    return ROOT


def format_path(path: str) -> str:
    """Render a path for display, e.g. ``$.meta.tags[0]`` -> ``meta > tags > 0``."""
    text = re.sub(r"^\$\.?", "", path)
    text = text.replace(".", " > ")
    text = _INDEX_SEGMENT.sub(r" > \1", text)
    if text.startswith(" > "):
        text = text[3:]
    return text

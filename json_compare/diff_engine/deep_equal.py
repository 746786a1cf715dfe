"""Structural equality over parsed JSON values."""

from __future__ import annotations

from typing import Any


def scalar_equal(a: Any, b: Any) -> bool:
    """Compare two JSON scalars (string, number, boolean or null).

    Booleans only equal booleans, so ``true`` never matches ``1`` the way
    Python's ``True == 1`` would. Integers and floats compare numerically
    since JSON has a single number type.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if a is None or b is None:
        return a is b
    return type(a) is type(b) and a == b


def deep_equal(a: Any, b: Any) -> bool:
    """
    Structural equality for JSON-shaped values.

    Objects are compared key by key regardless of key order, arrays element
    by element, scalars with ``scalar_equal``. Pairs still to be compared
    are kept on an explicit stack, so nesting depth is bounded only by
    memory.

    Examples:
        >>> deep_equal({"a": [1, 2]}, {"a": [1, 2.0]})
        True
        >>> deep_equal([1], [True])
        False
    """
    pending = [(a, b)]

    while pending:
        a, b = pending.pop()
        if a is b:
            continue

        if isinstance(a, dict) or isinstance(b, dict):
            if not (isinstance(a, dict) and isinstance(b, dict)):
                return False
            if len(a) != len(b):
                return False
            for key, value in a.items():
                if key not in b:
                    return False
                pending.append((value, b[key]))
            continue

        if isinstance(a, list) or isinstance(b, list):
            if not (isinstance(a, list) and isinstance(b, list)):
                return False
            if len(a) != len(b):
                return False
            pending.extend(zip(a, b))
            continue

        if not scalar_equal(a, b):
            return False

    return True

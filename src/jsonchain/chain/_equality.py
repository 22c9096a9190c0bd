"""
Structural equality for JSON-like values.

Python's ``==`` already compares dicts and lists recursively, but it treats
``True == 1`` and ``[1] != (1,)`` in ways that disagree with JSON. deep_equal()
compares values the way their JSON encodings would compare:

- Mappings are equal when they have the same keys and deep-equal values
- Lists and tuples are both JSON arrays and compare element-wise
- Booleans never equal numbers
- int and float compare numerically (both are JSON numbers)
- str/bytes are scalars, never sequences
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


def deep_equal(
    left: _typing.Any,
    right: _typing.Any,
    _seen: set[tuple[int, int]] | None = None,
) -> bool:
    """
    Compare two values recursively.

    Args:
        left: First value.
        right: Second value.

    Returns:
        True if the values are structurally equal.

    Example:
        >>> deep_equal({"a": [1, 2]}, {"a": (1, 2)})
        True
        >>> deep_equal({"a": True}, {"a": 1})
        False
    """
    if left is right:
        return True

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if isinstance(left, _abc.Mapping) and isinstance(right, _abc.Mapping):
        if _seen is None:
            _seen = set()
        pair = (id(left), id(right))
        if pair in _seen:
            return True  # Circular reference already under comparison
        _seen.add(pair)

        if len(left) != len(right):
            return False
        for key in left:
            if key not in right:
                return False
            if not deep_equal(left[key], right[key], _seen):
                return False
        return True

    if _is_array(left) and _is_array(right):
        if _seen is None:
            _seen = set()
        pair = (id(left), id(right))
        if pair in _seen:
            return True
        _seen.add(pair)

        if len(left) != len(right):
            return False
        return all(deep_equal(a, b, _seen) for a, b in zip(left, right))

    if _is_array(left) or _is_array(right):
        return False
    if isinstance(left, _abc.Mapping) or isinstance(right, _abc.Mapping):
        return False

    return bool(left == right)


def _is_array(value: _typing.Any) -> bool:
    """Check if a value encodes as a JSON array."""
    return isinstance(value, _abc.Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )

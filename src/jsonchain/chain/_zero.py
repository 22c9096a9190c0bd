"""
Zero values for chain value types.

A chain remembers the type of its values so get() can hand back a sensible
"nothing here" value. Scalars get their empty value; everything else is None,
the same way an unset reference is nil.
"""

from __future__ import annotations

import typing as _typing

# Checked in order: bool before int, since bool subclasses int
_SCALAR_ZEROS: tuple[tuple[type, _typing.Any], ...] = (
    (bool, False),
    (str, ""),
    (int, 0),
    (float, 0.0),
)


def zero_value(value_type: _typing.Any) -> _typing.Any:
    """
    Return the zero value for a value type.

    Args:
        value_type: A class or typing construct, or None for untyped chains.

    Returns:
        "", 0, 0.0 or False for scalar types (and their subclasses),
        None for anything else.

    Example:
        >>> zero_value(str)
        ''
        >>> zero_value(list[int])
        >>> zero_value(None)
    """
    if _typing.get_origin(value_type) is not None or not isinstance(value_type, type):
        # Generic aliases (list[int]), unions, Any, None
        return None
    for scalar_type, zero in _SCALAR_ZEROS:
        if issubclass(value_type, scalar_type):
            return zero
    return None


def make_zero_factory(
    value_type: _typing.Any,
    zero_factory: _typing.Callable[[], _typing.Any] | None = None,
) -> _typing.Callable[[], _typing.Any]:
    """
    Build the callable a chain uses to produce zero values.

    An explicit zero_factory wins over the value type. Factories are called
    on every lookup, so mutable zeros are never shared between callers.
    """
    if zero_factory is not None:
        return zero_factory
    zero = zero_value(value_type)
    return lambda: zero

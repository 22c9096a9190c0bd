"""
Exception types raised by JsonChain.

Key errors subclass KeyError so existing ``except KeyError`` handlers keep
working; codec errors subclass ValueError, matching what the json module
raises. The original codec exception is always available as ``__cause__``.
"""

from __future__ import annotations

import typing as _typing


class JsonChainError(Exception):
    """Base class for all JsonChain errors."""

    pass


class KeyNotExistError(JsonChainError, KeyError):
    """
    Raised by get_with_error() when a key holds no usable value.

    Attributes:
        key: The key that was looked up.
        zero: The zero value of the chain's value type, i.e. what get()
            would have returned.
    """

    def __init__(self, key: str, zero: _typing.Any = None) -> None:
        self.key = key
        self.zero = zero
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not exist: {self.key!r}"


class KeyAlreadyExistError(JsonChainError, KeyError):
    """Raised by set_with_error() when the key is already present."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key already exist: {self.key!r}"


class DecodeError(JsonChainError, ValueError):
    """JSON input is malformed or does not fit the chain's shape."""

    pass


class EncodeError(JsonChainError, ValueError):
    """A chain value could not be serialized to JSON."""

    pass

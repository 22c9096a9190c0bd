"""
JsonChain: a JSON-serializable mapping with a fluent API.

This package provides a dict-like container that builds up JSON documents
programmatically, with optional no-overwrite and must-exist semantics and
two shallow merge policies.

Example:
    >>> from jsonchain.chain import JsonChain
    >>> base = JsonChain({"a": 1})
    >>> base.append({"a": 2, "b": 2})  # First writer wins
    >>> base.to_dict()
    {'a': 1, 'b': 2}
    >>> base.copy({"a": 3})  # Last writer wins
    >>> print(base.to_json().pretty())
    {
      "a": 3,
      "b": 2
    }
    <BLANKLINE>
"""

from jsonchain.chain._core import JsonChain, new_chain
from jsonchain.chain._equality import deep_equal
from jsonchain.chain._errors import (
    DecodeError,
    EncodeError,
    JsonChainError,
    KeyAlreadyExistError,
    KeyNotExistError,
)
from jsonchain.chain._output import JsonOutput

__all__ = [
    "DecodeError",
    "EncodeError",
    "JsonChain",
    "JsonChainError",
    "JsonOutput",
    "KeyAlreadyExistError",
    "KeyNotExistError",
    "deep_equal",
    "new_chain",
]

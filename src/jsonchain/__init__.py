"""
jsonchain - JSON documents built one key at a time

A generic key-value container with fluent setters, strict set/get variants,
shallow merge policies and JSON import/export.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("jsonchain")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "jsonchain Contributors"

from jsonchain.chain import (  # noqa: E402
    DecodeError,
    EncodeError,
    JsonChain,
    JsonChainError,
    JsonOutput,
    KeyAlreadyExistError,
    KeyNotExistError,
    new_chain,
)
from jsonchain.config import Settings  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "DecodeError",
    "EncodeError",
    "JsonChain",
    "JsonChainError",
    "JsonOutput",
    "KeyAlreadyExistError",
    "KeyNotExistError",
    "Settings",
    "new_chain",
]

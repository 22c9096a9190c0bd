"""
Shared pytest fixtures for jsonchain tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing

import pytest as _pytest

import jsonchain.chain as chain
import jsonchain.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "JSONCHAIN_ENV_FILE",
    "JSONCHAIN_INDENT",
    "JSONCHAIN_SORT_KEYS",
    "JSONCHAIN_ENSURE_ASCII",
    "JSONCHAIN_TRAILING_NEWLINE",
    "JSONCHAIN_LOG_LEVEL",
    "NO_COLOR",
]


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """Run every test with a clean JSONCHAIN_* environment and settings cache."""
    for key in ENV_KEYS_TO_CLEAR:
        if key in _os.environ:
            monkeypatch.delenv(key)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@_pytest.fixture
def settings() -> config.Settings:
    """Default settings, independent of the environment."""
    return config.Settings()


@_pytest.fixture
def string_chain() -> chain.JsonChain[str, str]:
    """Empty chain of string values."""
    return chain.JsonChain(value_type=str)


@_pytest.fixture
def sample_chain() -> chain.JsonChain[str, _typing.Any]:
    """Untyped chain with a mix of JSON values."""
    return chain.JsonChain(
        {
            "name": "Ada",
            "age": 36,
            "ratio": 0.5,
            "active": True,
            "tags": ["math", "engines"],
            "address": {"city": "London", "zip": None},
        }
    )

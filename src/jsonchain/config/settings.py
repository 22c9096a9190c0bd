"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with JSONCHAIN_ prefix
3. .env file named by JSONCHAIN_ENV_FILE (if set and present)
4. Field defaults from jsonchain.constants

Example:
  JSONCHAIN_SORT_KEYS=false
  JSONCHAIN_LOG_LEVEL=DEBUG
"""

import functools as _functools
import logging as _logging
import os as _os
import pathlib as _pathlib

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import jsonchain.constants as constants


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit JSONCHAIN_ENV_FILE is honored. If it is set but the
    file doesn't exist, no .env is loaded rather than falling back silently.
    """
    if env_file := _os.environ.get(constants.ENV_FILE_VAR):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    jsonchain configuration settings.

    All settings can be overridden via environment variables with the
    JSONCHAIN_ prefix, e.g. JSONCHAIN_INDENT=4.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    indent: int = _pydantic.Field(
        default=constants.DEFAULT_INDENT,
        ge=0,
        description="Spaces per level when pretty-printing",
    )

    sort_keys: bool = _pydantic.Field(
        default=constants.DEFAULT_SORT_KEYS,
        description="Emit object keys in sorted order from to_json()",
    )

    ensure_ascii: bool = _pydantic.Field(
        default=constants.DEFAULT_ENSURE_ASCII,
        description="Escape non-ASCII characters in to_json() output",
    )

    trailing_newline: bool = _pydantic.Field(
        default=constants.DEFAULT_TRAILING_NEWLINE,
        description="Append a newline to to_json() output",
    )

    log_level: str = _pydantic.Field(
        default=constants.DEFAULT_LOG_LEVEL,
        description="Logging level for the CLI",
    )

    @_pydantic.field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Normalize and check the level name against the logging module."""
        level = value.strip().upper()
        if not isinstance(_logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@_functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the process-wide Settings, loading them on first use.

    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()

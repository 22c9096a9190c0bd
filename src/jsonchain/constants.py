"""
Shared constants for jsonchain.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Serialization defaults
DEFAULT_INDENT = 2
"""Indentation width used by JsonOutput.pretty()."""

DEFAULT_SORT_KEYS = True
"""Emit object keys in sorted order from to_json()."""

DEFAULT_ENSURE_ASCII = False
"""Keep non-ASCII characters as UTF-8 instead of \\uXXXX escapes."""

DEFAULT_TRAILING_NEWLINE = True
"""Terminate to_json() output with a single newline."""

# Environment
ENV_PREFIX = "JSONCHAIN_"
"""Prefix for all environment variables read by Settings."""

ENV_FILE_VAR = "JSONCHAIN_ENV_FILE"
"""Environment variable naming an optional .env file."""

DEFAULT_LOG_LEVEL = "WARNING"
"""Logging level used by the CLI unless overridden."""

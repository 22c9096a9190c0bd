"""
Configuration module for jsonchain.

Uses pydantic-settings for environment variable loading.
"""

from jsonchain.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

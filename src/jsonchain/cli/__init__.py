"""
CLI module for jsonchain.

Provides the command-line interface using Click.
"""

from jsonchain.cli.main import cli, main

__all__ = ["main", "cli"]

"""
CLI module for one-click unsubscribe links.

Provides click-based command-line interface with subcommands.
"""

from .main import cli

__all__ = ['cli']

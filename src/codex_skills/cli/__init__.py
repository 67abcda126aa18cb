"""
CLI module for codex-skills.

Provides the command-line interface using Click.
"""

from codex_skills.cli.main import cli, main

__all__ = ["main", "cli"]

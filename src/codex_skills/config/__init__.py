"""
Configuration module for codex-skills.

Uses pydantic-settings for environment variable loading.
"""

from codex_skills.config.settings import Settings

__all__ = ["Settings"]

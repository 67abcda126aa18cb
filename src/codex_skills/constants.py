"""
Shared constants for codex-skills.

This module provides a single source of truth for the filesystem layout
and scan limits used across the discovery modules.
"""

# Filesystem layout
SKILL_FILENAME = "SKILL.md"
"""Name of a skill definition file."""

SKILLS_DIR_NAME = "skills"
"""Directory holding skills under a config directory."""

SYSTEM_SKILLS_DIR_NAME = ".system"
"""Reserved subdirectory of the user skills dir holding bundled skills."""

REPO_CONFIG_DIR_NAME = ".codex"
"""Per-repository config directory (contains skills/)."""

HOME_CONFIG_DIR_NAME = ".codex"
"""Config directory under the user's home when CODEX_HOME is not set."""

VCS_MARKER = ".git"
"""Marker whose presence identifies a repository root."""

ADMIN_SKILLS_DIR = "/etc/codex/skills"
"""System-wide skills directory on Unix-like systems."""

INTERFACE_DIR_NAME = "agents"
"""Sibling directory of SKILL.md holding interface overlays."""

INTERFACE_FILENAME = "openai.yaml"
"""Interface overlay file name inside agents/."""

FRONTMATTER_DELIMITER = "---"
"""Line that opens and closes a front matter block."""

# Environment
CODEX_HOME_ENV = "CODEX_HOME"
"""Environment variable overriding the home config directory."""

# Scan limits
MAX_SCAN_DEPTH = 6
"""Deepest directory level (root is 0) the walker will enter."""

MAX_SKILLS_DIRS_PER_ROOT = 2000
"""Maximum number of distinct directories visited under one root."""

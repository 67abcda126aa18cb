"""
Skill registry for looking up discovered skills.

The registry runs discovery lazily, once, and answers lookups from the
cached result until discover() is called again.
"""

from __future__ import annotations

import pathlib as _pathlib
import typing as _typing

import codex_skills.config as config
import codex_skills.skills.discovery as discovery
import codex_skills.skills.skill as skill_module


class SkillRegistry:
    """
    Registry for managing discovered skills.

    Handles:
    - Lazy discovery from the standard locations
    - Lookup by name (highest-precedence skill wins)
    - Rendering a compact skill listing for prompts
    """

    def __init__(
        self,
        cwd: _pathlib.Path,
        settings: config.Settings | None = None,
    ) -> None:
        """
        Initialize the skill registry.

        Args:
            cwd: Working directory for discovery.
            settings: Configuration provider. Defaults to Settings().
        """
        self._cwd = cwd
        self._discovery = discovery.SkillDiscovery(cwd, settings)
        self._skills: list[skill_module.SkillMetadata] | None = None

    def _ensure_discovered(self) -> list[skill_module.SkillMetadata]:
        if self._skills is None:
            self._skills = self._discovery.discover()
        return self._skills

    def discover(self) -> None:
        """Force re-discovery of skills."""
        self._skills = None
        self._ensure_discovered()

    def list_skills(self) -> list[skill_module.SkillMetadata]:
        """List all discovered skills in precedence order."""
        return list(self._ensure_discovered())

    def get_skill(self, name: str) -> skill_module.SkillMetadata | None:
        """
        Get a skill by name.

        When several skills share a name, the one with the highest
        precedence (first in sorted order) is returned.

        Args:
            name: Skill name from frontmatter.

        Returns:
            SkillMetadata or None if not found.
        """
        for skill in self._ensure_discovered():
            if skill.name == name:
                return skill
        return None

    def has_skill(self, name: str) -> bool:
        """Check if a skill exists."""
        return self.get_skill(name) is not None

    def get_metadata_for_prompt(self) -> str:
        """
        Get a markdown listing of all skills.

        Returns:
            One line per skill with display name, display description
            and file path, or "" when no skills were found.
        """
        skills = self._ensure_discovered()
        if not skills:
            return ""

        lines = ["## Skills", ""]
        for skill in skills:
            lines.append(
                f"- {skill.display_name}: {skill.display_description} (file: {skill.path})"
            )
        return "\n".join(lines)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        skills = self._ensure_discovered()
        return {
            "cwd": str(self._cwd),
            "skill_count": len(skills),
            "skills": [s.to_dict() for s in skills],
        }

"""
Skill discovery across all roots.

Roots are scanned in the order produced by skill_roots(). Results are
merged, deduplicated by canonical SKILL.md path (first root wins), and
sorted by scope rank, then name, then path.

Nothing here is fatal: unreadable roots contribute nothing, unreadable
directories and invalid files are logged and skipped.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import codex_skills.config as config
import codex_skills.skills.roots as roots
import codex_skills.skills.skill as skill_module
import codex_skills.skills.walker as walker

_logger = _logging.getLogger(__name__)


def _iter_root(
    root: roots.SkillRoot,
    settings: config.Settings,
) -> _typing.Iterator[skill_module.SkillMetadata | tuple[_pathlib.Path, Exception]]:
    result = walker.walk_skill_root(
        root,
        max_depth=settings.max_scan_depth,
        max_dirs=settings.max_dirs_per_root,
    )
    for path in result.files:
        try:
            yield skill_module.parse_skill_file(path, root.scope)
        except skill_module.SkillParseError as e:
            yield (path, e)


def discover_skills_under_root(
    root: roots.SkillRoot,
    settings: config.Settings | None = None,
) -> list[skill_module.SkillMetadata]:
    """
    Parse every skill under one root.

    Invalid SKILL.md files are logged and skipped.
    """
    if settings is None:
        settings = config.Settings()

    skills: list[skill_module.SkillMetadata] = []
    for item in _iter_root(root, settings):
        if isinstance(item, tuple):
            path, error = item
            _logger.warning("failed to parse %s: %s", path, error)
            continue
        skills.append(item)
    return skills


def merge_skills(
    skills: _typing.Iterable[skill_module.SkillMetadata],
) -> list[skill_module.SkillMetadata]:
    """
    Deduplicate by path (first occurrence wins) and sort.

    Args:
        skills: Skills in root scan order.

    Returns:
        Sorted list with at most one entry per canonical path.
    """
    seen_paths: set[_pathlib.Path] = set()
    merged: list[skill_module.SkillMetadata] = []
    for skill in skills:
        if skill.path in seen_paths:
            continue
        seen_paths.add(skill.path)
        merged.append(skill)

    merged.sort(key=lambda s: s.sort_key())
    return merged


def load_skills(
    cwd: _pathlib.Path,
    settings: config.Settings | None = None,
) -> list[skill_module.SkillMetadata]:
    """
    Discover all skills visible from cwd.

    Args:
        cwd: Working directory.
        settings: Configuration provider. Defaults to Settings().

    Returns:
        Deduplicated skills sorted by scope rank, name, then path.
    """
    return SkillDiscovery(cwd, settings).discover()


class SkillDiscovery:
    """
    Discovers skills from repo, user, system and admin locations.

    Each call to discover() is an independent point-in-time scan; no
    state is carried between calls.
    """

    def __init__(
        self,
        cwd: _pathlib.Path,
        settings: config.Settings | None = None,
        roots_override: list[roots.SkillRoot] | None = None,
    ) -> None:
        """
        Initialize skill discovery.

        Args:
            cwd: Working directory for repo skill discovery.
            settings: Configuration provider. Defaults to Settings().
            roots_override: Custom roots (replaces the default locations).
        """
        self._cwd = cwd
        self._settings = settings if settings is not None else config.Settings()
        self._roots = roots_override

    def get_roots(self) -> list[roots.SkillRoot]:
        """Get the roots in scan order."""
        if self._roots is not None:
            return self._roots
        return roots.skill_roots(self._cwd, self._settings)

    def discover(self) -> list[skill_module.SkillMetadata]:
        """
        Scan all roots and return the merged, sorted skills.

        Returns:
            Deduplicated skills sorted by scope rank, name, then path.
        """
        collected: list[skill_module.SkillMetadata] = []
        for root in self.get_roots():
            collected.extend(discover_skills_under_root(root, self._settings))
        return merge_skills(collected)

    def discover_all(
        self,
        *,
        include_errors: bool = False,
    ) -> _typing.Iterator[
        skill_module.SkillMetadata | tuple[_pathlib.Path, Exception]
    ]:
        """
        Iterate over every parsed skill, optionally including errors.

        Skills are yielded in scan order, before deduplication or sorting.

        Args:
            include_errors: If True, yield (path, exception) for failures.

        Yields:
            SkillMetadata instances, or (path, exception) tuples if include_errors.
        """
        for root in self.get_roots():
            for item in _iter_root(root, self._settings):
                if isinstance(item, tuple) and not include_errors:
                    continue
                yield item

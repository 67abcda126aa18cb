"""
Skill root resolution.

Roots are returned in scan order:
1. <dir>/.codex/skills for every directory from cwd up to the repo root
   (closest to cwd first)
2. <codex_home>/skills/.system - bundled system skills (symlinks not followed)
3. <codex_home>/skills - user skills
4. /etc/codex/skills - admin skills (Unix-like systems only)

Scan order is not precedence. Precedence comes from SkillScope.rank and
is applied when results are sorted.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import pathlib as _pathlib

import codex_skills.config as config
import codex_skills.constants as constants
import codex_skills.skills.skill as skill_module


@_dataclasses.dataclass(frozen=True)
class SkillRoot:
    """A directory to scan for skills."""

    path: _pathlib.Path
    scope: skill_module.SkillScope
    follow_symlinks: bool

    @classmethod
    def for_scope(cls, path: _pathlib.Path, scope: skill_module.SkillScope) -> SkillRoot:
        """Create a root using the scope's symlink policy."""
        return cls(path=path, scope=scope, follow_symlinks=scope.follow_symlinks)


def find_repo_root(cwd: _pathlib.Path) -> _pathlib.Path | None:
    """Return the nearest ancestor of cwd (inclusive) containing .git."""
    for ancestor in (cwd, *cwd.parents):
        if (ancestor / constants.VCS_MARKER).exists():
            return ancestor
    return None


def repo_dirs_between(cwd: _pathlib.Path) -> list[_pathlib.Path]:
    """
    Directories from cwd up to the repo root, closest first.

    Without a repo root the walk continues to the filesystem root.
    """
    cwd = cwd.absolute()
    repo_root = find_repo_root(cwd)

    dirs: list[_pathlib.Path] = []
    for ancestor in (cwd, *cwd.parents):
        dirs.append(ancestor)
        if ancestor == repo_root:
            break
    return dirs


def get_repo_skills_path(directory: _pathlib.Path) -> _pathlib.Path:
    """Path to the repo-local skills directory under directory."""
    return directory / constants.REPO_CONFIG_DIR_NAME / constants.SKILLS_DIR_NAME


def skill_roots(
    cwd: _pathlib.Path,
    settings: config.Settings | None = None,
) -> list[SkillRoot]:
    """
    Compute the skill roots for a working directory.

    Args:
        cwd: Working directory discovery starts from.
        settings: Configuration provider. Defaults to Settings().

    Returns:
        Roots in scan order. Only repo roots are checked for existence;
        missing user/system/admin roots are left for the walker to skip.
    """
    if settings is None:
        settings = config.Settings()

    roots: list[SkillRoot] = []

    for directory in repo_dirs_between(cwd):
        skills_dir = get_repo_skills_path(directory)
        if skills_dir.is_dir():
            roots.append(SkillRoot.for_scope(skills_dir, skill_module.SkillScope.REPO))

    # Without a home directory there are no system or user roots.
    system_dir = settings.system_skills_dir
    user_dir = settings.user_skills_dir
    if system_dir is not None:
        roots.append(SkillRoot.for_scope(system_dir, skill_module.SkillScope.SYSTEM))
    if user_dir is not None:
        roots.append(SkillRoot.for_scope(user_dir, skill_module.SkillScope.USER))

    if settings.admin_skills_dir is not None:
        roots.append(
            SkillRoot.for_scope(settings.admin_skills_dir, skill_module.SkillScope.ADMIN)
        )

    return roots

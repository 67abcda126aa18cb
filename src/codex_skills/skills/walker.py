"""
Bounded breadth-first search for SKILL.md files under one root.

The walk is limited in two ways:
- Depth: directories deeper than max_depth below the root are not entered.
- Breadth: at most max_dirs distinct directories are visited per root.
  Hitting this cap truncates the walk (logged once) rather than failing.

Every directory is tracked by its canonical path, so symlink cycles and
directories reachable through several links are visited once.
"""

from __future__ import annotations

import collections as _collections
import dataclasses as _dataclasses
import logging as _logging
import pathlib as _pathlib
import stat as _stat

import codex_skills.constants as constants
import codex_skills.skills.roots as roots

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass
class WalkResult:
    """Outcome of walking one skills root."""

    files: list[_pathlib.Path] = _dataclasses.field(default_factory=list)
    """Candidate SKILL.md paths, in breadth-first order."""

    visited: set[_pathlib.Path] = _dataclasses.field(default_factory=set)
    """Canonical paths of every directory queued for reading."""

    truncated: bool = False
    """True if the directory cap dropped at least one directory."""


class _BoundedQueue:
    """Work queue enforcing the depth and visit limits."""

    def __init__(self, root_dir: _pathlib.Path, max_depth: int, max_dirs: int) -> None:
        self.max_depth = max_depth
        self.max_dirs = max_dirs
        self.visited: set[_pathlib.Path] = {root_dir}
        self.pending: _collections.deque[tuple[_pathlib.Path, int]] = _collections.deque(
            [(root_dir, 0)]
        )
        self.truncated = False
        self.depth_limited = False

    def push(self, path: _pathlib.Path, depth: int) -> None:
        if depth > self.max_depth:
            self.depth_limited = True
            return
        if len(self.visited) >= self.max_dirs:
            self.truncated = True
            return
        if path not in self.visited:
            self.visited.add(path)
            self.pending.append((path, depth))

    def pop(self) -> tuple[_pathlib.Path, int] | None:
        if not self.pending:
            return None
        return self.pending.popleft()


def _canonical_dir(path: _pathlib.Path) -> _pathlib.Path | None:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def _list_dir(directory: _pathlib.Path) -> list[_pathlib.Path] | None:
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        _logger.warning("failed to read skills dir %s: %s", directory, e)
        return None


def walk_skill_root(
    root: roots.SkillRoot,
    *,
    max_depth: int = constants.MAX_SCAN_DEPTH,
    max_dirs: int = constants.MAX_SKILLS_DIRS_PER_ROOT,
) -> WalkResult:
    """
    Find SKILL.md files under a root.

    Hidden entries (names starting with ".") are skipped. Symlinks are
    only followed when the root allows it, and only to directories; a
    symlinked SKILL.md is not a candidate.

    Args:
        root: The root to scan.
        max_depth: Deepest level entered (the root itself is level 0).
        max_dirs: Maximum distinct directories visited.

    Returns:
        WalkResult. Empty if the root does not exist or is not a directory.
    """
    root_dir = _canonical_dir(root.path)
    if root_dir is None or not root_dir.is_dir():
        return WalkResult()

    queue = _BoundedQueue(root_dir, max_depth, max_dirs)
    files: list[_pathlib.Path] = []

    while (item := queue.pop()) is not None:
        directory, depth = item
        entries = _list_dir(directory)
        if entries is None:
            continue

        for path in entries:
            if path.name.startswith("."):
                continue

            try:
                mode = path.lstat().st_mode
            except OSError:
                continue

            if _stat.S_ISLNK(mode):
                if not root.follow_symlinks:
                    continue
                try:
                    target = path.stat()
                except OSError as e:
                    _logger.warning("failed to stat skills entry %s (symlink): %s", path, e)
                    continue
                if _stat.S_ISDIR(target.st_mode):
                    resolved = _canonical_dir(path)
                    if resolved is not None:
                        queue.push(resolved, depth + 1)
                continue

            if _stat.S_ISDIR(mode):
                resolved = _canonical_dir(path)
                if resolved is not None:
                    queue.push(resolved, depth + 1)
                continue

            if _stat.S_ISREG(mode) and path.name == constants.SKILL_FILENAME:
                files.append(path)

    if queue.truncated:
        _logger.warning(
            "skills scan truncated after %d directories (root: %s)",
            max_dirs,
            root_dir,
        )
    if queue.depth_limited:
        _logger.debug(
            "skills scan skipped directories deeper than %d (root: %s)",
            max_depth,
            root_dir,
        )

    return WalkResult(files=files, visited=queue.visited, truncated=queue.truncated)

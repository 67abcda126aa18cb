"""
Shared pytest fixtures for codex-skills tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import codex_skills.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "CODEX_HOME",
    "CODEX_SKILLS_CODEX_HOME",
    "CODEX_SKILLS_HOME_DIR",
    "CODEX_SKILLS_ADMIN_SKILLS_DIR",
    "CODEX_SKILLS_MAX_SCAN_DEPTH",
    "CODEX_SKILLS_MAX_DIRS_PER_ROOT",
]

MakeSkill = _typing.Callable[..., _pathlib.Path]


@_pytest.fixture(autouse=True)
def clean_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Keep the real environment out of every test."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)


@_pytest.fixture
def home_dir(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """A fake user home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@_pytest.fixture
def settings(home_dir: _pathlib.Path) -> config.Settings:
    """Settings pointing at the fake home, with no admin root."""
    return config.Settings(home_dir=home_dir, admin_skills_dir=None)


@_pytest.fixture
def repo(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """A fake repository root (contains .git)."""
    path = tmp_path / "repo"
    (path / ".git").mkdir(parents=True)
    return path


def write_skill(
    skill_dir: _pathlib.Path,
    name: str,
    description: str = "Test skill",
    *,
    extra: str = "",
) -> _pathlib.Path:
    """Create skill_dir/SKILL.md with minimal frontmatter and return its path."""
    skill_dir.mkdir(parents=True, exist_ok=True)
    skill_file = skill_dir / "SKILL.md"
    skill_file.write_text(
        f"---\nname: {name}\ndescription: {description}\n{extra}---\n\n# {name}\n"
    )
    return skill_file


@_pytest.fixture
def make_skill() -> MakeSkill:
    """Factory fixture wrapping write_skill."""
    return write_skill


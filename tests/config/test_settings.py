"""
Tests for Settings.

Tests verify that:
- CODEX_HOME overrides the home config directory
- An empty CODEX_HOME is treated as unset
- Scan limits default to the documented constants
"""

import os as _os
import pathlib as _pathlib
import unittest.mock as _mock

import pytest as _pytest

import codex_skills.config as config
import codex_skills.constants as constants


class TestCodexHome:
    """Tests for home config directory resolution."""

    def test_defaults_to_dot_codex_under_home(self, home_dir: _pathlib.Path) -> None:
        """Without CODEX_HOME, the config dir is ~/.codex."""
        settings = config.Settings(home_dir=home_dir)
        assert settings.find_codex_home() == home_dir / ".codex"

    def test_env_override(self, home_dir: _pathlib.Path, tmp_path: _pathlib.Path) -> None:
        """CODEX_HOME replaces ~/.codex."""
        custom = tmp_path / "custom-home"
        with _mock.patch.dict(_os.environ, {"CODEX_HOME": str(custom)}):
            settings = config.Settings(home_dir=home_dir)
        assert settings.find_codex_home() == custom

    def test_empty_env_override_is_ignored(self, home_dir: _pathlib.Path) -> None:
        """An empty CODEX_HOME falls back to ~/.codex."""
        with _mock.patch.dict(_os.environ, {"CODEX_HOME": ""}):
            settings = config.Settings(home_dir=home_dir)
        assert settings.find_codex_home() == home_dir / ".codex"

    def test_empty_constructor_override_is_ignored(self, home_dir: _pathlib.Path) -> None:
        """An empty codex_home argument is treated as unset."""
        settings = config.Settings(home_dir=home_dir, codex_home="")
        assert settings.codex_home is None
        assert settings.find_codex_home() == home_dir / ".codex"

    def test_constructor_beats_environment(
        self, home_dir: _pathlib.Path, tmp_path: _pathlib.Path
    ) -> None:
        """Constructor arguments take precedence over CODEX_HOME."""
        with _mock.patch.dict(_os.environ, {"CODEX_HOME": str(tmp_path / "env")}):
            settings = config.Settings(home_dir=home_dir, codex_home=tmp_path / "arg")
        assert settings.find_codex_home() == tmp_path / "arg"

    def test_derived_skills_paths(self, tmp_path: _pathlib.Path) -> None:
        """User and system skills dirs hang off the config dir."""
        settings = config.Settings(codex_home=tmp_path)
        assert settings.user_skills_dir == tmp_path / "skills"
        assert settings.system_skills_dir == tmp_path / "skills" / ".system"


    def test_unknown_home_dir(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        """If the home dir cannot be determined, no skills dirs are derived."""

        def _no_home() -> _pathlib.Path:
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(_pathlib.Path, "home", _no_home)
        settings = config.Settings()

        assert settings.home_dir is None
        assert settings.find_codex_home() is None
        assert settings.user_skills_dir is None
        assert settings.system_skills_dir is None

    def test_codex_home_without_home_dir(self, tmp_path: _pathlib.Path) -> None:
        """CODEX_HOME still works when the home dir is unknown."""
        settings = config.Settings(home_dir=None, codex_home=tmp_path)
        assert settings.user_skills_dir == tmp_path / "skills"


class TestLimits:
    """Tests for scan limit settings."""

    def test_defaults_match_constants(self) -> None:
        """Defaults are the documented limits."""
        settings = config.Settings()
        assert settings.max_scan_depth == constants.MAX_SCAN_DEPTH == 6
        assert settings.max_dirs_per_root == constants.MAX_SKILLS_DIRS_PER_ROOT == 2000

    def test_prefixed_env_override(self) -> None:
        """Limits can be set through CODEX_SKILLS_* variables."""
        with _mock.patch.dict(_os.environ, {"CODEX_SKILLS_MAX_SCAN_DEPTH": "2"}):
            settings = config.Settings()
        assert settings.max_scan_depth == 2

    def test_rejects_zero_dir_cap(self) -> None:
        """The directory cap must allow at least the root."""
        with _pytest.raises(ValueError):
            config.Settings(max_dirs_per_root=0)


class TestAdminRoot:
    """Tests for the admin skills directory default."""

    @_pytest.mark.skipif(_os.name != "posix", reason="admin root is POSIX-only")
    def test_posix_default(self) -> None:
        """On POSIX the admin root is /etc/codex/skills."""
        assert config.Settings().admin_skills_dir == _pathlib.Path("/etc/codex/skills")

    def test_can_be_disabled(self) -> None:
        """admin_skills_dir=None disables the admin root."""
        assert config.Settings(admin_skills_dir=None).admin_skills_dir is None

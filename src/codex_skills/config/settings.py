"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with CODEX_SKILLS_ prefix
3. CODEX_HOME (un-prefixed) for the home config directory

Empty environment values are treated as unset, so CODEX_HOME="" falls
back to ~/.codex.

Settings doubles as the configuration provider for discovery: every
entry point takes an optional Settings instance, which lets tests point
discovery at temporary directories without touching the real
environment.
"""

import os as _os
import pathlib as _pathlib

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import codex_skills.constants as constants


def _default_home_dir() -> _pathlib.Path | None:
    try:
        return _pathlib.Path.home()
    except RuntimeError:
        return None


def _default_admin_skills_dir() -> _pathlib.Path | None:
    """Admin skills live in /etc on Unix-like systems only."""
    if _os.name == "posix":
        return _pathlib.Path(constants.ADMIN_SKILLS_DIR)
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    codex-skills configuration settings.

    All settings can be overridden via environment variables with the
    CODEX_SKILLS_ prefix, e.g. CODEX_SKILLS_MAX_SCAN_DEPTH=3. The home
    config directory is read from CODEX_HOME.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="CODEX_SKILLS_",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    codex_home: _pathlib.Path | None = _pydantic.Field(
        default=None,
        description="Home config directory override",
        validation_alias=_pydantic.AliasChoices("codex_home", constants.CODEX_HOME_ENV),
    )

    home_dir: _pathlib.Path | None = _pydantic.Field(
        default_factory=_default_home_dir,
        description="User home directory (None if it cannot be determined)",
    )

    admin_skills_dir: _pathlib.Path | None = _pydantic.Field(
        default_factory=_default_admin_skills_dir,
        description="System-wide skills directory (None disables the admin root)",
    )

    max_scan_depth: int = _pydantic.Field(
        default=constants.MAX_SCAN_DEPTH,
        ge=0,
        description="Deepest directory level entered below a skills root",
    )

    max_dirs_per_root: int = _pydantic.Field(
        default=constants.MAX_SKILLS_DIRS_PER_ROOT,
        ge=1,
        description="Maximum directories visited per skills root",
    )

    @_pydantic.field_validator("codex_home", mode="before")
    @classmethod
    def _empty_codex_home_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value:
            return None
        return value

    def find_codex_home(self) -> _pathlib.Path | None:
        """Return the home config directory (CODEX_HOME or ~/.codex), None if neither is known."""
        if self.codex_home is not None:
            return self.codex_home
        if self.home_dir is None:
            return None
        return self.home_dir / constants.HOME_CONFIG_DIR_NAME

    @property
    def user_skills_dir(self) -> _pathlib.Path | None:
        """User skills directory (<codex_home>/skills)."""
        codex_home = self.find_codex_home()
        if codex_home is None:
            return None
        return codex_home / constants.SKILLS_DIR_NAME

    @property
    def system_skills_dir(self) -> _pathlib.Path | None:
        """Bundled system skills directory (<codex_home>/skills/.system)."""
        user_skills_dir = self.user_skills_dir
        if user_skills_dir is None:
            return None
        return user_skills_dir / constants.SYSTEM_SKILLS_DIR_NAME

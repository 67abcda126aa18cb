"""
Interface overlays for skills.

A skill directory may carry agents/openai.yaml next to SKILL.md:

    interface:
      display_name: "A Tool"
      short_description: "Does things"

The overlay is optional and display-only. A broken overlay never fails
the skill itself; it is logged and ignored.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import yaml as _yaml

import codex_skills.constants as constants

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass(frozen=True)
class SkillInterface:
    """Display overrides loaded from agents/openai.yaml."""

    display_name: str | None = None
    short_description: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "display_name": self.display_name,
            "short_description": self.short_description,
        }


class SkillInterfaceFile(_pydantic.BaseModel):
    """The `interface` section of openai.yaml."""

    model_config = _pydantic.ConfigDict(extra="ignore")

    display_name: _pydantic.StrictStr | None = None
    short_description: _pydantic.StrictStr | None = None


class SkillMetadataFile(_pydantic.BaseModel):
    """Top level of openai.yaml; everything but `interface` is ignored."""

    model_config = _pydantic.ConfigDict(extra="ignore")

    interface: SkillInterfaceFile | None = None

    @_pydantic.field_validator("interface", mode="before")
    @classmethod
    def _empty_interface_is_unset(cls, value: object) -> object:
        if value == "":
            return None
        return value


def load_yaml_text(text: str) -> _typing.Any:
    """
    Load YAML keeping every scalar as a string.

    Unlike safe_load, `2048`, `yes` and `2024-01-01` stay text and an
    empty value is "" rather than None. Sequences and mappings keep
    their shape.

    Raises:
        yaml.YAMLError: If the text is not valid YAML.
    """
    return _yaml.load(text, Loader=_yaml.BaseLoader)


def get_interface_path(skill_path: _pathlib.Path) -> _pathlib.Path:
    """Path of the overlay file for a SKILL.md path."""
    return skill_path.parent / constants.INTERFACE_DIR_NAME / constants.INTERFACE_FILENAME


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def load_skill_interface(skill_path: _pathlib.Path) -> SkillInterface | None:
    """
    Load display overrides for the skill at skill_path.

    Args:
        skill_path: Path to the SKILL.md file.

    Returns:
        SkillInterface if the overlay exists and sets at least one
        non-blank field, otherwise None.
    """
    metadata_path = get_interface_path(skill_path)

    try:
        contents = metadata_path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        return None
    except (OSError, UnicodeDecodeError) as e:
        _logger.warning("ignoring %s: failed to read openai.yaml: %s", metadata_path, e)
        return None

    try:
        data = load_yaml_text(contents)
        parsed = SkillMetadataFile.model_validate(data if data is not None else {})
    except (_yaml.YAMLError, _pydantic.ValidationError) as e:
        _logger.warning("ignoring %s: invalid openai.yaml: %s", metadata_path, e)
        return None

    if parsed.interface is None:
        return None

    display_name = _clean(parsed.interface.display_name)
    short_description = _clean(parsed.interface.short_description)
    if display_name is None and short_description is None:
        return None

    return SkillInterface(
        display_name=display_name,
        short_description=short_description,
    )

"""
Skill metadata and SKILL.md parsing.

Skills are defined by a SKILL.md file with YAML frontmatter. Only the
frontmatter is read; the markdown body is never interpreted here.

The frontmatter must be the very first thing in the file:

    ---
    name: my-skill
    description: What the skill does and when to use it
    metadata:
      short-description: Optional one-liner for compact listings
    ---
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import yaml as _yaml

import codex_skills.constants as constants
import codex_skills.skills.interface as interface_module


class SkillScope(_enum.Enum):
    """
    Where a skill was discovered from.

    Lower rank means higher precedence. Scan order and precedence are
    independent: the system root is scanned before the user root, but
    user skills still sort ahead of system skills.
    """

    REPO = "repo"
    USER = "user"
    SYSTEM = "system"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        """Sort rank (0 = highest precedence)."""
        return _SCOPE_RANK[self]

    @property
    def follow_symlinks(self) -> bool:
        """Whether roots of this scope follow symlinked directories."""
        return _SCOPE_FOLLOWS_SYMLINKS[self]


_SCOPE_RANK: dict[SkillScope, int] = {
    SkillScope.REPO: 0,
    SkillScope.USER: 1,
    SkillScope.SYSTEM: 2,
    SkillScope.ADMIN: 3,
}

_SCOPE_FOLLOWS_SYMLINKS: dict[SkillScope, bool] = {
    SkillScope.REPO: True,
    SkillScope.USER: True,
    SkillScope.SYSTEM: False,
    SkillScope.ADMIN: True,
}


@_dataclasses.dataclass(frozen=True)
class SkillMetadata:
    """
    Indexed metadata for one discovered skill.

    Identity is the canonical path of the SKILL.md file: two records
    with the same path describe the same skill.
    """

    name: str
    """Trimmed skill name from frontmatter."""

    description: str
    """Trimmed skill description from frontmatter."""

    short_description: str | None
    """Trimmed metadata.short-description, None if absent or blank."""

    interface: interface_module.SkillInterface | None
    """Display overrides, None if no usable overlay exists."""

    path: _pathlib.Path
    """Canonical absolute path to SKILL.md."""

    scope: SkillScope
    """Scope of the root the skill was found under."""

    @property
    def display_name(self) -> str:
        """Overlay display name, falling back to the frontmatter name."""
        if self.interface is not None and self.interface.display_name:
            return self.interface.display_name
        return self.name

    @property
    def display_description(self) -> str:
        """Overlay short description, then frontmatter short description, then description."""
        if self.interface is not None and self.interface.short_description:
            return self.interface.short_description
        if self.short_description:
            return self.short_description
        return self.description

    def sort_key(self) -> tuple[int, str, _pathlib.Path]:
        """Total ordering key: scope rank, then name, then path."""
        return (self.scope.rank, self.name, self.path)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "short_description": self.short_description,
            "display_name": self.display_name,
            "display_description": self.display_description,
            "interface": self.interface.to_dict() if self.interface else None,
            "path": str(self.path),
            "scope": self.scope.value,
        }


# =============================================================================
# Parse errors
# =============================================================================


class SkillParseError(ValueError):
    """Base class for SKILL.md parse failures."""


class SkillReadError(SkillParseError):
    """The file could not be read."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"failed to read file: {error}")
        self.error = error


class MissingFrontmatterError(SkillParseError):
    """The file does not start with a closed --- block."""

    def __init__(self) -> None:
        super().__init__("missing YAML frontmatter delimited by ---")


class InvalidYamlError(SkillParseError):
    """The frontmatter is not valid YAML of the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid YAML: {detail}")


class MissingFieldError(SkillParseError):
    """A required field is blank after trimming."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing field `{field}`")
        self.field = field


# =============================================================================
# Frontmatter models
# =============================================================================


class SkillFrontmatterMetadata(_pydantic.BaseModel):
    """The optional nested `metadata` section."""

    model_config = _pydantic.ConfigDict(extra="ignore", populate_by_name=True)

    short_description: _pydantic.StrictStr | None = _pydantic.Field(
        default=None,
        alias="short-description",
    )


class SkillFrontmatter(_pydantic.BaseModel):
    """
    Frontmatter parsed from a SKILL.md file.

    Keys are required to be present and scalar here; blank values are
    rejected later so they can be reported as a missing field.
    """

    model_config = _pydantic.ConfigDict(extra="ignore")

    name: _pydantic.StrictStr
    description: _pydantic.StrictStr
    metadata: SkillFrontmatterMetadata = _pydantic.Field(
        default_factory=SkillFrontmatterMetadata,
    )

    @_pydantic.field_validator("metadata", mode="before")
    @classmethod
    def _empty_metadata_is_default(cls, value: object) -> object:
        if value == "":
            return {}
        return value


def extract_frontmatter(contents: str) -> str | None:
    """
    Return the YAML between the leading --- lines, or None.

    The first line must be exactly ---. Trailing carriage returns are
    stripped from every line, so CRLF files parse the same as LF files.
    """
    lines = contents.split("\n")
    if lines[0].rstrip("\r") != constants.FRONTMATTER_DELIMITER:
        return None

    collected: list[str] = []
    for line in lines[1:]:
        line = line.rstrip("\r")
        if line == constants.FRONTMATTER_DELIMITER:
            return "".join(f"{item}\n" for item in collected)
        collected.append(line)

    return None


def parse_frontmatter(frontmatter_yaml: str) -> SkillFrontmatter:
    """
    Parse and validate a frontmatter block.

    Scalars are read as text, so `name: 2048` is the name "2048" and an
    empty `description:` is a blank description, not a null.

    Raises:
        InvalidYamlError: If the YAML is malformed or has the wrong shape.
        MissingFieldError: If name or description is blank.
    """
    try:
        data = interface_module.load_yaml_text(frontmatter_yaml)
    except _yaml.YAMLError as e:
        raise InvalidYamlError(str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidYamlError(f"expected a mapping, got {type(data).__name__}")

    try:
        parsed = SkillFrontmatter.model_validate(data)
    except _pydantic.ValidationError as e:
        raise InvalidYamlError(str(e)) from e

    if not parsed.name.strip():
        raise MissingFieldError("name")
    if not parsed.description.strip():
        raise MissingFieldError("description")

    return parsed


def _canonicalize(path: _pathlib.Path) -> _pathlib.Path:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return path


def parse_skill_file(path: _pathlib.Path, scope: SkillScope) -> SkillMetadata:
    """
    Parse one SKILL.md file into SkillMetadata.

    Args:
        path: Path to the SKILL.md file.
        scope: Scope of the root the file was found under.

    Returns:
        Parsed metadata, with the interface overlay applied if present.

    Raises:
        SkillParseError: One of SkillReadError, MissingFrontmatterError,
            InvalidYamlError or MissingFieldError.
    """
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SkillReadError(e) from e

    frontmatter_yaml = extract_frontmatter(contents)
    if frontmatter_yaml is None:
        raise MissingFrontmatterError()

    parsed = parse_frontmatter(frontmatter_yaml)

    short_description = parsed.metadata.short_description
    if short_description is not None:
        short_description = short_description.strip() or None

    return SkillMetadata(
        name=parsed.name.strip(),
        description=parsed.description.strip(),
        short_description=short_description,
        interface=interface_module.load_skill_interface(path),
        path=_canonicalize(path),
        scope=scope,
    )

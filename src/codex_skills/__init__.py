"""
codex-skills - skill discovery engine

Locates SKILL.md definitions across repo, user, system and admin
locations and indexes their metadata.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("codex-skills")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from codex_skills.config import Settings  # noqa: E402
from codex_skills.skills import SkillMetadata, SkillScope, load_skills  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "Settings",
    "SkillMetadata",
    "SkillScope",
    "load_skills",
]

"""
Skill discovery for codex-skills.

Skills are SKILL.md files with YAML frontmatter. They are discovered from
(in scan order):
1. <dir>/.codex/skills/ for each directory from cwd up to the repo root
2. $CODEX_HOME/skills/.system/ - Bundled system skills
3. $CODEX_HOME/skills/ - User skills (CODEX_HOME defaults to ~/.codex)
4. /etc/codex/skills/ - Admin skills (Unix-like systems)

Results are deduplicated by canonical path and sorted by scope
(repo, user, system, admin), then name, then path.
"""

from codex_skills.skills.discovery import (
    SkillDiscovery,
    discover_skills_under_root,
    load_skills,
    merge_skills,
)
from codex_skills.skills.interface import SkillInterface, load_skill_interface
from codex_skills.skills.registry import SkillRegistry
from codex_skills.skills.roots import (
    SkillRoot,
    find_repo_root,
    repo_dirs_between,
    skill_roots,
)
from codex_skills.skills.skill import (
    InvalidYamlError,
    MissingFieldError,
    MissingFrontmatterError,
    SkillMetadata,
    SkillParseError,
    SkillReadError,
    SkillScope,
    extract_frontmatter,
    parse_skill_file,
)
from codex_skills.skills.walker import WalkResult, walk_skill_root

__all__ = [
    # Core types
    "SkillInterface",
    "SkillMetadata",
    "SkillScope",
    # Parsing
    "extract_frontmatter",
    "load_skill_interface",
    "parse_skill_file",
    "InvalidYamlError",
    "MissingFieldError",
    "MissingFrontmatterError",
    "SkillParseError",
    "SkillReadError",
    # Roots and walking
    "SkillRoot",
    "WalkResult",
    "find_repo_root",
    "repo_dirs_between",
    "skill_roots",
    "walk_skill_root",
    # Discovery and registry
    "SkillDiscovery",
    "SkillRegistry",
    "discover_skills_under_root",
    "load_skills",
    "merge_skills",
]

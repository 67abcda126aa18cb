"""
Main CLI entry point for codex-skills.

Provides the command-line interface using Click.
"""

import json as _json
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import click as _click
import rich.console as _rich_console
import rich.table as _rich_table

import codex_skills
import codex_skills.config as config
import codex_skills.constants as constants
import codex_skills.skills as skills

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    _logging.basicConfig(
        level=_logging.DEBUG if verbose else _logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_skill_file(path: _pathlib.Path) -> _pathlib.Path:
    """Accept either a SKILL.md path or a directory containing one."""
    if path.is_dir():
        return path / constants.SKILL_FILENAME
    return path


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(codex_skills.__version__, "-v", "--version", prog_name="codex-skills")
@_click.option(
    "--cwd",
    type=_click.Path(file_okay=False, path_type=_pathlib.Path),
    default=None,
    help="Working directory to discover from (defaults to the current directory)",
)
@_click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@_click.pass_context
def cli(ctx: _click.Context, cwd: _pathlib.Path | None, verbose: bool) -> None:
    """
    codex-skills - discover SKILL.md skill definitions.

    \b
    Examples:
        codex-skills list                 # Skills visible from here
        codex-skills list --json          # Same, as JSON
        codex-skills roots                # Where skills are looked up
        codex-skills show my-skill        # Details for one skill
        codex-skills validate ./my-skill  # Check a single SKILL.md
    """
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = config.Settings()
    ctx.obj["cwd"] = cwd if cwd is not None else _pathlib.Path.cwd()


# =============================================================================
# Skill Commands
# =============================================================================


@cli.command(name="list")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.pass_context
def skill_list(ctx: _click.Context, json_output: bool) -> None:
    """List all discovered skills."""
    settings: config.Settings = ctx.obj["settings"]
    registry = skills.SkillRegistry(ctx.obj["cwd"], settings)
    skill_list = registry.list_skills()

    if json_output:
        _click.echo(_json.dumps([s.to_dict() for s in skill_list], indent=2))
        return

    if not skill_list:
        _click.echo("No skills found.")
        return

    table = _rich_table.Table(title=f"Discovered Skills ({len(skill_list)})")
    table.add_column("Name", no_wrap=True)
    table.add_column("Scope")
    table.add_column("Description")
    table.add_column("Path", overflow="fold")
    for s in skill_list:
        table.add_row(s.display_name, s.scope.value, s.display_description, str(s.path))
    _rich_console.Console().print(table)


@cli.command(name="roots")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.pass_context
def skill_roots(ctx: _click.Context, json_output: bool) -> None:
    """Show skill roots in scan order."""
    settings: config.Settings = ctx.obj["settings"]
    roots = skills.skill_roots(ctx.obj["cwd"], settings)

    if json_output:
        data = [
            {
                "path": str(root.path),
                "scope": root.scope.value,
                "follow_symlinks": root.follow_symlinks,
                "exists": root.path.is_dir(),
            }
            for root in roots
        ]
        _click.echo(_json.dumps(data, indent=2))
        return

    _click.echo("Skill Discovery Paths:")
    for root in roots:
        exists = "✓" if root.path.is_dir() else "(not found)"
        links = "" if root.follow_symlinks else " [no symlinks]"
        _click.echo(f"  {root.scope.value:<7} {root.path} {exists}{links}")


@cli.command(name="show")
@_click.argument("name")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.pass_context
def skill_show(ctx: _click.Context, name: str, json_output: bool) -> None:
    """Show details for a specific skill."""
    settings: config.Settings = ctx.obj["settings"]
    registry = skills.SkillRegistry(ctx.obj["cwd"], settings)
    skill = registry.get_skill(name)

    if skill is None:
        if json_output:
            _click.echo(_json.dumps({"error": f"Skill not found: {name}"}))
        else:
            _click.echo(f"Error: Skill '{name}' not found", err=True)
        raise SystemExit(1)

    if json_output:
        _click.echo(_json.dumps(skill.to_dict(), indent=2))
        return

    _click.echo(f"Skill: {skill.name}")
    if skill.display_name != skill.name:
        _click.echo(f"  Display name: {skill.display_name}")
    _click.echo(f"  Description: {skill.description}")
    if skill.short_description:
        _click.echo(f"  Short description: {skill.short_description}")
    if skill.interface and skill.interface.short_description:
        _click.echo(f"  Interface description: {skill.interface.short_description}")
    _click.echo(f"  Scope: {skill.scope.value}")
    _click.echo(f"  Path: {skill.path}")


@cli.command(name="validate")
@_click.argument("path", type=_click.Path(path_type=_pathlib.Path))
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
def skill_validate(path: _pathlib.Path, json_output: bool) -> None:
    """Validate a SKILL.md file (or a directory containing one)."""
    skill_file = _resolve_skill_file(path)

    result: dict[str, _typing.Any] = {
        "path": str(skill_file),
        "valid": False,
        "error": None,
    }

    try:
        skill = skills.parse_skill_file(skill_file, skills.SkillScope.USER)
        result["valid"] = True
        result["name"] = skill.name
        result["description"] = skill.description
        result["display_name"] = skill.display_name
    except skills.SkillParseError as e:
        result["error"] = str(e)

    if json_output:
        _click.echo(_json.dumps(result, indent=2))
    else:
        _click.echo(f"Skill: {skill_file}")
        if result["error"]:
            _click.echo("  Status: ✗ invalid")
            _click.echo(f"  Error: {result['error']}")
        else:
            _click.echo("  Status: ✓ valid")
            _click.echo(f"  Name: {result['name']}")
            if result["display_name"] != result["name"]:
                _click.echo(f"  Display name: {result['display_name']}")

    if not result["valid"]:
        raise SystemExit(1)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="codex-skills")


if __name__ == "__main__":
    main()

"""Root CLI command for aem-workflow-skill."""

from __future__ import annotations

from pathlib import Path

import click

from aem_workflow_skill import __version__
from aem_workflow_skill.commands._context import AppContext
from aem_workflow_skill.config.settings import SkillSettings
from aem_workflow_skill.domain.platforms import DEFAULT_PLATFORM, Scope, platform_ids

_EXAMPLES = """\
  aem-workflow-skill                      # Claude Code, current project
  aem-workflow-skill -p all               # every supported platform
  aem-workflow-skill -p copilot,cursor    # a subset
  aem-workflow-skill --global             # ~/.claude/skills/
  aem-workflow-skill -p gemini --uninstall
  aem-workflow-skill --list
  aem-workflow-skill --json -p all"""


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(_EXAMPLES)
    ctx.exit(0)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="aem-workflow-skill")
@click.option(
    "--examples",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_examples,
    help="Show usage examples.",
)
@click.option(
    "-p",
    "--platform",
    "platforms",
    multiple=True,
    metavar="ID",
    help=(
        f"Target platform ({', '.join(platform_ids())} or all; default {DEFAULT_PLATFORM}). "
        "Repeatable, comma-separated."
    ),
)
@click.option("-g", "--global", "global_scope", is_flag=True, help="Install to the home directory.")
@click.option("-u", "--uninstall", is_flag=True, help="Remove installed skill files.")
@click.option("-l", "--list", "list_only", is_flag=True, help="List supported platforms.")
@click.option(
    "--source",
    "source_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Use this skill document instead of the packaged one.",
)
@click.option(
    "--strict-frontmatter",
    is_flag=True,
    help="Keep documents whose frontmatter is never closed.",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    platforms: tuple[str, ...],
    global_scope: bool,
    uninstall: bool,
    list_only: bool,
    source_path: Path | None,
    strict_frontmatter: bool,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Install the AEM Workflow Development skill for AI coding assistants."""
    # Unset flags pass None so AEM_SKILL_* env vars still apply.
    settings = SkillSettings.from_cli(
        source_path=source_path,
        strict_frontmatter=strict_frontmatter or None,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    app = AppContext(settings)
    ctx.obj = app
    app.banner()

    if list_only:
        app.emit(app.installer.list_platforms())
        return

    scope = Scope.GLOBAL if global_scope else Scope.PROJECT
    if uninstall:
        app.emit(app.installer.uninstall(platforms, scope=scope))
    else:
        app.emit(app.installer.install(platforms, scope=scope))

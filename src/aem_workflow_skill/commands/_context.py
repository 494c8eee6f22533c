"""AppContext — shared state for one CLI invocation.

Created by the root command. Configures logging, builds the
InstallService lazily, and centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aem_workflow_skill.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from aem_workflow_skill.config.settings import SkillSettings
    from aem_workflow_skill.services.installer import InstallService
    from aem_workflow_skill.services.result import ServiceResult


class AppContext:
    """Per-invocation context.

    The installer is created on first use so ``--help`` and ``--list``
    never touch the skill source.
    """

    def __init__(self, settings: SkillSettings) -> None:
        self.settings = settings
        self._installer: InstallService | None = None

        from aem_workflow_skill.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def installer(self) -> InstallService:
        """The install service (created lazily on first access)."""
        if self._installer is None:
            from aem_workflow_skill.infrastructure.filesystem import LocalFileSystem
            from aem_workflow_skill.services.installer import InstallService

            self._installer = InstallService(
                LocalFileSystem(),
                working_dir=self.settings.working_dir,
                home_dir=self.settings.home_dir,
                source_path=self.settings.source_path,
                strict_frontmatter=self.settings.strict_frontmatter,
            )
        return self._installer

    @property
    def human_output(self) -> bool:
        return not (self.settings.json_output or self.settings.quiet)

    def banner(self) -> None:
        """Print the startup banner in human output mode."""
        if not self.human_output:
            return
        from aem_workflow_skill.output.renderers import render_banner

        click.echo(render_banner())

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings (scope downgrades) go to stderr so they don't pollute
          piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reignstat.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from reignstat.config.settings import ReignSettings
    from reignstat.services.reign import ReignService
    from reignstat.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: ReignSettings) -> None:
        self.settings = settings

        from reignstat.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def service(
        self,
        *,
        location: str | None = None,
        as_of_year: int | None = None,
        questions: list[str] | None = None,
    ) -> ReignService:
        """Build a ReignService with per-command overrides applied."""
        from reignstat.services.reign import ReignService

        settings = self.settings.with_overrides(
            location=location,
            as_of_year=as_of_year,
            questions=questions,
        )
        return ReignService(settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

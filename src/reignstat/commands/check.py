"""Command: validate the ruler data without computing statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reignstat.commands._base import ReignCommand, source_options

if TYPE_CHECKING:
    from reignstat.commands._context import AppContext


@click.command(
    cls=ReignCommand,
    examples="""\
  reignstat check
  reignstat check --source kings.json
  reignstat --json check --source https://example.org/kings.json""",
)
@source_options
@click.pass_obj
def check(app: AppContext, location: str | None, as_of_year: int | None) -> None:
    """Load the rulers and report every structural violation."""
    svc = app.service(location=location, as_of_year=as_of_year)
    app.emit(svc.check())

"""Command: answer the ruler statistics questions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reignstat.commands._base import ReignCommand, source_options
from reignstat.config.models import ALL_QUESTIONS

if TYPE_CHECKING:
    from reignstat.commands._context import AppContext


@click.command(
    cls=ReignCommand,
    examples="""\
  reignstat report
  reignstat report --source kings.json --as-of 2022
  reignstat report -Q longest_ruling_house -Q most_used_first_name
  reignstat --json report""",
)
@source_options
@click.option(
    "-Q",
    "--question",
    "questions",
    multiple=True,
    type=click.Choice(ALL_QUESTIONS),
    help="Answer only this question (repeatable). Defaults to [report] questions.",
)
@click.pass_obj
def report(
    app: AppContext,
    location: str | None,
    as_of_year: int | None,
    questions: tuple[str, ...],
) -> None:
    """Validate the rulers, then answer the statistics questions."""
    svc = app.service(location=location, as_of_year=as_of_year, questions=list(questions))
    app.emit(svc.report())

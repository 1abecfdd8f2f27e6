"""Subcommand modules for reignstat.

Provides register_commands() which uses deferred imports to keep
``reignstat --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from reignstat.commands.check import check
    from reignstat.commands.report import report

    cli.add_command(check)
    cli.add_command(report)

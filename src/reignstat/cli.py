"""``reignstat`` entry point.

Global flags choose output mode and logging and name the config file;
the ``check`` and ``report`` subcommands read the ruler source.
"""

from __future__ import annotations

import click

from reignstat import __version__
from reignstat.commands import register_commands
from reignstat.commands._context import AppContext
from reignstat.config.settings import ReignSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="reignstat")
@click.option("--json", "json_output", is_flag=True, help="Print the result envelope as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print answers only.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug events to stderr.")
@click.option("--log-json", is_flag=True, help="Emit log events as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Path to a reignstat.toml to use instead of discovery.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """reignstat — statistics over historical-ruler records."""
    ctx.ensure_object(dict)
    settings = ReignSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import LOG_LEVELS, ObjtasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (defaults to OBJTASKS_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """objtasks - rectangles, JSON helpers and CSS selector building."""
    try:
        config = ObjtasksConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.selector import selector  # noqa: E402
from objtasks.cli.shapes import area  # noqa: E402
from objtasks.cli.jsonio import json_command  # noqa: E402

cli.add_command(selector)
cli.add_command(area)
cli.add_command(json_command)

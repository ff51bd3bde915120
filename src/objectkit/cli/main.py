"""objectkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from objectkit import __version__
from objectkit.config import ObjectKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objectkit")
@click.option(
    "--log-level",
    default=ObjectKitConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Level for the objectkit logger",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objectkit - CSS selector builder, JSON codec and rectangle helpers."""
    config = ObjectKitConfig(log_level=log_level.upper())
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("objectkit").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from objectkit.cli.area import area  # noqa: E402
from objectkit.cli.build import build  # noqa: E402
from objectkit.cli.fmt import fmt  # noqa: E402

cli.add_command(build)
cli.add_command(area)
cli.add_command(fmt)

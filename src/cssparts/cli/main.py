"""cssparts CLI entry point: Click group with subcommands."""

import logging

import click

from cssparts import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssparts")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cssparts - split CSS into literals and selector/variable/property/url parts."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from cssparts.cli.commands import inspect, module, parse  # noqa: E402

cli.add_command(parse)
cli.add_command(module)
cli.add_command(inspect)

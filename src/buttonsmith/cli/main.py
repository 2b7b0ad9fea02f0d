"""Buttonsmith CLI entry point: Click group with subcommands."""

import logging

import click

from buttonsmith import __version__


@click.group()
@click.version_option(version=__version__, prog_name="buttonsmith")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Buttonsmith - compile button designs into CSS, classes and tokens."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from buttonsmith.cli.export import css, export, tailwind, tokens  # noqa: E402
from buttonsmith.cli.defaults import defaults  # noqa: E402

cli.add_command(css)
cli.add_command(tailwind)
cli.add_command(tokens)
cli.add_command(export)
cli.add_command(defaults)

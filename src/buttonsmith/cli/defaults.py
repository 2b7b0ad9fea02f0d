"""CLI command: buttonsmith defaults -- print the canonical default config."""

from __future__ import annotations

import click

from buttonsmith.model import default_config, dump_config


@click.command()
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indent width")
def defaults(indent: int) -> None:
    """Print the default button config as JSON.

    The output is a valid ``--config`` input for the export commands and a
    starting point for hand-edited designs.
    """
    click.echo(dump_config(default_config(), indent=indent))

"""CLI commands: buttonsmith css / tailwind / tokens / export."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from buttonsmith.config import ExportSettings
from buttonsmith.emitters import BUILTIN_EMITTERS, get_emitter
from buttonsmith.errors import ConfigError
from buttonsmith.model import ButtonConfig, default_config, load_config

log = logging.getLogger(__name__)

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Button config JSON file (defaults to the built-in design)",
)
_output_option = click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write to this file instead of stdout",
)


def _load(config_path: str | None) -> ButtonConfig:
    """Load the config at *config_path*, exiting with code 1 if it is malformed."""
    if config_path is None:
        log.info("No config given, using the default design")
        return default_config()
    try:
        return load_config(Path(config_path))
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)


def _emit(text: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(text)
        return
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    log.info("Wrote %s (%d chars)", path, len(text))


def _render(fmt: str, config_path: str | None, output_path: str | None, settings: ExportSettings) -> None:
    config = _load(config_path)
    _emit(get_emitter(fmt).render(config, settings), output_path)


@click.command()
@_config_option
@_output_option
@click.option("--selector", default=".btn", show_default=True, help="Base CSS selector")
def css(config_path: str | None, output_path: str | None, selector: str) -> None:
    """Render the plain CSS stylesheet."""
    _render("css", config_path, output_path, ExportSettings(selector=selector))


@click.command()
@_config_option
@_output_option
def tailwind(config_path: str | None, output_path: str | None) -> None:
    """Render the Tailwind utility-class string."""
    _render("tailwind", config_path, output_path, ExportSettings())


@click.command()
@_config_option
@_output_option
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indent width")
def tokens(config_path: str | None, output_path: str | None, indent: int) -> None:
    """Render the design-token JSON document."""
    _render("tokens", config_path, output_path, ExportSettings(json_indent=indent))


@click.command()
@_config_option
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False),
    default="button-export",
    show_default=True,
    help="Directory to write the artifacts into",
)
@click.option("--selector", default=".btn", show_default=True, help="Base CSS selector")
def export(config_path: str | None, out_dir: str, selector: str) -> None:
    """Write all three artifacts into a directory."""
    config = _load(config_path)
    settings = ExportSettings(selector=selector)
    target = Path(out_dir)
    target.mkdir(parents=True, exist_ok=True)

    for emitter in BUILTIN_EMITTERS.values():
        path = target / emitter.filename
        path.write_text(emitter.render(config, settings) + "\n", encoding="utf-8")
        click.echo(f"{emitter.name}: {path}")

"""Artifact emitters and the registry of built-in output formats."""

from __future__ import annotations

from buttonsmith.config import ExportSettings
from buttonsmith.emitters.base import Emitter
from buttonsmith.emitters.stylesheet import generate_css, preview_css
from buttonsmith.emitters.tokens import build_token_document, generate_tokens
from buttonsmith.emitters.utility import generate_tailwind_classes
from buttonsmith.model.button import ButtonConfig


class StylesheetEmitter:
    name = "css"
    media_type = "text/css"
    filename = "button.css"

    def render(self, config: ButtonConfig, settings: ExportSettings | None = None) -> str:
        return generate_css(config, settings)


class UtilityClassEmitter:
    name = "tailwind"
    media_type = "text/plain"
    filename = "button.classes.txt"

    def render(self, config: ButtonConfig, settings: ExportSettings | None = None) -> str:
        return generate_tailwind_classes(config)


class TokenEmitter:
    name = "tokens"
    media_type = "application/json"
    filename = "button.tokens.json"

    def render(self, config: ButtonConfig, settings: ExportSettings | None = None) -> str:
        return generate_tokens(config, settings)


BUILTIN_EMITTERS: dict[str, Emitter] = {
    e.name: e for e in (StylesheetEmitter(), UtilityClassEmitter(), TokenEmitter())
}


def get_emitter(name: str) -> Emitter:
    """Look up a built-in emitter by format name.

    Raises:
        KeyError: if *name* is not a known format.
    """
    try:
        return BUILTIN_EMITTERS[name]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_EMITTERS))
        raise KeyError(f"Unknown export format {name!r} (known: {known})") from None


def render_all(config: ButtonConfig, settings: ExportSettings | None = None) -> dict[str, str]:
    """Render every built-in format; each emitter runs independently."""
    return {name: emitter.render(config, settings) for name, emitter in BUILTIN_EMITTERS.items()}


__all__ = [
    "Emitter",
    "StylesheetEmitter",
    "UtilityClassEmitter",
    "TokenEmitter",
    "BUILTIN_EMITTERS",
    "get_emitter",
    "render_all",
    "generate_css",
    "preview_css",
    "generate_tailwind_classes",
    "generate_tokens",
    "build_token_document",
]

"""Base protocol for artifact emitters."""

from __future__ import annotations

from typing import Protocol

from buttonsmith.config import ExportSettings
from buttonsmith.model.button import ButtonConfig


class Emitter(Protocol):
    """A ButtonConfig-to-text encoder for one output format."""

    name: str
    media_type: str
    filename: str

    def render(self, config: ButtonConfig, settings: ExportSettings | None = None) -> str: ...

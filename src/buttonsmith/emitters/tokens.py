"""Design-token exporter: a JSON snapshot for downstream design systems.

The ``variants`` object carries hover, active, focus and disabled only; the
default state is summarised under ``base`` and loading is not exported.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from buttonsmith.config import ExportSettings
from buttonsmith.model.button import ButtonConfig
from buttonsmith.model.codec import to_json_value
from buttonsmith.model.state import VisualState

__all__ = ["VARIANT_STATES", "build_token_document", "generate_tokens"]

log = logging.getLogger(__name__)

VARIANT_STATES = (
    VisualState.HOVER,
    VisualState.ACTIVE,
    VisualState.FOCUS,
    VisualState.DISABLED,
)


def build_token_document(config: ButtonConfig) -> dict[str, Any]:
    """Return the token document as plain JSON-compatible data."""
    default = config.state(VisualState.DEFAULT)
    return {
        "base": {
            "background": to_json_value(default.background),
            "text": default.text_color,
            "border": default.border_color,
        },
        "typography": to_json_value(config.typography),
        "layout": to_json_value(config.layout),
        "motion": to_json_value(config.motion),
        "effects": to_json_value(config.effects),
        "variants": {
            state.value: to_json_value(config.state(state)) for state in VARIANT_STATES
        },
    }


def generate_tokens(config: ButtonConfig, settings: ExportSettings | None = None) -> str:
    """Render the token document as indented JSON text."""
    settings = settings or ExportSettings()
    text = json.dumps(build_token_document(config), indent=settings.json_indent)
    log.debug("Rendered token document: chars=%d", len(text))
    return text

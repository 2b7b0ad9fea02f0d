"""Buttonsmith: compile a visual button design into CSS, utility classes and tokens."""

from buttonsmith.config import ExportSettings
from buttonsmith.emitters import (
    generate_css,
    generate_tailwind_classes,
    generate_tokens,
    preview_css,
    render_all,
)
from buttonsmith.errors import ConfigError
from buttonsmith.model import ButtonConfig, VisualState, config_from_dict, default_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ButtonConfig",
    "ConfigError",
    "ExportSettings",
    "VisualState",
    "config_from_dict",
    "default_config",
    "generate_css",
    "generate_tailwind_classes",
    "generate_tokens",
    "preview_css",
    "render_all",
]

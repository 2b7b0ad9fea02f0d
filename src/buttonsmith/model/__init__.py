"""Buttonsmith model layer -- public type re-exports."""

from buttonsmith.model.button import (
    ButtonConfig,
    EffectsConfig,
    IconConfig,
    InteractionsConfig,
    LayoutConfig,
    MotionConfig,
    Transform3D,
    TypographyConfig,
)
from buttonsmith.model.codec import config_from_dict, config_to_dict, dump_config, load_config
from buttonsmith.model.defaults import DEFAULT_ICON_SVG, default_config, new_shadow
from buttonsmith.model.state import (
    FocusRing,
    StateFilter,
    StateStyle,
    StateStyles,
    StateTransform,
    VisualState,
    derive_state,
)
from buttonsmith.model.style import (
    Background,
    BorderStyle,
    CornerRadius,
    CursorType,
    Gradient,
    GradientBackground,
    GradientKind,
    GradientStop,
    IconAnimation,
    IconPosition,
    Shadow,
    SolidBackground,
    Spacing,
    TextTransform,
    WidthMode,
)

__all__ = [
    # style
    "GradientKind",
    "BorderStyle",
    "TextTransform",
    "IconPosition",
    "IconAnimation",
    "WidthMode",
    "CursorType",
    "Shadow",
    "GradientStop",
    "Gradient",
    "SolidBackground",
    "GradientBackground",
    "Background",
    "Spacing",
    "CornerRadius",
    # state
    "VisualState",
    "FocusRing",
    "StateTransform",
    "StateFilter",
    "StateStyle",
    "StateStyles",
    "derive_state",
    # button
    "LayoutConfig",
    "TypographyConfig",
    "IconConfig",
    "EffectsConfig",
    "MotionConfig",
    "InteractionsConfig",
    "Transform3D",
    "ButtonConfig",
    # defaults
    "DEFAULT_ICON_SVG",
    "default_config",
    "new_shadow",
    # codec
    "config_from_dict",
    "config_to_dict",
    "dump_config",
    "load_config",
]

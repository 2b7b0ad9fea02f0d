"""The canonical default button and small record factories."""

from __future__ import annotations

import uuid

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
from buttonsmith.model.state import (
    FocusRing,
    StateFilter,
    StateStyle,
    StateStyles,
    StateTransform,
    derive_state,
)
from buttonsmith.model.style import (
    CornerRadius,
    CursorType,
    Shadow,
    SolidBackground,
    Spacing,
)

DEFAULT_ICON_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">'
    '<path d="M5 12h14"/><path d="m12 5 7 7-7 7"/></svg>'
)


def _generate_id() -> str:
    """Generate a short unique ID."""
    return uuid.uuid4().hex[:9]


def new_shadow(id: str | None = None, **overrides) -> Shadow:
    """Create an enabled shadow layer, generating an id unless one is given."""
    return Shadow(id=id or _generate_id(), **overrides)


def _default_states() -> StateStyles:
    default = StateStyle(
        background=SolidBackground("#18181b"),
        text_color="#ffffff",
        border_color="#27272a",
        opacity=1,
        cursor=CursorType.POINTER,
        shadows=(new_shadow("default-1", y=1, blur=2, spread=0, color="rgba(0,0,0,0.05)"),),
        transform=StateTransform(),
        filter=StateFilter(),
    )
    return StateStyles(
        default=default,
        hover=derive_state(
            default,
            background=SolidBackground("#27272a"),
            border_color="#3f3f46",
            shadows=(
                new_shadow("hover-1", y=1, blur=2, color="rgba(0,0,0,0.05)"),
                new_shadow("hover-2", y=4, blur=6, spread=-1, color="rgba(0,0,0,0.1)"),
            ),
        ),
        active=derive_state(
            default,
            background=SolidBackground("#18181b"),
            text_color="#d4d4d8",
            transform=StateTransform(scale=0.98),
            shadows=(),
        ),
        focus=derive_state(
            default,
            ring=FocusRing(enabled=True, width=2, color="#3b82f6", offset=2),
        ),
        disabled=derive_state(
            default,
            background=SolidBackground("#f4f4f5"),
            text_color="#a1a1aa",
            border_color="#e4e4e7",
            shadows=(),
            opacity=0.5,
            cursor=CursorType.NOT_ALLOWED,
        ),
        loading=derive_state(default, opacity=0.8, cursor=CursorType.WAIT),
    )


def default_config() -> ButtonConfig:
    """Build the canonical default button configuration."""
    return ButtonConfig(
        layout=LayoutConfig(
            padding=Spacing(top=12, right=24, bottom=12, left=24),
            radius=CornerRadius(top_left=8, top_right=8, bottom_right=8, bottom_left=8),
        ),
        typography=TypographyConfig(),
        icon=IconConfig(svg=DEFAULT_ICON_SVG),
        effects=EffectsConfig(),
        motion=MotionConfig(),
        interactions=InteractionsConfig(),
        transform=Transform3D(),
        states=_default_states(),
    )

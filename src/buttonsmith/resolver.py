"""Resolve per-state style into CSS value text.

Every function here is pure. Terms that would be visual no-ops (``scale(1)``,
``brightness(100%)``, a disabled shadow) are never emitted; when nothing is
left the value is the literal ``none``.
"""

from __future__ import annotations

from dataclasses import dataclass

from buttonsmith.model.button import ButtonConfig
from buttonsmith.model.state import FocusRing, StateStyle, StateTransform, VisualState
from buttonsmith.model.style import (
    Background,
    GradientBackground,
    GradientKind,
    Shadow,
    SolidBackground,
)

__all__ = [
    "ResolvedState",
    "format_number",
    "resolve_background",
    "resolve_filter",
    "resolve_ring",
    "resolve_shadow",
    "resolve_state",
    "resolve_text_shadow",
    "resolve_transform",
]

NONE = "none"

_IDENTITY_TRANSFORM = StateTransform()


def format_number(value: float) -> str:
    """Render a number in its shortest form (``12.0`` -> ``"12"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _px(value: float) -> str:
    return f"{format_number(value)}px"


def resolve_background(background: Background) -> str:
    """Return the CSS ``background`` value for a solid color or gradient."""
    if isinstance(background, SolidBackground):
        return background.color
    if isinstance(background, GradientBackground):
        gradient = background.gradient
        stops = ", ".join(
            f"{stop.color} {format_number(stop.position)}%" for stop in gradient.stops
        )
        angle = format_number(gradient.angle)
        if gradient.kind is GradientKind.RADIAL:
            return f"radial-gradient(circle at center, {stops})"
        if gradient.kind is GradientKind.CONIC:
            return f"conic-gradient(from {angle}deg at 50% 50%, {stops})"
        return f"linear-gradient({angle}deg, {stops})"
    raise TypeError(f"Unknown background variant: {type(background).__name__}")


def resolve_shadow(shadows: tuple[Shadow, ...]) -> str:
    """Return the ``box-shadow`` value; list order is paint order."""
    layers = [
        ("inset " if s.inset else "")
        + f"{_px(s.x)} {_px(s.y)} {_px(s.blur)} {_px(s.spread)} {s.color}"
        for s in shadows
        if s.enabled
    ]
    return ", ".join(layers) if layers else NONE


def resolve_text_shadow(shadows: tuple[Shadow, ...]) -> str:
    """Return the ``text-shadow`` value; inset and spread do not apply."""
    layers = [f"{_px(s.x)} {_px(s.y)} {_px(s.blur)} {s.color}" for s in shadows if s.enabled]
    return ", ".join(layers) if layers else NONE


def resolve_transform(config: ButtonConfig, state: VisualState | str) -> str:
    """Return the ``transform`` value for *state*.

    The global 3-D tilt always comes first, followed by the state's own terms
    in the fixed order scale, translateX, translateY, rotate, skewX, skewY.
    """
    t = config.state(state).transform or _IDENTITY_TRANSFORM
    parts: list[str] = []

    if config.transform.enabled:
        parts.append(
            f"perspective({_px(config.transform.perspective)}) "
            f"rotateX({format_number(config.transform.tilt)}deg)"
        )

    if t.scale != 1:
        parts.append(f"scale({format_number(t.scale)})")
    if t.translate_x != 0:
        parts.append(f"translateX({_px(t.translate_x)})")
    if t.translate_y != 0:
        parts.append(f"translateY({_px(t.translate_y)})")
    if t.rotate != 0:
        parts.append(f"rotate({format_number(t.rotate)}deg)")
    if t.skew_x != 0:
        parts.append(f"skewX({format_number(t.skew_x)}deg)")
    if t.skew_y != 0:
        parts.append(f"skewY({format_number(t.skew_y)}deg)")

    return " ".join(parts) if parts else NONE


def resolve_filter(style: StateStyle) -> str:
    """Return the ``filter`` value; a missing filter is the identity."""
    f = style.filter
    if f is None:
        return NONE
    parts: list[str] = []
    if f.blur > 0:
        parts.append(f"blur({_px(f.blur)})")
    if f.brightness != 100:
        parts.append(f"brightness({format_number(f.brightness)}%)")
    if f.contrast != 100:
        parts.append(f"contrast({format_number(f.contrast)}%)")
    if f.grayscale > 0:
        parts.append(f"grayscale({format_number(f.grayscale)}%)")
    return " ".join(parts) if parts else NONE


def resolve_ring(ring: FocusRing | None, surface: str) -> str:
    """Return a two-layer ``box-shadow`` drawing a focus ring.

    The inner layer paints *surface* for the offset gap, the outer layer the
    ring itself. A missing or disabled ring resolves to ``none``.
    """
    if ring is None or not ring.enabled:
        return NONE
    return (
        f"0 0 0 {_px(ring.offset)} {surface}, "
        f"0 0 0 {_px(ring.width + ring.offset)} {ring.color}"
    )


@dataclass(frozen=True)
class ResolvedState:
    """All rendered values of one visual state."""

    state: VisualState
    background: str
    text_color: str
    border_color: str
    shadow: str
    opacity: str
    filter: str
    cursor: str
    transform: str


def resolve_state(config: ButtonConfig, state: VisualState | str) -> ResolvedState:
    """Resolve every property of *state* in one pass."""
    state = VisualState(state)
    style = config.state(state)
    return ResolvedState(
        state=state,
        background=resolve_background(style.background),
        text_color=style.text_color,
        border_color=style.border_color,
        shadow=resolve_shadow(style.shadows),
        opacity=format_number(style.opacity),
        filter=resolve_filter(style),
        cursor=str(style.cursor),
        transform=resolve_transform(config, state),
    )

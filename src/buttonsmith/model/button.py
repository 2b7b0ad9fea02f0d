"""Root button configuration and its global sub-records."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from buttonsmith.model.state import StateStyle, StateStyles, VisualState
from buttonsmith.model.style import (
    BorderStyle,
    CornerRadius,
    Gradient,
    IconAnimation,
    IconPosition,
    Shadow,
    Spacing,
    TextTransform,
    WidthMode,
)


@dataclass(frozen=True)
class LayoutConfig:
    padding: Spacing = Spacing()
    width_mode: WidthMode = WidthMode.AUTO
    fixed_width: float = 120  # px, used when width_mode is fixed
    min_width: float = 0  # px, 0 = unset
    max_width: float = 0  # px, 0 = none
    radius: CornerRadius = CornerRadius()
    border_width: float = 1
    border_style: BorderStyle = BorderStyle.SOLID


@dataclass(frozen=True)
class TypographyConfig:
    font_family: str = '"Inter", sans-serif'
    font_size: float = 14  # px
    font_weight: str = "500"
    letter_spacing: float = 0  # em
    line_height: float = 1.5
    text_transform: TextTransform = TextTransform.NONE
    text_shadow: tuple[Shadow, ...] = ()  # inset and spread are ignored


@dataclass(frozen=True)
class IconConfig:
    enabled: bool = False
    svg: str = ""
    position: IconPosition = IconPosition.LEFT
    size: float = 16
    gap: float = 8
    color: str = "inherit"
    animation: IconAnimation = IconAnimation.NONE
    rotate: float = 0  # degrees, static


@dataclass(frozen=True)
class EffectsConfig:
    backdrop_blur: float = 0
    bg_blur: float = 0
    border_gradient: Gradient | None = None


@dataclass(frozen=True)
class MotionConfig:
    duration: float = 200  # ms
    easing: str = "cubic-bezier(0.4, 0, 0.2, 1)"
    delay: float = 0  # ms


@dataclass(frozen=True)
class InteractionsConfig:
    ripple: bool = True
    magnetic: bool = False
    magnetic_strength: float = 0.2
    scale_on_press: float = 0.95


@dataclass(frozen=True)
class Transform3D:
    enabled: bool = False
    perspective: float = 1000  # px
    tilt: float = 0  # degrees


@dataclass(frozen=True)
class ButtonConfig:
    """The complete visual description of a button.

    Instances are immutable. Every edit goes through :meth:`update` or
    :meth:`with_state` and yields a new config, so older configs stay valid
    for anyone still holding them.
    """

    layout: LayoutConfig
    typography: TypographyConfig
    icon: IconConfig
    effects: EffectsConfig
    motion: MotionConfig
    interactions: InteractionsConfig
    transform: Transform3D
    states: StateStyles

    def state(self, state: VisualState | str) -> StateStyle:
        return self.states.get(state)

    def with_state(self, state: VisualState | str, style: StateStyle) -> ButtonConfig:
        """Return a copy with the style of *state* replaced."""
        return replace(self, states=self.states.with_state(state, style))

    def update(self, **changes: Any) -> ButtonConfig:
        """Return a copy with whole sub-records replaced."""
        return replace(self, **changes)

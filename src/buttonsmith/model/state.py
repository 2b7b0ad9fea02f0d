"""Per-state style records and the six-state table."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any

from buttonsmith.model.style import Background, CursorType, Shadow


class VisualState(StrEnum):
    """The fixed interaction phases a button is styled for."""

    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    FOCUS = "focus"
    DISABLED = "disabled"
    LOADING = "loading"


@dataclass(frozen=True)
class FocusRing:
    enabled: bool = True
    width: float = 2
    color: str = "#3b82f6"
    offset: float = 2


@dataclass(frozen=True)
class StateTransform:
    """2-D transform applied in one state. Defaults are the identity."""

    scale: float = 1
    translate_x: float = 0
    translate_y: float = 0
    rotate: float = 0  # degrees
    skew_x: float = 0  # degrees
    skew_y: float = 0  # degrees


@dataclass(frozen=True)
class StateFilter:
    """CSS filter functions applied in one state. Defaults are the identity."""

    blur: float = 0  # px
    brightness: float = 100  # %
    contrast: float = 100  # %
    grayscale: float = 0  # %


@dataclass(frozen=True)
class StateStyle:
    """Everything that may change between visual states."""

    background: Background
    text_color: str
    border_color: str
    opacity: float = 1.0
    cursor: CursorType = CursorType.POINTER
    shadows: tuple[Shadow, ...] = ()
    ring: FocusRing | None = None
    transform: StateTransform = StateTransform()
    filter: StateFilter | None = None

    def add_shadow(self, shadow: Shadow) -> StateStyle:
        """Return a copy with *shadow* appended as the bottom-most layer."""
        return replace(self, shadows=(*self.shadows, shadow))

    def remove_shadow(self, index: int) -> StateStyle:
        """Return a copy without the shadow at *index*."""
        shadows = list(self.shadows)
        del shadows[index]
        return replace(self, shadows=tuple(shadows))

    def toggle_shadow(self, index: int, enabled: bool) -> StateStyle:
        """Return a copy with the shadow at *index* switched on or off."""
        shadows = list(self.shadows)
        shadows[index] = replace(shadows[index], enabled=enabled)
        return replace(self, shadows=tuple(shadows))


def derive_state(base: StateStyle, **overrides: Any) -> StateStyle:
    """Build an independent state record from *base* plus declared overrides."""
    return replace(base, **overrides)


@dataclass(frozen=True)
class StateStyles:
    """One fully populated StateStyle per VisualState.

    Every state is stored independently; nothing falls back to ``default``
    at read time.
    """

    default: StateStyle
    hover: StateStyle
    active: StateStyle
    focus: StateStyle
    disabled: StateStyle
    loading: StateStyle

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) is None:
                raise TypeError(f"State {f.name!r} must not be None")

    def get(self, state: VisualState | str) -> StateStyle:
        """Return the style for *state*."""
        return getattr(self, VisualState(state).value)

    def with_state(self, state: VisualState | str, style: StateStyle) -> StateStyles:
        """Return a copy with *state* replaced by *style*."""
        return replace(self, **{VisualState(state).value: style})

    def items(self) -> list[tuple[VisualState, StateStyle]]:
        """Return ``(state, style)`` pairs in VisualState order."""
        return [(state, self.get(state)) for state in VisualState]

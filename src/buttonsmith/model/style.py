"""Leaf style records: shadows, gradients, backgrounds, spacing and corners."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class GradientKind(StrEnum):
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"


class BorderStyle(StrEnum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"
    NONE = "none"


class TextTransform(StrEnum):
    NONE = "none"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CAPITALIZE = "capitalize"


class IconPosition(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class IconAnimation(StrEnum):
    NONE = "none"
    SPIN = "spin"
    PULSE = "pulse"
    BOUNCE = "bounce"
    PING = "ping"


class WidthMode(StrEnum):
    AUTO = "auto"
    FULL = "full"
    FIXED = "fixed"


class CursorType(StrEnum):
    DEFAULT = "default"
    POINTER = "pointer"
    NOT_ALLOWED = "not-allowed"
    WAIT = "wait"
    TEXT = "text"
    MOVE = "move"
    HELP = "help"


@dataclass(frozen=True)
class Shadow:
    """One layer of a box or text shadow.

    Disabled layers stay in their sequence but never reach rendered output.
    """

    x: float = 0
    y: float = 2
    blur: float = 4
    spread: float = 0
    color: str = "rgba(0,0,0,0.1)"
    inset: bool = False
    enabled: bool = True
    id: str = ""


@dataclass(frozen=True)
class GradientStop:
    color: str
    position: float  # 0-100
    opacity: float = 1.0  # 0-1
    id: str = ""


@dataclass(frozen=True)
class Gradient:
    """A linear, radial or conic gradient.

    Stops render in the order given; positions are never sorted.
    """

    kind: GradientKind = GradientKind.LINEAR
    angle: float = 0  # degrees, ignored for radial
    stops: tuple[GradientStop, ...] = ()

    def add_stop(self, stop: GradientStop) -> Gradient:
        """Return a copy with *stop* appended."""
        return replace(self, stops=(*self.stops, stop))

    def remove_stop(self, index: int) -> Gradient:
        """Return a copy without the stop at *index*."""
        stops = list(self.stops)
        del stops[index]
        return replace(self, stops=tuple(stops))


@dataclass(frozen=True)
class SolidBackground:
    color: str


@dataclass(frozen=True)
class GradientBackground:
    gradient: Gradient


# Tagged union: a background is exactly one of these two branches.
Background = SolidBackground | GradientBackground


@dataclass(frozen=True)
class Spacing:
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0


@dataclass(frozen=True)
class CornerRadius:
    top_left: float = 0
    top_right: float = 0
    bottom_right: float = 0
    bottom_left: float = 0

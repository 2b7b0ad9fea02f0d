"""JSON codec for button configs.

Documents use the camelCase shape the editing surface stores::

    {"layout": {"padding": {"top": 12, ...}, "widthMode": "auto", ...},
     "states": {"default": {"background": {"type": "solid", "value": "#18181b"},
                            "textColor": "#ffffff", ...}, ...}}

Absent fields of global sub-records fall back to their record defaults. The
six states, and each state's background and colors, are required.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from buttonsmith.errors import ConfigError
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
    VisualState,
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

__all__ = ["config_from_dict", "config_to_dict", "load_config", "dump_config", "to_json_value"]

E = TypeVar("E", bound=Enum)

# Optional records that are left out of a document when unset.
_OMIT_WHEN_NONE = {"ring", "filter"}

# Fields whose JSON key is not the plain camelCase of the field name.
_KEY_OVERRIDES = {"kind": "type"}


def _camel(name: str) -> str:
    if name in _KEY_OVERRIDES:
        return _KEY_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def to_json_value(value: Any) -> Any:
    """Convert a model value into plain JSON-compatible data."""
    if isinstance(value, SolidBackground):
        return {"type": "solid", "value": value.color}
    if isinstance(value, GradientBackground):
        return {"type": "gradient", "value": to_json_value(value.gradient)}
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        data: dict[str, Any] = {}
        for f in fields(value):
            item = getattr(value, f.name)
            if item is None and f.name in _OMIT_WHEN_NONE:
                continue
            if f.name == "id" and not item:
                continue
            data[_camel(f.name)] = to_json_value(item)
        return data
    if isinstance(value, (tuple, list)):
        return [to_json_value(item) for item in value]
    return value


def config_to_dict(config: ButtonConfig) -> dict[str, Any]:
    """Serialise a ButtonConfig into its JSON document shape."""
    return to_json_value(config)


def dump_config(config: ButtonConfig, indent: int = 2) -> str:
    return json.dumps(config_to_dict(config), indent=indent)


# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------


def _mapping(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"expected an object, got {type(value).__name__}", path)
    return value


def _sequence(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise ConfigError(f"expected an array, got {type(value).__name__}", path)
    return value


def _number(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"expected a number, got {value!r}", path)
    return value


def _string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"expected a string, got {value!r}", path)
    return value


def _boolean(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"expected a boolean, got {value!r}", path)
    return value


def _enum(cls: type[E], value: Any, path: str) -> E:
    try:
        return cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in cls)
        raise ConfigError(f"expected one of {allowed}, got {value!r}", path) from None


def _required(data: dict[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise ConfigError(f"missing required field {key!r}", path)
    return data[key]


def _fields(
    data: dict[str, Any], path: str, spec: dict[str, tuple[str, Any]]
) -> dict[str, Any]:
    """Decode the keys listed in *spec* that are present in *data*.

    *spec* maps a JSON key to ``(field_name, decoder)`` where the decoder is
    called as ``decoder(value, path)``.
    """
    kwargs: dict[str, Any] = {}
    for key, (name, decode) in spec.items():
        if key in data:
            kwargs[name] = decode(data[key], f"{path}.{key}")
    return kwargs


def _enum_of(cls: type[E]):
    return lambda value, path: _enum(cls, value, path)


# ---------------------------------------------------------------------------
# Record decoders
# ---------------------------------------------------------------------------


def _shadow(value: Any, path: str) -> Shadow:
    data = _mapping(value, path)
    return Shadow(
        **_fields(
            data,
            path,
            {
                "x": ("x", _number),
                "y": ("y", _number),
                "blur": ("blur", _number),
                "spread": ("spread", _number),
                "color": ("color", _string),
                "inset": ("inset", _boolean),
                "enabled": ("enabled", _boolean),
                "id": ("id", _string),
            },
        )
    )


def _shadows(value: Any, path: str) -> tuple[Shadow, ...]:
    return tuple(_shadow(item, f"{path}[{i}]") for i, item in enumerate(_sequence(value, path)))


def _stop(value: Any, path: str) -> GradientStop:
    data = _mapping(value, path)
    return GradientStop(
        color=_string(_required(data, "color", path), f"{path}.color"),
        position=_number(_required(data, "position", path), f"{path}.position"),
        **_fields(data, path, {"opacity": ("opacity", _number), "id": ("id", _string)}),
    )


def _gradient(value: Any, path: str) -> Gradient:
    data = _mapping(value, path)
    kwargs = _fields(
        data,
        path,
        {"type": ("kind", _enum_of(GradientKind)), "angle": ("angle", _number)},
    )
    if "stops" in data:
        stops = _sequence(data["stops"], f"{path}.stops")
        kwargs["stops"] = tuple(_stop(s, f"{path}.stops[{i}]") for i, s in enumerate(stops))
    return Gradient(**kwargs)


def _optional_gradient(value: Any, path: str) -> Gradient | None:
    if value is None:
        return None
    return _gradient(value, path)


def _background(value: Any, path: str) -> Background:
    data = _mapping(value, path)
    kind = _required(data, "type", path)
    payload = _required(data, "value", path)
    if kind == "solid":
        return SolidBackground(_string(payload, f"{path}.value"))
    if kind == "gradient":
        return GradientBackground(_gradient(payload, f"{path}.value"))
    raise ConfigError(f"unknown background type {kind!r}", f"{path}.type")


def _ring(value: Any, path: str) -> FocusRing | None:
    if value is None:
        return None
    data = _mapping(value, path)
    return FocusRing(
        **_fields(
            data,
            path,
            {
                "enabled": ("enabled", _boolean),
                "width": ("width", _number),
                "color": ("color", _string),
                "offset": ("offset", _number),
            },
        )
    )


def _transform(value: Any, path: str) -> StateTransform:
    data = _mapping(value, path)
    return StateTransform(
        **_fields(
            data,
            path,
            {
                "scale": ("scale", _number),
                "translateX": ("translate_x", _number),
                "translateY": ("translate_y", _number),
                "rotate": ("rotate", _number),
                "skewX": ("skew_x", _number),
                "skewY": ("skew_y", _number),
            },
        )
    )


def _filter(value: Any, path: str) -> StateFilter | None:
    if value is None:
        return None
    data = _mapping(value, path)
    return StateFilter(
        **_fields(
            data,
            path,
            {
                "blur": ("blur", _number),
                "brightness": ("brightness", _number),
                "contrast": ("contrast", _number),
                "grayscale": ("grayscale", _number),
            },
        )
    )


def _state(value: Any, path: str) -> StateStyle:
    data = _mapping(value, path)
    return StateStyle(
        background=_background(_required(data, "background", path), f"{path}.background"),
        text_color=_string(_required(data, "textColor", path), f"{path}.textColor"),
        border_color=_string(_required(data, "borderColor", path), f"{path}.borderColor"),
        **_fields(
            data,
            path,
            {
                "opacity": ("opacity", _number),
                "cursor": ("cursor", _enum_of(CursorType)),
                "shadows": ("shadows", _shadows),
                "ring": ("ring", _ring),
                "transform": ("transform", _transform),
                "filter": ("filter", _filter),
            },
        ),
    )


def _states(value: Any, path: str) -> StateStyles:
    data = _mapping(value, path)
    decoded = {}
    for state in VisualState:
        raw = data.get(state.value)
        if raw is None:
            raise ConfigError(f"missing visual state {state.value!r}", path)
        decoded[state.value] = _state(raw, f"{path}.{state.value}")
    return StateStyles(**decoded)


def _spacing(value: Any, path: str) -> Spacing:
    data = _mapping(value, path)
    return Spacing(
        **_fields(
            data,
            path,
            {side: (side, _number) for side in ("top", "right", "bottom", "left")},
        )
    )


def _radius(value: Any, path: str) -> CornerRadius:
    data = _mapping(value, path)
    return CornerRadius(
        **_fields(
            data,
            path,
            {
                "topLeft": ("top_left", _number),
                "topRight": ("top_right", _number),
                "bottomRight": ("bottom_right", _number),
                "bottomLeft": ("bottom_left", _number),
            },
        )
    )


def _layout(value: Any, path: str) -> LayoutConfig:
    data = _mapping(value, path)
    return LayoutConfig(
        **_fields(
            data,
            path,
            {
                "padding": ("padding", _spacing),
                "widthMode": ("width_mode", _enum_of(WidthMode)),
                "fixedWidth": ("fixed_width", _number),
                "minWidth": ("min_width", _number),
                "maxWidth": ("max_width", _number),
                "radius": ("radius", _radius),
                "borderWidth": ("border_width", _number),
                "borderStyle": ("border_style", _enum_of(BorderStyle)),
            },
        )
    )


def _typography(value: Any, path: str) -> TypographyConfig:
    data = _mapping(value, path)
    return TypographyConfig(
        **_fields(
            data,
            path,
            {
                "fontFamily": ("font_family", _string),
                "fontSize": ("font_size", _number),
                "fontWeight": ("font_weight", _string),
                "letterSpacing": ("letter_spacing", _number),
                "lineHeight": ("line_height", _number),
                "textTransform": ("text_transform", _enum_of(TextTransform)),
                "textShadow": ("text_shadow", _shadows),
            },
        )
    )


def _icon(value: Any, path: str) -> IconConfig:
    data = _mapping(value, path)
    return IconConfig(
        **_fields(
            data,
            path,
            {
                "enabled": ("enabled", _boolean),
                "svg": ("svg", _string),
                "position": ("position", _enum_of(IconPosition)),
                "size": ("size", _number),
                "gap": ("gap", _number),
                "color": ("color", _string),
                "animation": ("animation", _enum_of(IconAnimation)),
                "rotate": ("rotate", _number),
            },
        )
    )


def _effects(value: Any, path: str) -> EffectsConfig:
    data = _mapping(value, path)
    return EffectsConfig(
        **_fields(
            data,
            path,
            {
                "backdropBlur": ("backdrop_blur", _number),
                "bgBlur": ("bg_blur", _number),
                "borderGradient": ("border_gradient", _optional_gradient),
            },
        )
    )


def _motion(value: Any, path: str) -> MotionConfig:
    data = _mapping(value, path)
    return MotionConfig(
        **_fields(
            data,
            path,
            {
                "duration": ("duration", _number),
                "easing": ("easing", _string),
                "delay": ("delay", _number),
            },
        )
    )


def _interactions(value: Any, path: str) -> InteractionsConfig:
    data = _mapping(value, path)
    return InteractionsConfig(
        **_fields(
            data,
            path,
            {
                "ripple": ("ripple", _boolean),
                "magnetic": ("magnetic", _boolean),
                "magneticStrength": ("magnetic_strength", _number),
                "scaleOnPress": ("scale_on_press", _number),
            },
        )
    )


def _transform3d(value: Any, path: str) -> Transform3D:
    data = _mapping(value, path)
    return Transform3D(
        **_fields(
            data,
            path,
            {
                "enabled": ("enabled", _boolean),
                "perspective": ("perspective", _number),
                "tilt": ("tilt", _number),
            },
        )
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def config_from_dict(data: Any) -> ButtonConfig:
    """Decode a JSON document into a ButtonConfig.

    Raises:
        ConfigError: if any field is missing, mistyped, or out of its enum.
    """
    root = _mapping(data, "$")
    return ButtonConfig(
        layout=_layout(root.get("layout", {}), "$.layout"),
        typography=_typography(root.get("typography", {}), "$.typography"),
        icon=_icon(root.get("icon", {}), "$.icon"),
        effects=_effects(root.get("effects", {}), "$.effects"),
        motion=_motion(root.get("motion", {}), "$.motion"),
        interactions=_interactions(root.get("interactions", {}), "$.interactions"),
        transform=_transform3d(root.get("transform", {}), "$.transform"),
        states=_states(_required(root, "states", "$"), "$.states"),
    )


def load_config(path: Path) -> ButtonConfig:
    """Read and decode a config document from a JSON file at *path*."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON: {exc.msg} (line {exc.lineno})", str(path)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"not valid UTF-8: {exc.reason}", str(path)) from exc
    except OSError as exc:
        raise ConfigError(f"cannot read file: {exc.strerror or exc}", str(path)) from exc
    return config_from_dict(data)

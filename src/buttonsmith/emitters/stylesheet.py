"""Stylesheet emitter: render a ButtonConfig as a plain CSS rule-set.

Output layout::

    .btn { ...layout, typography, default state... }
    .btn svg { ...icon... }
    .btn:hover, .btn.is-hover { ... }          one block per non-default state
    @keyframes spin / pulse / bounce / ping    always emitted
    .ripple { ... } @keyframes ripple { ... }  always emitted

Each non-default state pairs its native pseudo-class with an ``.is-<state>``
class so a preview can force the state without real pointer or focus input.
"""

from __future__ import annotations

import logging

from buttonsmith.config import ExportSettings
from buttonsmith.model.button import ButtonConfig
from buttonsmith.model.state import VisualState
from buttonsmith.model.style import IconAnimation, WidthMode
from buttonsmith.resolver import (
    format_number,
    resolve_ring,
    resolve_state,
    resolve_text_shadow,
)

__all__ = ["STATE_SELECTORS", "generate_css", "preview_css", "state_selector"]

log = logging.getLogger(__name__)

# (native pseudo-class, force-override class) per state; None = not available.
STATE_SELECTORS: dict[VisualState, tuple[str | None, str | None]] = {
    VisualState.DEFAULT: (None, None),
    VisualState.HOVER: (":hover", ".is-hover"),
    VisualState.ACTIVE: (":active", ".is-active"),
    VisualState.FOCUS: (":focus-visible", ".is-focus"),
    VisualState.DISABLED: (":disabled", ".is-disabled"),
    VisualState.LOADING: (None, ".is-loading"),
}

_ICON_ANIMATIONS: dict[IconAnimation, str] = {
    IconAnimation.SPIN: "spin 1s linear infinite",
    IconAnimation.PULSE: "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite",
    IconAnimation.BOUNCE: "bounce 1s infinite",
    IconAnimation.PING: "ping 1s cubic-bezier(0, 0, 0.2, 1) infinite",
}

_KEYFRAMES = """\
/* Keyframes */
@keyframes spin { from { transform: rotate(0deg); } to { transform: rotate(360deg); } }
@keyframes pulse { 0%, 100% { opacity: 1; } 50% { opacity: .5; } }
@keyframes bounce { 0%, 100% { transform: translateY(-25%); animation-timing-function: cubic-bezier(0.8,0,1,1); } 50% { transform: none; animation-timing-function: cubic-bezier(0,0,0.2,1); } }
@keyframes ping { 75%, 100% { transform: scale(2); opacity: 0; } }"""

_RIPPLE = """\
/* Ripple Effect */
.ripple {
  position: absolute;
  border-radius: 50%;
  transform: scale(0);
  animation: ripple 600ms linear;
  background-color: rgba(255, 255, 255, 0.3);
  pointer-events: none;
}

@keyframes ripple {
  to {
    transform: scale(2.5);
    opacity: 0;
  }
}"""


def _px(value: float) -> str:
    return f"{format_number(value)}px"


def _rule(selector: str, lines: list[str]) -> str:
    """Render a rule; entries starting with ``/*`` or empty are kept as-is."""
    body = []
    for line in lines:
        if not line or line.startswith("/*"):
            body.append(f"  {line}".rstrip())
        else:
            body.append(f"  {line};")
    return "\n".join([f"{selector} {{", *body, "}"])


def state_selector(base: str, state: VisualState | str) -> str:
    """Return the selector list that targets *state* of the *base* element."""
    pseudo, forced = STATE_SELECTORS[VisualState(state)]
    if pseudo is None and forced is None:
        return base
    return ", ".join(f"{base}{part}" for part in (pseudo, forced) if part)


def _width(config: ButtonConfig) -> list[str]:
    layout = config.layout
    if layout.width_mode is WidthMode.FULL:
        lines = ["width: 100%"]
    elif layout.width_mode is WidthMode.FIXED:
        lines = [f"width: {_px(layout.fixed_width)}"]
    else:
        lines = ["width: auto"]
    if layout.min_width > 0:
        lines.append(f"min-width: {_px(layout.min_width)}")
    if layout.max_width > 0:
        lines.append(f"max-width: {_px(layout.max_width)}")
    return lines


def _base_rule(config: ButtonConfig, selector: str) -> str:
    layout, typography = config.layout, config.typography
    motion, effects, icon = config.motion, config.effects, config.icon
    default = resolve_state(config, VisualState.DEFAULT)
    p, r = layout.padding, layout.radius
    backdrop = f"blur({_px(effects.backdrop_blur)})" if effects.backdrop_blur > 0 else "none"

    return _rule(
        selector,
        [
            "/* Layout */",
            f"padding: {_px(p.top)} {_px(p.right)} {_px(p.bottom)} {_px(p.left)}",
            f"border-radius: {_px(r.top_left)} {_px(r.top_right)} "
            f"{_px(r.bottom_right)} {_px(r.bottom_left)}",
            f"border: {_px(layout.border_width)} {layout.border_style} {default.border_color}",
            *_width(config),
            "",
            "/* Typography */",
            f"font-family: {typography.font_family}",
            f"font-size: {_px(typography.font_size)}",
            f"font-weight: {typography.font_weight}",
            f"letter-spacing: {format_number(typography.letter_spacing)}em",
            f"line-height: {format_number(typography.line_height)}",
            f"text-transform: {typography.text_transform}",
            f"text-shadow: {resolve_text_shadow(typography.text_shadow)}",
            "",
            "/* Appearance */",
            f"background: {default.background}",
            f"color: {default.text_color}",
            f"box-shadow: {default.shadow}",
            f"opacity: {default.opacity}",
            f"filter: {default.filter}",
            f"backdrop-filter: {backdrop}",
            "",
            "/* Animation */",
            f"transition: all {format_number(motion.duration)}ms {motion.easing} "
            f"{format_number(motion.delay)}ms",
            f"cursor: {default.cursor}",
            f"transform: {default.transform}",
            "",
            "display: inline-flex",
            "align-items: center",
            "justify-content: center",
            f"gap: {_px(icon.gap)}",
            "position: relative",
            "overflow: hidden",
            "user-select: none",
        ],
    )


def _icon_rule(config: ButtonConfig, selector: str) -> str:
    icon = config.icon
    lines = [
        f"width: {_px(icon.size)}",
        f"height: {_px(icon.size)}",
        f"color: {'currentColor' if icon.color == 'inherit' else icon.color}",
        "transition: all 200ms ease",
        f"transform: rotate({format_number(icon.rotate)}deg)",
    ]
    animation = _ICON_ANIMATIONS.get(icon.animation)
    if animation:
        lines.append(f"animation: {animation}")
    return _rule(f"{selector} svg", lines)


def _state_rule(
    config: ButtonConfig, selector: str, state: VisualState, settings: ExportSettings
) -> str:
    resolved = resolve_state(config, state)
    shadow = resolved.shadow
    extra: list[str] = []
    if state is VisualState.FOCUS:
        shadow = resolve_ring(config.state(state).ring, settings.ring_surface)
        extra.append("outline: none")
    elif state is VisualState.DISABLED:
        extra.append("pointer-events: none")

    return "\n".join(
        [
            f"/* State: {state.value.capitalize()} */",
            _rule(
                state_selector(selector, state),
                [
                    *extra,
                    f"background: {resolved.background}",
                    f"color: {resolved.text_color}",
                    f"border-color: {resolved.border_color}",
                    f"box-shadow: {shadow}",
                    f"opacity: {resolved.opacity}",
                    f"filter: {resolved.filter}",
                    f"cursor: {resolved.cursor}",
                    f"transform: {resolved.transform}",
                ],
            ),
        ]
    )


def generate_css(config: ButtonConfig, settings: ExportSettings | None = None) -> str:
    """Render the complete stylesheet for *config*."""
    settings = settings or ExportSettings()
    selector = settings.selector
    blocks = [_base_rule(config, selector), _icon_rule(config, selector)]
    blocks.extend(
        _state_rule(config, selector, state, settings)
        for state in VisualState
        if state is not VisualState.DEFAULT
    )
    blocks.append(_KEYFRAMES)
    blocks.append(_RIPPLE)
    css = "\n\n".join(blocks)
    log.debug("Rendered stylesheet: selector=%s chars=%d", selector, len(css))
    return css


def preview_css(
    config: ButtonConfig, element_id: str | None = None, settings: ExportSettings | None = None
) -> str:
    """Render the stylesheet scoped to a single element id for live preview."""
    settings = settings or ExportSettings()
    element_id = element_id or settings.preview_element_id
    return generate_css(config, settings).replace(settings.selector, f"#{element_id}")

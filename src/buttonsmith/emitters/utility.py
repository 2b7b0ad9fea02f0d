"""Utility-class emitter: render a ButtonConfig as Tailwind arbitrary values.

Every numeric or color value travels inside a bracket token (``p-[12px]``)
instead of being matched against a design scale. Only the default, hover,
active and disabled states are represented; focus and loading have no tokens
in this output.
"""

from __future__ import annotations

import logging
import re

from buttonsmith.model.button import ButtonConfig, LayoutConfig
from buttonsmith.model.state import VisualState
from buttonsmith.model.style import BorderStyle, TextTransform, WidthMode
from buttonsmith.resolver import format_number, resolve_background, resolve_shadow

__all__ = ["generate_tailwind_classes", "padding_tokens", "radius_tokens"]

log = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")
_WHITESPACE = re.compile(r"\s")


def _arb(value: str) -> str:
    return f"[{value}]"


def _px(value: float) -> str:
    return _arb(f"{format_number(value)}px")


def padding_tokens(layout: LayoutConfig) -> list[str]:
    """Collapse padding into one, two (axis pairs) or four edge tokens."""
    p = layout.padding
    if p.top == p.bottom and p.left == p.right:
        if p.top == p.left:
            return [f"p-{_px(p.top)}"]
        return [f"px-{_px(p.left)}", f"py-{_px(p.top)}"]
    return [
        f"pt-{_px(p.top)}",
        f"pb-{_px(p.bottom)}",
        f"pl-{_px(p.left)}",
        f"pr-{_px(p.right)}",
    ]


def radius_tokens(layout: LayoutConfig) -> list[str]:
    """Collapse corners into one token when uniform, else four corner tokens.

    Unlike padding there is no paired tier.
    """
    r = layout.radius
    if r.top_left == r.top_right == r.bottom_right == r.bottom_left:
        return [f"rounded-{_px(r.top_left)}"]
    return [
        f"rounded-tl-{_px(r.top_left)}",
        f"rounded-tr-{_px(r.top_right)}",
        f"rounded-br-{_px(r.bottom_right)}",
        f"rounded-bl-{_px(r.bottom_left)}",
    ]


def _layout_tokens(layout: LayoutConfig) -> list[str]:
    if layout.width_mode is WidthMode.FULL:
        tokens = ["w-full"]
    elif layout.width_mode is WidthMode.FIXED:
        tokens = [f"w-{_px(layout.fixed_width)}"]
    else:
        tokens = ["w-auto"]
    if layout.min_width > 0:
        tokens.append(f"min-w-{_px(layout.min_width)}")
    if layout.max_width > 0:
        tokens.append(f"max-w-{_px(layout.max_width)}")

    tokens.extend(padding_tokens(layout))
    tokens.extend(radius_tokens(layout))

    if layout.border_width > 0:
        tokens.append(f"border-{_px(layout.border_width)}")
    if layout.border_style is not BorderStyle.SOLID:
        tokens.append(f"border-{layout.border_style}")
    return tokens


def _typography_tokens(config: ButtonConfig) -> list[str]:
    t = config.typography
    tokens = [
        f"font-{_arb(_WHITESPACE.sub('_', t.font_family))}",
        f"text-{_px(t.font_size)}",
        f"font-{_arb(t.font_weight)}",
        f"tracking-{_arb(format_number(t.letter_spacing) + 'em')}",
        f"leading-{_arb(format_number(t.line_height))}",
    ]
    if t.text_transform is not TextTransform.NONE:
        tokens.append(str(t.text_transform))
    return tokens


def _effect_and_motion_tokens(config: ButtonConfig) -> list[str]:
    effects, motion = config.effects, config.motion
    tokens = []
    if effects.backdrop_blur > 0:
        tokens.append(f"backdrop-blur-{_px(effects.backdrop_blur)}")
    if effects.bg_blur > 0:
        tokens.append(f"blur-{_px(effects.bg_blur)}")
    tokens.extend(
        [
            "transition-all",
            f"duration-{_arb(format_number(motion.duration) + 'ms')}",
            f"ease-{_arb(_WHITESPACE.sub('_', motion.easing))}",
            f"delay-{_arb(format_number(motion.delay) + 'ms')}",
        ]
    )
    return tokens


def _state_tokens(
    config: ButtonConfig,
    state: VisualState,
    prefix: str,
    *,
    shadows: bool,
    always_opacity: bool = False,
) -> list[str]:
    style = config.state(state)
    background = _WHITESPACE_RUN.sub("_", resolve_background(style.background))
    text_color = _WHITESPACE_RUN.sub("_", style.text_color)
    border_color = _WHITESPACE_RUN.sub("_", style.border_color)
    tokens = [
        f"{prefix}bg-{_arb(background)}",
        f"{prefix}text-{_arb(text_color)}",
        f"{prefix}border-{_arb(border_color)}",
    ]
    if always_opacity or style.opacity != 1:
        tokens.append(f"{prefix}opacity-{_arb(format_number(style.opacity))}")
    if shadows and style.shadows:
        shadow = _WHITESPACE.sub("_", resolve_shadow(style.shadows))
        tokens.append(f"{prefix}shadow-{_arb(shadow)}")
    return tokens


def generate_tailwind_classes(config: ButtonConfig) -> str:
    """Render the space-separated utility-class string for *config*."""
    tokens = [
        *_layout_tokens(config.layout),
        *_typography_tokens(config),
        *_effect_and_motion_tokens(config),
        *_state_tokens(config, VisualState.DEFAULT, "", shadows=True),
        *_state_tokens(config, VisualState.HOVER, "hover:", shadows=True),
        *_state_tokens(config, VisualState.ACTIVE, "active:", shadows=False),
        *_state_tokens(
            config, VisualState.DISABLED, "disabled:", shadows=False, always_opacity=True
        ),
        "disabled:cursor-not-allowed",
    ]
    if config.icon.enabled:
        tokens.append("[&_svg]:stroke-current")
    classes = " ".join(tokens)
    log.debug("Rendered utility classes: tokens=%d", len(tokens))
    return classes

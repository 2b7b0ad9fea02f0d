"""Tests for the CSS stylesheet emitter."""

from __future__ import annotations

import re
from dataclasses import replace

from buttonsmith.config import ExportSettings
from buttonsmith.emitters.stylesheet import generate_css, preview_css, state_selector
from buttonsmith.model import (
    FocusRing,
    IconAnimation,
    Shadow,
    StateFilter,
    VisualState,
    WidthMode,
    default_config,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _block(css: str, selector: str) -> str:
    """Return the body of the first rule whose selector line equals *selector*."""
    match = re.search(re.escape(selector) + r" \{\n(.*?)\n\}", css, re.DOTALL)
    assert match is not None, f"no rule for {selector!r}"
    return match.group(1)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestStateSelector:
    def test_default_is_base(self):
        assert state_selector(".btn", VisualState.DEFAULT) == ".btn"

    def test_pairs(self):
        assert state_selector(".btn", "hover") == ".btn:hover, .btn.is-hover"
        assert state_selector(".btn", "active") == ".btn:active, .btn.is-active"
        assert state_selector(".btn", "focus") == ".btn:focus-visible, .btn.is-focus"
        assert state_selector(".btn", "disabled") == ".btn:disabled, .btn.is-disabled"

    def test_loading_has_no_pseudo_class(self):
        assert state_selector(".btn", "loading") == ".btn.is-loading"


# ---------------------------------------------------------------------------
# Base rule
# ---------------------------------------------------------------------------


class TestBaseRule:
    def test_layout_and_appearance(self):
        body = _block(generate_css(default_config()), ".btn")
        assert "  padding: 12px 24px 12px 24px;" in body
        assert "  border-radius: 8px 8px 8px 8px;" in body
        assert "  border: 1px solid #27272a;" in body
        assert "  width: auto;" in body
        assert "  background: #18181b;" in body
        assert "  box-shadow: 0px 1px 2px 0px rgba(0,0,0,0.05);" in body
        assert "  transition: all 200ms cubic-bezier(0.4, 0, 0.2, 1) 0ms;" in body
        assert "  transform: none;" in body
        assert "  filter: none;" in body

    def test_typography(self):
        body = _block(generate_css(default_config()), ".btn")
        assert '  font-family: "Inter", sans-serif;' in body
        assert "  font-size: 14px;" in body
        assert "  line-height: 1.5;" in body
        assert "  text-shadow: none;" in body

    def test_optional_widths_only_when_set(self):
        config = default_config()
        assert "min-width" not in generate_css(config)
        layout = replace(config.layout, width_mode=WidthMode.FIXED, min_width=80, max_width=300)
        body = _block(generate_css(config.update(layout=layout)), ".btn")
        assert "  width: 120px;" in body
        assert "  min-width: 80px;" in body
        assert "  max-width: 300px;" in body

    def test_backdrop_blur(self):
        config = default_config()
        effects = replace(config.effects, backdrop_blur=6)
        assert "backdrop-filter: blur(6px);" in generate_css(config.update(effects=effects))

    def test_custom_selector(self):
        css = generate_css(default_config(), ExportSettings(selector=".cta"))
        assert css.startswith(".cta {")
        assert ".cta:hover, .cta.is-hover {" in css
        assert ".btn" not in css


# ---------------------------------------------------------------------------
# Icon rule
# ---------------------------------------------------------------------------


class TestIconRule:
    def test_sizing_and_rotation(self):
        body = _block(generate_css(default_config()), ".btn svg")
        assert "  width: 16px;" in body
        assert "  color: currentColor;" in body
        assert "  transform: rotate(0deg);" in body
        assert "animation:" not in body

    def test_selected_animation(self):
        config = default_config()
        icon = replace(config.icon, animation=IconAnimation.SPIN, color="#ff0000")
        body = _block(generate_css(config.update(icon=icon)), ".btn svg")
        assert "  animation: spin 1s linear infinite;" in body
        assert "  color: #ff0000;" in body


# ---------------------------------------------------------------------------
# State blocks
# ---------------------------------------------------------------------------


class TestStateBlocks:
    def test_every_state_has_a_block(self):
        css = generate_css(default_config())
        for state in VisualState:
            if state is VisualState.DEFAULT:
                continue
            assert state_selector(".btn", state) + " {" in css

    def test_block_declarations(self):
        body = _block(generate_css(default_config()), ".btn:hover, .btn.is-hover")
        assert body.splitlines() == [
            "  background: #27272a;",
            "  color: #ffffff;",
            "  border-color: #3f3f46;",
            "  box-shadow: 0px 1px 2px 0px rgba(0,0,0,0.05), 0px 4px 6px -1px rgba(0,0,0,0.1);",
            "  opacity: 1;",
            "  filter: none;",
            "  cursor: pointer;",
            "  transform: none;",
        ]

    def test_active_transform(self):
        body = _block(generate_css(default_config()), ".btn:active, .btn.is-active")
        assert "  transform: scale(0.98);" in body
        assert "  box-shadow: none;" in body

    def test_focus_ring(self):
        body = _block(generate_css(default_config()), ".btn:focus-visible, .btn.is-focus")
        assert "  outline: none;" in body
        assert (
            "  box-shadow: 0 0 0 2px var(--bg-color, white), 0 0 0 4px #3b82f6;" in body
        )

    def test_focus_ring_disabled(self):
        config = default_config()
        focus = replace(config.state("focus"), ring=FocusRing(enabled=False))
        body = _block(
            generate_css(config.with_state("focus", focus)), ".btn:focus-visible, .btn.is-focus"
        )
        assert "  box-shadow: none;" in body

    def test_focus_ring_surface_setting(self):
        css = generate_css(default_config(), ExportSettings(ring_surface="#000"))
        assert "0 0 0 2px #000, 0 0 0 4px #3b82f6" in css

    def test_disabled_block(self):
        body = _block(generate_css(default_config()), ".btn:disabled, .btn.is-disabled")
        assert "  pointer-events: none;" in body
        assert "  opacity: 0.5;" in body
        assert "  cursor: not-allowed;" in body

    def test_loading_block(self):
        body = _block(generate_css(default_config()), ".btn.is-loading")
        assert "  opacity: 0.8;" in body
        assert "  cursor: wait;" in body

    def test_disabled_shadow_excluded(self):
        config = default_config()
        hover = replace(
            config.state("hover"), shadows=(Shadow(color="red", enabled=False),)
        )
        body = _block(generate_css(config.with_state("hover", hover)), ".btn:hover, .btn.is-hover")
        assert "  box-shadow: none;" in body

    def test_state_filter(self):
        config = default_config()
        disabled = replace(config.state("disabled"), filter=StateFilter(grayscale=100))
        body = _block(
            generate_css(config.with_state("disabled", disabled)), ".btn:disabled, .btn.is-disabled"
        )
        assert "  filter: grayscale(100%);" in body


# ---------------------------------------------------------------------------
# Keyframes and whole-output properties
# ---------------------------------------------------------------------------


class TestKeyframes:
    def test_all_keyframes_always_present(self):
        css = generate_css(default_config())
        for name in ("spin", "pulse", "bounce", "ping", "ripple"):
            assert f"@keyframes {name} " in css
        assert ".ripple {" in css

    def test_present_without_icon_or_ripple(self):
        config = default_config()
        config = config.update(
            interactions=replace(config.interactions, ripple=False),
            icon=replace(config.icon, enabled=False),
        )
        assert "@keyframes ripple" in generate_css(config)


class TestOutput:
    def test_deterministic(self):
        config = default_config()
        assert generate_css(config) == generate_css(config)

    def test_no_blank_declarations(self):
        assert "  ;" not in generate_css(default_config())

    def test_preview_substitutes_selector(self):
        css = preview_css(default_config(), "preview-button")
        assert css.startswith("#preview-button {")
        assert "#preview-button:hover, #preview-button.is-hover {" in css
        assert ".btn" not in css

    def test_preview_uses_settings_element_id(self):
        css = preview_css(default_config(), settings=ExportSettings(preview_element_id="demo"))
        assert css.startswith("#demo {")

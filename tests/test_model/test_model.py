"""Tests for the button style model and its canonical defaults."""

from __future__ import annotations

from dataclasses import replace

import pytest

from buttonsmith.model import (
    ButtonConfig,
    CursorType,
    FocusRing,
    Gradient,
    GradientBackground,
    GradientKind,
    GradientStop,
    Shadow,
    SolidBackground,
    StateStyle,
    StateStyles,
    StateTransform,
    VisualState,
    default_config,
    derive_state,
    new_shadow,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TestVisualState:
    def test_all_values(self) -> None:
        expected = {"default", "hover", "active", "focus", "disabled", "loading"}
        assert {v.value for v in VisualState} == expected

    def test_is_str(self) -> None:
        assert isinstance(VisualState.HOVER, str)
        assert VisualState.HOVER == "hover"


class TestCursorType:
    def test_hyphenated_value(self) -> None:
        assert CursorType.NOT_ALLOWED == "not-allowed"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class TestShadow:
    def test_defaults(self) -> None:
        shadow = Shadow()
        assert (shadow.x, shadow.y, shadow.blur, shadow.spread) == (0, 2, 4, 0)
        assert shadow.enabled is True
        assert shadow.inset is False

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Shadow().x = 3  # type: ignore[misc]

    def test_new_shadow_gets_unique_id(self) -> None:
        a, b = new_shadow(), new_shadow(blur=8)
        assert a.id and b.id
        assert a.id != b.id
        assert b.blur == 8

    def test_new_shadow_keeps_given_id(self) -> None:
        assert new_shadow("fixed", color="red").id == "fixed"


class TestGradient:
    def test_add_stop_returns_copy(self) -> None:
        gradient = Gradient(kind=GradientKind.LINEAR, angle=90)
        updated = gradient.add_stop(GradientStop("#fff", 0))
        assert gradient.stops == ()
        assert updated.stops == (GradientStop("#fff", 0),)

    def test_remove_stop(self) -> None:
        gradient = Gradient(stops=(GradientStop("a", 0), GradientStop("b", 50), GradientStop("c", 100)))
        assert [s.color for s in gradient.remove_stop(1).stops] == ["a", "c"]
        assert len(gradient.stops) == 3


class TestStateStyle:
    def _style(self) -> StateStyle:
        return StateStyle(background=SolidBackground("#000"), text_color="#fff", border_color="#111")

    def test_optional_records_default_to_none(self) -> None:
        style = self._style()
        assert style.ring is None
        assert style.filter is None
        assert style.transform == StateTransform()

    def test_add_and_remove_shadow(self) -> None:
        style = self._style().add_shadow(Shadow(color="red")).add_shadow(Shadow(color="blue"))
        assert [s.color for s in style.shadows] == ["red", "blue"]
        assert [s.color for s in style.remove_shadow(0).shadows] == ["blue"]

    def test_toggle_shadow_keeps_it_in_sequence(self) -> None:
        style = self._style().add_shadow(Shadow(color="red")).toggle_shadow(0, False)
        assert len(style.shadows) == 1
        assert style.shadows[0].enabled is False

    def test_switching_background_branch_discards_other(self) -> None:
        style = self._style()
        gradient = GradientBackground(Gradient(stops=(GradientStop("#fff", 0),)))
        switched = replace(style, background=gradient)
        assert isinstance(switched.background, GradientBackground)
        back = replace(switched, background=SolidBackground("#222"))
        assert back.background == SolidBackground("#222")


class TestStateStyles:
    def test_none_state_rejected(self) -> None:
        style = default_config().state("default")
        with pytest.raises(TypeError):
            StateStyles(
                default=style, hover=style, active=style, focus=style, disabled=style, loading=None  # type: ignore[arg-type]
            )

    def test_get_by_enum_and_string(self) -> None:
        states = default_config().states
        assert states.get(VisualState.HOVER) is states.get("hover")

    def test_items_cover_all_states(self) -> None:
        states = default_config().states
        assert [state for state, _ in states.items()] == list(VisualState)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDefaultConfig:
    def test_all_states_present(self) -> None:
        config = default_config()
        for state in VisualState:
            assert isinstance(config.state(state), StateStyle)

    def test_default_state(self) -> None:
        style = default_config().state("default")
        assert style.background == SolidBackground("#18181b")
        assert style.text_color == "#ffffff"
        assert style.border_color == "#27272a"
        assert style.cursor is CursorType.POINTER
        assert len(style.shadows) == 1

    def test_state_overrides(self) -> None:
        config = default_config()
        assert config.state("hover").background == SolidBackground("#27272a")
        assert config.state("hover").border_color == "#3f3f46"
        assert len(config.state("hover").shadows) == 2
        assert config.state("active").transform.scale == 0.98
        assert config.state("active").text_color == "#d4d4d8"
        assert config.state("focus").ring == FocusRing(enabled=True, width=2, color="#3b82f6", offset=2)
        assert config.state("disabled").opacity == 0.5
        assert config.state("disabled").cursor is CursorType.NOT_ALLOWED
        assert config.state("loading").opacity == 0.8
        assert config.state("loading").cursor is CursorType.WAIT

    def test_states_inherit_unmodified_fields_at_construction(self) -> None:
        config = default_config()
        assert config.state("loading").background == config.state("default").background
        assert config.state("focus").shadows == config.state("default").shadows

    def test_default_shadows_carry_ids(self) -> None:
        config = default_config()
        for state in ("default", "hover", "focus", "loading"):
            assert all(shadow.id for shadow in config.state(state).shadows)

    def test_only_focus_has_ring(self) -> None:
        config = default_config()
        assert [s for s, style in config.states.items() if style.ring] == [VisualState.FOCUS]

    def test_layout_defaults(self) -> None:
        layout = default_config().layout
        assert (layout.padding.top, layout.padding.right) == (12, 24)
        assert layout.radius.top_left == 8
        assert layout.border_width == 1

    def test_each_call_is_independent(self) -> None:
        assert default_config() == default_config()
        assert default_config() is not default_config()


class TestCopyOnWrite:
    def test_with_state_leaves_original_untouched(self) -> None:
        config = default_config()
        edited = config.with_state("hover", derive_state(config.state("hover"), text_color="red"))
        assert config.state("hover").text_color == "#ffffff"
        assert edited.state("hover").text_color == "red"
        assert edited.state("default") is config.state("default")

    def test_update_replaces_sub_record(self) -> None:
        config = default_config()
        edited = config.update(layout=replace(config.layout, border_width=3))
        assert isinstance(edited, ButtonConfig)
        assert edited.layout.border_width == 3
        assert config.layout.border_width == 1

    def test_config_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            default_config().layout = None  # type: ignore[misc]

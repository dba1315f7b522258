"""Tests for CustomSlider - construction, validation and interaction."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult

from lmsadmin.keyboard.widgets import SLIDER_BINDINGS
from lmsadmin.widgets.input.custom_slider import CustomSlider

# =============================================================================
# Construction
# =============================================================================


class TestCustomSliderInit:
    """Test slider construction without an app."""

    def test_value_defaults_to_minimum(self) -> None:
        slider = CustomSlider(1, 15)
        assert slider.value == 1.0

    def test_initial_value_is_snapped(self) -> None:
        slider = CustomSlider(1, 15, value=7.6)
        assert slider.value == 8.0

    def test_initial_value_is_clamped(self) -> None:
        assert CustomSlider(1, 60, value=90).value == 60.0
        assert CustomSlider(1, 60, value=-5).value == 1.0

    def test_accessibility_value_tracks_initial(self) -> None:
        slider = CustomSlider(1, 15, value=5)
        assert slider.accessibility_value == "5"

    def test_default_class(self) -> None:
        assert "widget-custom-slider" in CustomSlider(1, 2).classes

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            CustomSlider(10, 1)

    def test_non_positive_step_rejected(self) -> None:
        with pytest.raises(ValueError):
            CustomSlider(1, 10, step=0)

    def test_validate_value(self) -> None:
        slider = CustomSlider(1, 15)
        assert slider.validate_value(3.2) == 3.0
        assert slider.validate_value(99) == 15.0

    def test_bindings(self) -> None:
        assert CustomSlider.BINDINGS is SLIDER_BINDINGS
        assert CustomSlider.can_focus is True


# =============================================================================
# Interaction
# =============================================================================


class _SliderApp(App[None]):
    def __init__(self, value: float = 5) -> None:
        super().__init__()
        self.initial = value
        self.changes: list[float] = []

    def compose(self) -> ComposeResult:
        yield CustomSlider(1, 15, value=self.initial, id="slider")

    def on_mount(self) -> None:
        self.query_one(CustomSlider).focus()

    def on_custom_slider_changed(self, event: CustomSlider.Changed) -> None:
        self.changes.append(event.value)


class TestCustomSliderInteraction:
    """Test keyboard handling in a running app."""

    @pytest.mark.asyncio
    async def test_arrow_keys_step(self) -> None:
        app = _SliderApp(5)
        async with app.run_test() as pilot:
            slider = app.query_one(CustomSlider)
            await pilot.press("right")
            assert slider.value == 6.0
            await pilot.press("left", "left")
            assert slider.value == 4.0
            await pilot.press("up")
            assert slider.value == 5.0
            await pilot.press("down")
            assert slider.value == 4.0

    @pytest.mark.asyncio
    async def test_page_keys(self) -> None:
        app = _SliderApp(5)
        async with app.run_test() as pilot:
            slider = app.query_one(CustomSlider)
            await pilot.press("pageup")
            assert slider.value == 10.0
            await pilot.press("pageup")
            assert slider.value == 15.0
            await pilot.press("pagedown")
            assert slider.value == 10.0

    @pytest.mark.asyncio
    async def test_home_end(self) -> None:
        app = _SliderApp(5)
        async with app.run_test() as pilot:
            slider = app.query_one(CustomSlider)
            await pilot.press("end")
            assert slider.value == 15.0
            await pilot.press("home")
            assert slider.value == 1.0

    @pytest.mark.asyncio
    async def test_stops_at_bounds(self) -> None:
        app = _SliderApp(15)
        async with app.run_test() as pilot:
            slider = app.query_one(CustomSlider)
            await pilot.press("right", "right")
            assert slider.value == 15.0

    @pytest.mark.asyncio
    async def test_changes_posted(self) -> None:
        app = _SliderApp(5)
        async with app.run_test() as pilot:
            await pilot.press("right", "right")
            await pilot.pause()
        assert app.changes == [6.0, 7.0]

    @pytest.mark.asyncio
    async def test_no_message_when_value_unchanged(self) -> None:
        app = _SliderApp(1)
        async with app.run_test() as pilot:
            await pilot.press("left")
            await pilot.pause()
        assert app.changes == []

    @pytest.mark.asyncio
    async def test_accessibility_value_follows_changes(self) -> None:
        app = _SliderApp(5)
        async with app.run_test() as pilot:
            await pilot.press("right")
            assert app.query_one(CustomSlider).accessibility_value == "6"

"""Tests for CustomAlertDialog."""

from __future__ import annotations

import pytest
from textual.app import App

from lmsadmin.widgets.feedback.custom_dialog import CustomAlertDialog


def test_custom_alert_dialog_instantiation():
    """Test CustomAlertDialog instantiation."""
    dialog = CustomAlertDialog(message="Saved", title="Success")
    assert dialog.message_text == "Saved"
    assert dialog.title_text == "Success"
    assert dialog.is_error is False


def test_custom_alert_dialog_error_flag():
    dialog = CustomAlertDialog("Network error", title="Error", is_error=True)
    assert dialog.is_error is True


def test_custom_dialog_css_path():
    """Test CSS path is set correctly for dialogs."""
    assert CustomAlertDialog.CSS_PATH.endswith("css/widgets/custom_dialog.tcss")


class _DialogHost(App[None]):
    def __init__(self, dialog: CustomAlertDialog) -> None:
        super().__init__()
        self.dialog = dialog
        self.dismissed: list[object] = []

    def on_mount(self) -> None:
        self.push_screen(self.dialog, callback=self.dismissed.append)


@pytest.mark.asyncio
async def test_alert_renders_title_and_message():
    dialog = CustomAlertDialog("Network error", title="Error", is_error=True)
    app = _DialogHost(dialog)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert str(dialog.query_one("#alert-title").render()) == "Error"
        assert str(dialog.query_one("#alert-message").render()) == "Network error"
        assert dialog.query_one(".dialog-container").has_class("-error")


@pytest.mark.asyncio
async def test_alert_markup_is_not_interpreted():
    dialog = CustomAlertDialog("[bold]not markup[/bold]", title="Error")
    app = _DialogHost(dialog)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert str(dialog.query_one("#alert-message").render()) == "[bold]not markup[/bold]"


@pytest.mark.asyncio
async def test_ok_button_dismisses():
    app = _DialogHost(CustomAlertDialog("Saved", title="Success"))
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.click("#alert-ok-btn")
        await pilot.pause()
        assert app.dismissed == [None]
        assert not isinstance(app.screen, CustomAlertDialog)


@pytest.mark.asyncio
async def test_escape_dismisses():
    app = _DialogHost(CustomAlertDialog("Saved", title="Success"))
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()
        assert app.dismissed == [None]

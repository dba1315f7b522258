"""CustomButton widget for the TUI application.

CSS Classes: widget-custom-button
"""

from __future__ import annotations

from textual.widgets import Button

from lmsadmin.widgets._base import AccessibleMixin


class CustomButton(AccessibleMixin, Button):
    """Button with accessibility metadata.

    Emits the regular ``Button.Pressed`` message, so handlers stay
    ``on_button_pressed``.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.add_class("widget-custom-button")


__all__ = ["CustomButton"]

"""CustomHeader widget for the TUI application."""

from __future__ import annotations

from textual.widgets import Header


class CustomHeader(Header):
    """Application header showing the window title."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.add_class("widget-custom-header")


__all__ = ["CustomHeader"]

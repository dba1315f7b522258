"""CustomFooter widget for the TUI application."""

from __future__ import annotations

from textual.widgets import Footer


class CustomFooter(Footer):
    """Footer listing the active key bindings."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.add_class("widget-custom-footer")


__all__ = ["CustomFooter"]

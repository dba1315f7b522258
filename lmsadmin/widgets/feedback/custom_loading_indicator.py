"""CustomLoadingIndicator widget for the TUI application.

CSS Classes: widget-custom-loading-indicator
"""

from __future__ import annotations

from textual.widgets import LoadingIndicator


class CustomLoadingIndicator(LoadingIndicator):
    """Animated indicator shown while the store is busy."""

    DEFAULT_CSS = """
    CustomLoadingIndicator {
        height: 3;
        color: $accent;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.add_class("widget-custom-loading-indicator")


__all__ = ["CustomLoadingIndicator"]

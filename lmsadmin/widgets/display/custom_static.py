"""CustomStatic widget for the TUI application.

Standard Wrapper Pattern:
- Wraps Textual's Static with accessibility metadata

CSS Classes: widget-custom-static
"""

from __future__ import annotations

from textual.widgets import Static

from lmsadmin.widgets._base import AccessibleMixin


class CustomStatic(AccessibleMixin, Static):
    """Static text with accessibility metadata."""

    DEFAULT_CSS = """
    CustomStatic {
        height: auto;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.add_class("widget-custom-static")


__all__ = ["CustomStatic"]

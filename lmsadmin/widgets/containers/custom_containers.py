"""Container widgets for the TUI application.

CSS Classes: widget-custom-container, widget-custom-horizontal,
widget-custom-vertical
"""

from __future__ import annotations

from textual.containers import Container, Horizontal, Vertical, VerticalScroll


class CustomContainer(Container):
    """Generic container with standardized class."""

    def __init__(self, *children, **kwargs) -> None:
        super().__init__(*children, **kwargs)
        self.add_class("widget-custom-container")


class CustomHorizontal(Horizontal):
    """Horizontal row with standardized class."""

    def __init__(self, *children, **kwargs) -> None:
        super().__init__(*children, **kwargs)
        self.add_class("widget-custom-horizontal")


class CustomVertical(Vertical):
    """Vertical column with standardized class."""

    def __init__(self, *children, **kwargs) -> None:
        super().__init__(*children, **kwargs)
        self.add_class("widget-custom-vertical")


class CustomVerticalScroll(VerticalScroll):
    """Scrollable vertical column with standardized class."""

    def __init__(self, *children, **kwargs) -> None:
        super().__init__(*children, **kwargs)
        self.add_class("widget-custom-vertical-scroll")


__all__ = [
    "CustomContainer",
    "CustomHorizontal",
    "CustomVertical",
    "CustomVerticalScroll",
]

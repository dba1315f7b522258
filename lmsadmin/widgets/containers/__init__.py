"""Container widgets for the TUI application."""

from lmsadmin.widgets.containers.custom_containers import (
    CustomContainer,
    CustomHorizontal,
    CustomVertical,
    CustomVerticalScroll,
)

__all__ = [
    "CustomContainer",
    "CustomHorizontal",
    "CustomVertical",
    "CustomVerticalScroll",
]

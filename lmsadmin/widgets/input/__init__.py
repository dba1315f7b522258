"""Input widgets for LMS Admin TUI.

- CustomSlider: Bounded, stepped numeric slider
"""

from lmsadmin.widgets.input.custom_slider import CustomSlider

__all__ = [
    "CustomSlider",
]

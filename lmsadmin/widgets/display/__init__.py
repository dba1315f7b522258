"""Display widgets for LMS Admin TUI.

- CustomStatic: Static text display widget
"""

from lmsadmin.widgets.display.custom_static import CustomStatic

__all__ = [
    "CustomStatic",
]

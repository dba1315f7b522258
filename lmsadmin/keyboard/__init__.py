"""Keyboard bindings module.

This module provides all keyboard bindings for the LMS Admin TUI.
Bindings are organized into three categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
- widgets: Widget bindings (SLIDER_BINDINGS)
"""

from lmsadmin.keyboard.app import APP_BINDINGS
from lmsadmin.keyboard.navigation import (
    BASE_SCREEN_BINDINGS,
    BORROWING_SETTINGS_SCREEN_BINDINGS,
)
from lmsadmin.keyboard.widgets import SLIDER_BINDINGS

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "BASE_SCREEN_BINDINGS",
    "BORROWING_SETTINGS_SCREEN_BINDINGS",
    # Widget bindings
    "SLIDER_BINDINGS",
]

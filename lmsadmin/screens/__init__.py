"""LMS Admin TUI Screens.

This package contains all screen modules for the TUI application.

Domain Structure:
    - borrowing_settings/ - Borrowing limits form and its presenter

Note: Keybindings live in the keyboard/ package:
    - lmsadmin.keyboard.*_SCREEN_BINDINGS - Keybinding constants

Example Usage:
    from lmsadmin.screens.borrowing_settings import BorrowingSettingsScreen
"""

from __future__ import annotations

# Keybindings (re-export for convenience)
from lmsadmin.keyboard import (
    BASE_SCREEN_BINDINGS,
    BORROWING_SETTINGS_SCREEN_BINDINGS,
)
from lmsadmin.screens.base_screen import BaseScreen

# Borrowing settings domain
from lmsadmin.screens.borrowing_settings import BorrowingSettingsScreen

__all__ = [
    "BASE_SCREEN_BINDINGS",
    "BORROWING_SETTINGS_SCREEN_BINDINGS",
    "BaseScreen",
    "BorrowingSettingsScreen",
]

"""Screen-specific keyboard bindings."""

from typing import Annotated

# ============================================================================
# SCREEN BINDINGS
# ============================================================================

BASE_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "pop_screen", "Back"),
    ("r", "refresh", "Refresh"),
    ("?", "show_help", "Help"),
]

# ============================================================================
# Borrowing Settings Screen Bindings
# ============================================================================

BORROWING_SETTINGS_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "cancel", "Cancel"),
    ("ctrl+s", "save_policy", "Save"),
    ("r", "refresh", "Reload"),
    ("?", "show_help", "Help"),
]

__all__ = [
    "BASE_SCREEN_BINDINGS",
    "BORROWING_SETTINGS_SCREEN_BINDINGS",
]

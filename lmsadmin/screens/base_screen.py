"""Base screen class for LMS Admin TUI.

This module provides BaseScreen, an abstract base class that encapsulates
common patterns across screens in the application.

GUIDE FOR SCREENS:
==================

1. LOADING STATE MANAGEMENT:
   - Use show_loading_overlay(message) to show loading state
   - Use hide_loading_overlay() to hide loading state
   - Include #loading-overlay, #loading-message in your compose()

2. LIFECYCLE:
   - screen_title sets the window title on mount
   - load_data() is scheduled after mount and on refresh

3. BINDINGS (included by default):
   - ESC: Back
   - R: Refresh
   - ?: Help
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress

from rich.markup import escape
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen

from lmsadmin.constants.values import APP_TITLE
from lmsadmin.keyboard import BASE_SCREEN_BINDINGS
from lmsadmin.widgets import CustomStatic

logger = logging.getLogger(__name__)


class BaseScreen(Screen):
    """Abstract base class for TUI screens with common patterns.

    This class provides:
    - Standard title setting for the app window
    - Common on_mount lifecycle pattern
    - Loading state management helpers
    - Refresh and help actions

    Subclasses must implement:
    - screen_title: The title to display in the window
    - load_data: Async method to load screen data
    """

    BINDINGS = BASE_SCREEN_BINDINGS
    HELP_TEXT = "Keybindings:\n  ESC - Back\n  R - Refresh\n  ? - Help"

    @property
    def screen_title(self) -> str:
        """Title displayed in the application window."""
        return APP_TITLE


    def set_title(self, title: str) -> None:
        """Set the application window title."""
        self.app.title = f"{APP_TITLE} - {title}"

    def on_mount(self) -> None:
        """Set the window title and schedule data loading."""
        self.set_title(self.screen_title)
        self.call_later(self.load_data)

    def on_unmount(self) -> None:
        """Cancel any running workers when the screen is unmounted."""
        with suppress(Exception):
            self.workers.cancel_all()

    @abstractmethod
    async def load_data(self) -> None:
        """Load data for the screen.

        Called after the screen is mounted and on refresh.
        """
        ...

    # =========================================================================
    # LOADING STATE MANAGEMENT
    # =========================================================================

    def show_loading_overlay(self, message: str = "Loading...") -> None:
        """Show the loading overlay with a message."""
        with suppress(NoMatches, WrongType):
            overlay = self.query_one("#loading-overlay")
            overlay.display = True
            self.query_one("#loading-message", CustomStatic).update(escape(message))

    def hide_loading_overlay(self) -> None:
        """Hide the loading overlay."""
        with suppress(NoMatches, WrongType):
            self.query_one("#loading-overlay").display = False

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def action_refresh(self) -> None:
        """Re-run load_data."""
        self.call_later(self.load_data)

    def action_show_help(self) -> None:
        """Show help notification."""
        self.app.notify(self.HELP_TEXT, severity="information", timeout=30)


__all__ = ["BaseScreen"]

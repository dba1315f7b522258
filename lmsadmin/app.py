"""Main application class for LMS Admin TUI."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from lmsadmin.constants import APP_TITLE, THEME_DEFAULT
from lmsadmin.constants.defaults import POLICY_FILENAME_DEFAULT
from lmsadmin.constants.enums import ThemeMode
from lmsadmin.keyboard.app import APP_BINDINGS
from lmsadmin.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)
from lmsadmin.models.state.policy_store import (
    FilePolicyStore,
    PolicyLoadError,
    PolicyStore,
)
from lmsadmin.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


class LibraryAdminApp(App[None]):
    """Main TUI application for LMS Admin."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings
    store: PolicyStore

    def __init__(
        self,
        policy_path: Path | None = None,
        store: PolicyStore | None = None,
        config_path: Path | None = None,
        theme: str | None = None,
        log_level: str | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.policy_path = policy_path
        self.config_path = config_path
        self._theme_override = theme
        self._log_level_override = log_level
        self._load_error: str | None = None
        self._stop_waiting: Callable[[], None] | None = None

        # Load settings on startup
        self._load_settings()
        self._configure_logging()
        self.store = store if store is not None else self._build_store()

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as e:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", e)
            self.settings = AppSettings()

        # Apply CLI overrides if provided
        if self.policy_path is not None:
            self.settings.policy_path = str(self.policy_path.expanduser().absolute())
        if self._theme_override is not None:
            self.settings.theme = self._theme_override
        if self._log_level_override is not None:
            self.settings.log_level = self._log_level_override

        self._apply_theme()

    def _configure_logging(self) -> None:
        log_file = Path(self.settings.log_file).expanduser() if self.settings.log_file else None
        configure_logging(self.settings.log_level, log_file)

    def _apply_theme(self) -> None:
        """Apply the stored theme preference; unknown names fall back to the default."""
        normalized = str(self.settings.theme or "").strip().lower()
        if normalized in {"textual-light", "custom-light"}:
            normalized = ThemeMode.LIGHT.value
        elif normalized in {"textual-dark", "custom-dark"}:
            normalized = ThemeMode.DARK.value
        try:
            mode = ThemeMode(normalized)
        except ValueError:
            mode = ThemeMode(THEME_DEFAULT)

        self.settings.theme = mode.value
        self.theme = mode.textual_theme

    def resolve_policy_path(self) -> Path:
        """Return the policy file the default store reads and writes."""
        if self.settings.policy_path:
            return Path(self.settings.policy_path).expanduser()
        settings_file = self.config_path or ConfigManager.config_path()
        return settings_file.parent / POLICY_FILENAME_DEFAULT

    def _build_store(self) -> PolicyStore:
        store = FilePolicyStore(
            self.resolve_policy_path(),
            save_delay_seconds=self.settings.save_delay_seconds,
        )
        try:
            store.load(create_missing=self.settings.seed_default_policy)
        except PolicyLoadError as e:
            logger.error("%s", e)
            self._load_error = str(e)
        return store

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from lmsadmin.screens import BorrowingSettingsScreen

        if self._load_error:
            self.notify(self._load_error, severity="error", title="Policy", timeout=10)
        self.push_screen(
            BorrowingSettingsScreen(self.store),
            callback=self._on_settings_closed,
        )

    def _on_settings_closed(self, saved: bool | None) -> None:
        logger.info("Borrowing settings closed (saved=%s)", bool(saved))
        self._exit_after_save()

    def _exit_after_save(self) -> None:
        """Exit now, or once the store has no save in flight."""
        if not self.store.is_loading:
            self.exit()
            return
        if self._stop_waiting is not None:
            return
        # Exiting tears down the event loop; the in-flight save must land first.
        logger.info("Waiting for the policy save to finish before exiting")
        self._stop_waiting = self.store.subscribe(self._exit_if_store_idle)

    def _exit_if_store_idle(self) -> None:
        if self.store.is_loading or self._stop_waiting is None:
            return
        self._stop_waiting()
        self._stop_waiting = None
        self.exit()

    def action_show_help(self) -> None:
        """Show help dialog."""
        self.notify(
            "Keybindings:\n"
            "  Tab: Next control\n"
            "  Left/Right: Adjust slider\n"
            "  Ctrl+S: Save\n"
            "  r: Reload\n"
            "  Esc: Cancel\n"
            "  ?: Help\n"
            "  q: Quit",
            severity="information",
            title="Help",
        )

    def action_quit(self) -> None:  # type: ignore[override]
        """Quit the application."""
        self._exit_after_save()

    def on_unmount(self) -> None:
        """Save settings when app exits."""
        try:
            ConfigManager.save(self.settings, self.config_path)
        except ConfigSaveError as e:
            logger.error("Failed to save settings: %s", e)
            self.notify(f"Failed to save settings: {e}", severity="error")


__all__ = [
    "LibraryAdminApp",
]

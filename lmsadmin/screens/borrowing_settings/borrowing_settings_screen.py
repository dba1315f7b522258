"""Borrowing settings screen for LMS Admin TUI."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress

from textual.app import ComposeResult
from textual.css.query import NoMatches, WrongType
from textual.worker import Worker, WorkerState

from lmsadmin.constants.limits import (
    BORROW_DAYS_MAX,
    BORROW_DAYS_MIN,
    MAX_BOOKS_MAX,
    MAX_BOOKS_MIN,
)
from lmsadmin.constants.screens.borrowing_settings import (
    A11Y_CANCEL_HINT,
    A11Y_CANCEL_LABEL,
    A11Y_MAX_BOOKS_SLIDER_HINT,
    A11Y_MAX_BOOKS_SLIDER_LABEL,
    A11Y_MAX_BOOKS_VALUE_LABEL,
    A11Y_REISSUE_SLIDER_HINT,
    A11Y_REISSUE_SLIDER_LABEL,
    A11Y_REISSUE_VALUE_LABEL,
    A11Y_SAVE_HINT,
    A11Y_SAVE_LABEL,
    ALERT_UNEXPECTED_ERROR_MESSAGE,
    BUTTON_CANCEL,
    BUTTON_SAVE,
    NO_POLICY_MESSAGE,
    RELOADED_MESSAGE,
    SAVING_MESSAGE,
    SCREEN_TITLE,
    SECTION_MAX_BOOKS,
    SECTION_REISSUE_PERIOD,
    UNIT_BOOK,
    UNIT_DAY,
)
from lmsadmin.keyboard import BORROWING_SETTINGS_SCREEN_BINDINGS
from lmsadmin.models.policy import Policy
from lmsadmin.models.state.policy_store import PolicyStore
from lmsadmin.screens.base_screen import BaseScreen
from lmsadmin.screens.borrowing_settings.presenter import (
    BorrowingSettingsPresenter,
    SaveFailed,
    SaveResult,
    SaveSucceeded,
)
from lmsadmin.utils.ranges import format_count
from lmsadmin.widgets import (
    CustomAlertDialog,
    CustomButton,
    CustomContainer,
    CustomFooter,
    CustomHeader,
    CustomHorizontal,
    CustomLoadingIndicator,
    CustomSlider,
    CustomStatic,
    CustomVertical,
    CustomVerticalScroll,
)

logger = logging.getLogger(__name__)

MAX_BOOKS_SLIDER_ID = "max-books-slider"
REISSUE_DAYS_SLIDER_ID = "reissue-days-slider"
MAX_BOOKS_VALUE_ID = "max-books-value"
REISSUE_DAYS_VALUE_ID = "reissue-days-value"
SAVE_WORKER_NAME = "save-policy"


def _spoken_count(count: int, unit: str) -> str:
    return format_count(count, unit).lower()


class BorrowingSettingsScreen(BaseScreen):
    """Edit the library's borrowing limits and save them through the store.

    The store is passed in explicitly. Dismisses with ``True`` after a
    confirmed save and ``False`` on cancel.
    """

    BINDINGS = BORROWING_SETTINGS_SCREEN_BINDINGS
    CSS_PATH = "../../css/screens/borrowing_settings_screen.tcss"
    HELP_TEXT = (
        "Keybindings:\n"
        "  Left/Right - Adjust focused slider\n"
        "  PgUp/PgDn - Adjust by 5\n"
        "  Home/End - Minimum / maximum\n"
        "  Tab - Next control\n"
        "  Ctrl+S - Save\n"
        "  R - Reload from store\n"
        "  ESC - Cancel\n"
        "  ? - Help"
    )

    def __init__(self, store: PolicyStore, initial_policy: Policy | None = None) -> None:
        super().__init__()
        self._store = store
        self._presenter = BorrowingSettingsPresenter(store, initial_policy)
        self._unsubscribe: Callable[[], None] | None = None
        self._suppress_next_resync = False

    @property
    def screen_title(self) -> str:
        return SCREEN_TITLE

    @property
    def presenter(self) -> BorrowingSettingsPresenter:
        return self._presenter

    @property
    def store(self) -> PolicyStore:
        return self._store

    async def load_data(self) -> None:
        """Nothing to fetch; reflect the store's busy state."""
        self._sync_store_state()

    # =========================================================================
    # Composition
    # =========================================================================

    def compose(self) -> ComposeResult:
        yield CustomHeader()
        with CustomHorizontal(id="settings-header-bar"):
            cancel_button = CustomButton(
                BUTTON_CANCEL,
                id="cancel-btn",
                variant="error",
                classes="header-btn",
            )
            cancel_button.set_accessibility(A11Y_CANCEL_LABEL, A11Y_CANCEL_HINT)
            yield cancel_button

            title = CustomStatic(SCREEN_TITLE, id="settings-title")
            title.set_accessibility(SCREEN_TITLE, header=True)
            yield title

            save_button = CustomButton(
                BUTTON_SAVE,
                id="save-btn",
                variant="primary",
                classes="header-btn",
                disabled=self._store.is_loading,
            )
            save_button.set_accessibility(A11Y_SAVE_LABEL, A11Y_SAVE_HINT)
            yield save_button

        with CustomVerticalScroll(id="settings-form"):
            yield from self._compose_card(
                card_id="max-books-card",
                title=SECTION_MAX_BOOKS,
                value_id=MAX_BOOKS_VALUE_ID,
                value_label=A11Y_MAX_BOOKS_VALUE_LABEL,
                slider_id=MAX_BOOKS_SLIDER_ID,
                slider_label=A11Y_MAX_BOOKS_SLIDER_LABEL,
                slider_hint=A11Y_MAX_BOOKS_SLIDER_HINT,
                minimum=MAX_BOOKS_MIN,
                maximum=MAX_BOOKS_MAX,
                value=self._presenter.max_books,
                unit=UNIT_BOOK,
            )
            yield from self._compose_card(
                card_id="reissue-period-card",
                title=SECTION_REISSUE_PERIOD,
                value_id=REISSUE_DAYS_VALUE_ID,
                value_label=A11Y_REISSUE_VALUE_LABEL,
                slider_id=REISSUE_DAYS_SLIDER_ID,
                slider_label=A11Y_REISSUE_SLIDER_LABEL,
                slider_hint=A11Y_REISSUE_SLIDER_HINT,
                minimum=BORROW_DAYS_MIN,
                maximum=BORROW_DAYS_MAX,
                value=self._presenter.reissue_days,
                unit=UNIT_DAY,
            )

        with CustomContainer(id="loading-overlay"):
            yield CustomLoadingIndicator(id="loading-indicator")
            yield CustomStatic(SAVING_MESSAGE, id="loading-message")

        yield CustomFooter()

    def _compose_card(
        self,
        *,
        card_id: str,
        title: str,
        value_id: str,
        value_label: str,
        slider_id: str,
        slider_label: str,
        slider_hint: str,
        minimum: int,
        maximum: int,
        value: int,
        unit: str,
    ) -> ComposeResult:
        with CustomVertical(id=card_id, classes="policy-card"):
            card_title = CustomStatic(title, classes="card-title")
            card_title.set_accessibility(title, header=True)
            yield card_title

            value_display = CustomStatic(format_count(value, unit), id=value_id, classes="card-value")
            value_display.set_accessibility(value_label, value=_spoken_count(value, unit))
            yield value_display

            slider = CustomSlider(minimum, maximum, value=value, id=slider_id)
            slider.set_accessibility(slider_label, slider_hint, str(value))
            yield slider

            with CustomHorizontal(classes="card-range"):
                yield CustomStatic(format_count(minimum, unit), classes="range-min")
                yield CustomStatic(format_count(maximum, unit), classes="range-max")

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        self._unsubscribe = self._store.subscribe(self._sync_store_state)
        self._sync_store_state()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_screen_resume(self) -> None:
        """Re-read the store's policy whenever the screen becomes visible.

        Closing our own alert does not count as becoming visible.
        """
        if self._suppress_next_resync:
            self._suppress_next_resync = False
            return
        if self._presenter.on_screen_shown():
            self._render_form()

    # =========================================================================
    # Form rendering
    # =========================================================================

    def _render_form(self) -> None:
        """Push presenter values into the sliders and value labels."""
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{MAX_BOOKS_SLIDER_ID}", CustomSlider).value = self._presenter.max_books
            self.query_one(f"#{REISSUE_DAYS_SLIDER_ID}", CustomSlider).value = self._presenter.reissue_days
        self._render_values()

    def _render_values(self) -> None:
        self._update_value_label(MAX_BOOKS_VALUE_ID, self._presenter.max_books, UNIT_BOOK)
        self._update_value_label(REISSUE_DAYS_VALUE_ID, self._presenter.reissue_days, UNIT_DAY)

    def _update_value_label(self, widget_id: str, value: int, unit: str) -> None:
        with suppress(NoMatches, WrongType):
            label = self.query_one(f"#{widget_id}", CustomStatic)
            label.update(format_count(value, unit))
            label.set_accessibility_value(_spoken_count(value, unit))

    def _sync_store_state(self) -> None:
        """Mirror the store's busy flags onto the Save button and overlay."""
        busy = self._store.is_loading or self._presenter.is_saving
        with suppress(NoMatches, WrongType):
            self.query_one("#save-btn", CustomButton).disabled = busy
        if self._store.show_animation:
            self.show_loading_overlay(SAVING_MESSAGE)
        else:
            self.hide_loading_overlay()

    # =========================================================================
    # Event handlers
    # =========================================================================

    def on_custom_slider_changed(self, event: CustomSlider.Changed) -> None:
        slider_id = event.slider.id
        if slider_id == MAX_BOOKS_SLIDER_ID:
            self._presenter.set_max_books(event.value)
        elif slider_id == REISSUE_DAYS_SLIDER_ID:
            self._presenter.set_reissue_days(event.value)
        else:
            return
        self._render_values()

    def on_button_pressed(self, event: CustomButton.Pressed) -> None:
        button_id = event.button.id
        if button_id == "save-btn":
            self._save_policy()
        elif button_id == "cancel-btn":
            self._cancel()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Present the save outcome once the save worker finishes."""
        if event.worker.name != SAVE_WORKER_NAME:
            return
        if event.state == WorkerState.SUCCESS:
            self._sync_store_state()
            result = event.worker.result
            if result is not None:
                self._show_save_result(result)
        elif event.state == WorkerState.ERROR:
            self._sync_store_state()
            logger.error("Policy save worker failed: %s", event.worker.error)
            self._show_save_result(SaveFailed(message=ALERT_UNEXPECTED_ERROR_MESSAGE))
        elif event.state == WorkerState.CANCELLED:
            self._sync_store_state()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_save_policy(self) -> None:
        """Save (Ctrl+S)."""
        self._save_policy()

    def action_cancel(self) -> None:
        """Cancel (Escape)."""
        self._cancel()

    def action_pop_screen(self) -> None:
        self._cancel()

    def action_refresh(self) -> None:
        """Discard edits and re-read the policy from the store."""
        if self._presenter.on_screen_shown():
            self._render_form()
            self.app.notify(RELOADED_MESSAGE, severity="information")
        self._sync_store_state()

    # =========================================================================
    # Save / cancel
    # =========================================================================

    def _save_policy(self) -> None:
        if self._store.current_policy is None:
            logger.info("Save ignored: %s", NO_POLICY_MESSAGE)
            return
        if not self._presenter.can_save:
            return
        with suppress(NoMatches, WrongType):
            self.query_one("#save-btn", CustomButton).disabled = True
        self.run_worker(
            self._presenter.save(),
            name=SAVE_WORKER_NAME,
            group=SAVE_WORKER_NAME,
            exclusive=True,
            exit_on_error=False,
        )

    def _show_save_result(self, result: SaveResult) -> None:
        if not self.is_attached:
            logger.debug("Save result not shown; screen already closed: %s", result.kind)
            return
        self._suppress_next_resync = True
        self.app.push_screen(
            CustomAlertDialog(
                result.message,
                title=result.title,
                is_error=isinstance(result, SaveFailed),
            ),
            callback=lambda _: self._on_alert_closed(result),
        )

    def _on_alert_closed(self, result: SaveResult) -> None:
        self._presenter.acknowledge_alert()
        if isinstance(result, SaveSucceeded):
            self.dismiss(True)

    def _cancel(self) -> None:
        """Close without saving; edits are discarded.

        A save already handed to the store keeps running after the screen
        closes.
        """
        if self._presenter.is_saving:
            logger.info("Borrowing settings closed while a save is in flight")
        else:
            logger.debug("Borrowing settings cancelled; discarding edits")
        self.dismiss(False)


__all__ = ["BorrowingSettingsScreen"]

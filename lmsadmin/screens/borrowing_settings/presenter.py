"""Borrowing settings presenter - form state, bounds and save logic."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Literal, Union

from lmsadmin.constants.defaults import (
    MAX_BOOKS_DEFAULT,
    REISSUE_PERIOD_DAYS_DEFAULT,
)
from lmsadmin.constants.enums import SaveResultKind
from lmsadmin.constants.limits import (
    BORROW_DAYS_MAX,
    BORROW_DAYS_MIN,
    MAX_BOOKS_MAX,
    MAX_BOOKS_MIN,
    SLIDER_STEP,
)
from lmsadmin.constants.screens.borrowing_settings import (
    ALERT_ERROR_TITLE,
    ALERT_SUCCESS_MESSAGE,
    ALERT_SUCCESS_TITLE,
)
from lmsadmin.models.policy import Policy
from lmsadmin.models.state.policy_store import PolicyStore
from lmsadmin.utils.ranges import snap_to_step

logger = logging.getLogger(__name__)


@dataclass
class BorrowingFormState:
    """Screen-local, uncommitted copy of the two policy limits."""

    max_books_borrowable: float = float(MAX_BOOKS_DEFAULT)
    reissue_period_days: float = float(REISSUE_PERIOD_DAYS_DEFAULT)
    showing_save_alert: bool = False

    def as_tuple(self) -> tuple[int, int]:
        return int(self.max_books_borrowable), int(self.reissue_period_days)


@dataclass(frozen=True)
class SaveSucceeded:
    """Save finished and should be presented as a success.

    ``confirmed`` is False when the store reported failure without any
    message; the alert still reads as success in that case.
    """

    confirmed: bool = True
    kind: Literal[SaveResultKind.SUCCESS] = field(default=SaveResultKind.SUCCESS, init=False)

    @property
    def title(self) -> str:
        return ALERT_SUCCESS_TITLE

    @property
    def message(self) -> str:
        return ALERT_SUCCESS_MESSAGE


@dataclass(frozen=True)
class SaveFailed:
    """Save failed with a store-supplied message."""

    message: str
    kind: Literal[SaveResultKind.ERROR] = field(default=SaveResultKind.ERROR, init=False)

    @property
    def title(self) -> str:
        return ALERT_ERROR_TITLE


SaveResult = Union[SaveSucceeded, SaveFailed]


def resolve_save_result(success: bool, error_message: str | None) -> SaveResult:
    """Pick the alert for a completed save.

    A store error message always wins. Without one the result is a success,
    even when ``success`` is False; that case is logged and marked
    unconfirmed.
    """
    if error_message:
        return SaveFailed(message=error_message)
    if not success:
        logger.warning(
            "Store reported a failed save without an error message; "
            "presenting it as success"
        )
        return SaveSucceeded(confirmed=False)
    return SaveSucceeded()


class BorrowingSettingsPresenter:
    """Presenter for BorrowingSettingsScreen.

    Owns the form state and talks to the policy store. Holds no widgets, so
    every operation can be driven directly from tests.
    """

    def __init__(self, store: PolicyStore, initial_policy: Policy | None = None) -> None:
        """Initialize the presenter.

        Args:
            store: Policy store providing the current policy and the save call.
            initial_policy: Policy to seed the form with; defaults to the
                store's current policy.
        """
        self._store = store
        self._form = BorrowingFormState()
        self._saving = False
        self._completed_with: bool | None = None
        self._save_task: asyncio.Future[bool] | None = None
        self.initialize(initial_policy if initial_policy is not None else store.current_policy)

    @property
    def store(self) -> PolicyStore:
        return self._store

    @property
    def form(self) -> BorrowingFormState:
        return self._form

    @property
    def max_books(self) -> int:
        return int(self._form.max_books_borrowable)

    @property
    def reissue_days(self) -> int:
        return int(self._form.reissue_period_days)

    @property
    def is_saving(self) -> bool:
        """True while this presenter has a save in flight."""
        return self._saving

    @property
    def can_save(self) -> bool:
        """Whether pressing Save would reach the store."""
        return (
            self._store.current_policy is not None
            and not self._saving
            and not self._store.is_loading
        )

    # =========================================================================
    # Form state
    # =========================================================================

    def initialize(self, initial_policy: Policy | None) -> None:
        """Seed the form from ``initial_policy``; keep defaults when None."""
        if initial_policy is None:
            return
        self._load_from(initial_policy)

    def on_screen_shown(self) -> bool:
        """Re-read both fields from the store's current policy.

        Unsaved edits are overwritten.

        Returns:
            True when the form was re-synchronised.
        """
        policy = self._store.current_policy
        if policy is None:
            return False
        self._load_from(policy)
        return True

    def set_max_books(self, value: float) -> int:
        """Set the max-books field, clamped to its range and step."""
        self._form.max_books_borrowable = snap_to_step(
            value, MAX_BOOKS_MIN, MAX_BOOKS_MAX, SLIDER_STEP
        )
        return self.max_books

    def set_reissue_days(self, value: float) -> int:
        """Set the reissue-period field, clamped to its range and step."""
        self._form.reissue_period_days = snap_to_step(
            value, BORROW_DAYS_MIN, BORROW_DAYS_MAX, SLIDER_STEP
        )
        return self.reissue_days

    def _load_from(self, policy: Policy) -> None:
        self.set_max_books(policy.max_books_per_user)
        self.set_reissue_days(policy.max_borrow_days)

    # =========================================================================
    # Save
    # =========================================================================

    def build_updated_policy(self, policy: Policy) -> Policy:
        """Return ``policy`` with both limits replaced by the form values."""
        max_books, reissue_days = self._form.as_tuple()
        return policy.with_limits(
            max_books_per_user=max_books,
            max_borrow_days=reissue_days,
        )

    async def save(self) -> SaveResult | None:
        """Write the form values through the store.

        The store call runs in its own task. Cancelling this coroutine (the
        screen being dismissed mid-save) stops the wait, not the save, which
        still runs to completion or failure. The outcome is the flag the
        store hands to ``completion``.

        Returns:
            The result to present, or None when nothing was attempted (no
            current policy, or a save already in flight).
        """
        policy = self._store.current_policy
        if policy is None:
            logger.debug("Save skipped: no current policy")
            return None
        if self._saving or self._store.is_loading:
            logger.debug("Save skipped: a save is already in flight")
            return None

        updated = self.build_updated_policy(policy)
        self._completed_with = None
        self._saving = True
        self._save_task = asyncio.ensure_future(
            self._store.save_policy(updated, completion=self._record_completion)
        )
        try:
            await asyncio.shield(self._save_task)
        finally:
            self._saving = False

        result = resolve_save_result(bool(self._completed_with), self._store.error_message)
        self._form.showing_save_alert = True
        return result

    def _record_completion(self, success: bool) -> None:
        self._completed_with = success

    def acknowledge_alert(self) -> None:
        """Mark the save alert as dismissed."""
        self._form.showing_save_alert = False


__all__ = [
    "BorrowingFormState",
    "BorrowingSettingsPresenter",
    "SaveFailed",
    "SaveResult",
    "SaveSucceeded",
    "resolve_save_result",
]

"""Unit tests for BorrowingSettingsPresenter - form state and save logic.

This module tests:
- Form initialisation from an initial policy or defaults
- Clamping and step snapping of both fields
- Re-sync from the store when the screen is shown
- Save: no-op without a policy, payload construction, result resolution
- Alert acknowledgement

The store is a real InMemoryPolicyStore; its save call is wrapped with a
mock where the test needs to inspect the call.
"""

from __future__ import annotations

import asyncio
import math
from unittest.mock import AsyncMock

import pytest

from lmsadmin.constants.enums import SaveResultKind
from lmsadmin.constants.screens.borrowing_settings import (
    ALERT_ERROR_TITLE,
    ALERT_SUCCESS_MESSAGE,
    ALERT_SUCCESS_TITLE,
)
from lmsadmin.models.policy import Policy
from lmsadmin.models.state.policy_store import InMemoryPolicyStore
from lmsadmin.screens.borrowing_settings.presenter import (
    BorrowingSettingsPresenter,
    SaveFailed,
    SaveSucceeded,
    resolve_save_result,
)

# =============================================================================
# Initialisation
# =============================================================================


class TestPresenterInit:
    """Test presenter construction."""

    def test_initial_policy_seeds_form(self) -> None:
        store = InMemoryPolicyStore()
        presenter = BorrowingSettingsPresenter(
            store, Policy(max_books_per_user=8, max_borrow_days=21)
        )
        assert presenter.form.as_tuple() == (8, 21)

    def test_no_policy_keeps_defaults(self) -> None:
        presenter = BorrowingSettingsPresenter(InMemoryPolicyStore())
        assert presenter.form.as_tuple() == (5, 14)
        assert presenter.form.showing_save_alert is False

    def test_store_policy_used_when_no_initial_policy(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(store)
        assert (presenter.max_books, presenter.reissue_days) == (8, 21)

    def test_initial_policy_wins_over_store(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(
            store, Policy(max_books_per_user=2, max_borrow_days=3)
        )
        assert (presenter.max_books, presenter.reissue_days) == (2, 3)

    def test_initialize_with_none_is_noop(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(store)
        presenter.initialize(None)
        assert presenter.form.as_tuple() == (8, 21)


# =============================================================================
# Setters
# =============================================================================


class TestPresenterSetters:
    """Test field setters."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(1, 1), (15, 15), (0, 1), (-4, 1), (16, 15), (100, 15), (7.4, 7), (7.6, 8)],
    )
    def test_set_max_books_clamps_and_snaps(self, raw: float, expected: int) -> None:
        presenter = BorrowingSettingsPresenter(InMemoryPolicyStore())
        assert presenter.set_max_books(raw) == expected
        assert presenter.max_books == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(1, 1), (60, 60), (0, 1), (61, 60), (29.7, 30)],
    )
    def test_set_reissue_days_clamps_and_snaps(self, raw: float, expected: int) -> None:
        presenter = BorrowingSettingsPresenter(InMemoryPolicyStore())
        assert presenter.set_reissue_days(raw) == expected
        assert presenter.reissue_days == expected

    def test_non_finite_input_goes_to_minimum(self) -> None:
        presenter = BorrowingSettingsPresenter(InMemoryPolicyStore())
        assert presenter.set_max_books(math.nan) == 1
        assert presenter.set_reissue_days(math.inf) == 1

    def test_every_position_stays_in_range(self) -> None:
        presenter = BorrowingSettingsPresenter(InMemoryPolicyStore())
        for tenth in range(-50, 700):
            raw = tenth / 10
            books = presenter.set_max_books(raw)
            days = presenter.set_reissue_days(raw)
            assert 1 <= books <= 15
            assert 1 <= days <= 60
            assert presenter.form.max_books_borrowable == float(books)
            assert presenter.form.reissue_period_days == float(days)


# =============================================================================
# Screen shown
# =============================================================================


class TestPresenterScreenShown:
    """Test on_screen_shown re-sync."""

    def test_resync_discards_unsaved_edits(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(store)
        presenter.set_max_books(3)
        presenter.set_reissue_days(50)
        assert presenter.on_screen_shown() is True
        assert presenter.form.as_tuple() == (8, 21)

    def test_resync_without_policy_keeps_form(self) -> None:
        presenter = BorrowingSettingsPresenter(InMemoryPolicyStore())
        presenter.set_max_books(3)
        assert presenter.on_screen_shown() is False
        assert presenter.max_books == 3

    def test_resync_follows_store_changes(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(store)
        store.current_policy = Policy(max_books_per_user=11, max_borrow_days=40)
        presenter.on_screen_shown()
        assert presenter.form.as_tuple() == (11, 40)


# =============================================================================
# Save
# =============================================================================


class TestPresenterSave:
    """Test presenter save flow."""

    @pytest.mark.asyncio
    async def test_save_without_policy_is_noop(self) -> None:
        store = InMemoryPolicyStore()
        store.save_policy = AsyncMock(return_value=True)  # type: ignore[method-assign]
        presenter = BorrowingSettingsPresenter(store)

        assert await presenter.save() is None
        store.save_policy.assert_not_called()
        assert presenter.form.showing_save_alert is False

    @pytest.mark.asyncio
    async def test_save_sends_form_values(self) -> None:
        store = InMemoryPolicyStore(
            Policy(policy_id="p", max_books_per_user=7, max_borrow_days=30)
        )
        presenter = BorrowingSettingsPresenter(store)
        presenter.set_max_books(10)
        presenter.set_reissue_days(45)

        await presenter.save()

        assert len(store.saved_policies) == 1
        sent = store.saved_policies[0]
        assert sent.max_books_per_user == 10
        assert sent.max_borrow_days == 45
        assert sent.policy_id == "p"

    @pytest.mark.asyncio
    async def test_save_success(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(store)
        result = await presenter.save()
        assert isinstance(result, SaveSucceeded)
        assert result.confirmed is True
        assert result.kind is SaveResultKind.SUCCESS
        assert result.title == ALERT_SUCCESS_TITLE
        assert result.message == ALERT_SUCCESS_MESSAGE
        assert presenter.form.showing_save_alert is True

    @pytest.mark.asyncio
    async def test_save_failure_with_message(self, store: InMemoryPolicyStore) -> None:
        store.fail_with("Network error")
        presenter = BorrowingSettingsPresenter(store)
        presenter.set_max_books(2)

        result = await presenter.save()

        assert isinstance(result, SaveFailed)
        assert result.kind is SaveResultKind.ERROR
        assert result.title == ALERT_ERROR_TITLE
        assert result.message == "Network error"
        assert presenter.form.showing_save_alert is True
        assert presenter.max_books == 2

    @pytest.mark.asyncio
    async def test_save_failure_without_message_reads_as_success(
        self, store: InMemoryPolicyStore
    ) -> None:
        store.fail_with("")
        presenter = BorrowingSettingsPresenter(store)
        result = await presenter.save()
        assert isinstance(result, SaveSucceeded)
        assert result.confirmed is False

    @pytest.mark.asyncio
    async def test_saving_flag_cleared_after_save(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(store)
        await presenter.save()
        assert presenter.is_saving is False
        assert presenter.can_save is True

    @pytest.mark.asyncio
    async def test_saving_flag_cleared_when_store_raises(self, store: InMemoryPolicyStore) -> None:
        store.save_policy = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]
        presenter = BorrowingSettingsPresenter(store)
        with pytest.raises(RuntimeError):
            await presenter.save()
        assert presenter.is_saving is False

    @pytest.mark.asyncio
    async def test_save_passes_completion_to_store(self, store: InMemoryPolicyStore) -> None:
        store.save_policy = AsyncMock(return_value=True)  # type: ignore[method-assign]
        presenter = BorrowingSettingsPresenter(store)
        await presenter.save()
        store.save_policy.assert_awaited_once()
        assert callable(store.save_policy.await_args.kwargs["completion"])

    @pytest.mark.asyncio
    async def test_save_result_follows_completion_flag(self, store: InMemoryPolicyStore) -> None:
        async def _report_failure(policy: Policy, completion=None) -> bool:
            completion(False)
            return True

        store.save_policy = AsyncMock(side_effect=_report_failure)  # type: ignore[method-assign]
        store._error_message = "Disk full"
        presenter = BorrowingSettingsPresenter(store)

        result = await presenter.save()

        assert isinstance(result, SaveFailed)
        assert result.message == "Disk full"

    @pytest.mark.asyncio
    async def test_cancelled_save_still_reaches_store(self, policy: Policy) -> None:
        store = InMemoryPolicyStore(policy, save_delay_seconds=0.1)
        presenter = BorrowingSettingsPresenter(store)
        presenter.set_max_books(10)

        task = asyncio.create_task(presenter.save())
        await asyncio.sleep(0.02)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert presenter.is_saving is False
        assert store.is_loading is True

        await asyncio.sleep(0.2)

        assert store.is_loading is False
        assert store.saved_policies[-1].max_books_per_user == 10
        assert store.current_policy.max_books_per_user == 10

    @pytest.mark.asyncio
    async def test_save_skipped_while_store_busy(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(store)
        store._set_busy(True)
        assert presenter.can_save is False
        assert await presenter.save() is None
        assert store.saved_policies == []

    def test_can_save_requires_policy(self) -> None:
        presenter = BorrowingSettingsPresenter(InMemoryPolicyStore())
        assert presenter.can_save is False

    @pytest.mark.asyncio
    async def test_acknowledge_alert(self, store: InMemoryPolicyStore) -> None:
        presenter = BorrowingSettingsPresenter(store)
        await presenter.save()
        presenter.acknowledge_alert()
        assert presenter.form.showing_save_alert is False


# =============================================================================
# resolve_save_result
# =============================================================================


class TestResolveSaveResult:
    """Test alert selection for completed saves."""

    def test_success(self) -> None:
        assert resolve_save_result(True, None) == SaveSucceeded()

    def test_error_message_wins(self) -> None:
        assert resolve_save_result(False, "Disk full") == SaveFailed(message="Disk full")

    def test_error_message_wins_even_on_success_flag(self) -> None:
        assert resolve_save_result(True, "odd") == SaveFailed(message="odd")

    @pytest.mark.parametrize("message", [None, ""])
    def test_failure_without_message(self, message: str | None) -> None:
        assert resolve_save_result(False, message) == SaveSucceeded(confirmed=False)

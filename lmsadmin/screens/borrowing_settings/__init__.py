"""Borrowing settings screen."""

from lmsadmin.screens.borrowing_settings.borrowing_settings_screen import (
    BorrowingSettingsScreen,
)
from lmsadmin.screens.borrowing_settings.presenter import (
    BorrowingFormState,
    BorrowingSettingsPresenter,
    SaveFailed,
    SaveResult,
    SaveSucceeded,
    resolve_save_result,
)

__all__ = [
    "BorrowingFormState",
    "BorrowingSettingsPresenter",
    "BorrowingSettingsScreen",
    "SaveFailed",
    "SaveResult",
    "SaveSucceeded",
    "resolve_save_result",
]

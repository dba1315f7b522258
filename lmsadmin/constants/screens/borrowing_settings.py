"""Borrowing settings screen constants."""

from typing import Final

# ============================================================================
# Header
# ============================================================================

SCREEN_TITLE: Final = "Borrowing Settings"
BUTTON_SAVE: Final = "Save"
BUTTON_CANCEL: Final = "Cancel"
BUTTON_OK: Final = "OK"

# ============================================================================
# Section cards
# ============================================================================

SECTION_MAX_BOOKS: Final = "Maximum Books Borrowable"
SECTION_REISSUE_PERIOD: Final = "Reissue Period"

UNIT_BOOK: Final = "Book"
UNIT_DAY: Final = "Day"

# ============================================================================
# Accessibility labels and hints
# ============================================================================

A11Y_CANCEL_LABEL: Final = "Cancel"
A11Y_CANCEL_HINT: Final = "Dismiss the borrowing settings screen"
A11Y_SAVE_LABEL: Final = "Save"
A11Y_SAVE_HINT: Final = "Save your borrowing settings"
A11Y_MAX_BOOKS_VALUE_LABEL: Final = "Selected maximum books borrowable"
A11Y_MAX_BOOKS_SLIDER_LABEL: Final = "Maximum number of books"
A11Y_MAX_BOOKS_SLIDER_HINT: Final = "Adjust the number of books a user can borrow"
A11Y_REISSUE_VALUE_LABEL: Final = "Selected reissue period"
A11Y_REISSUE_SLIDER_LABEL: Final = "Reissue period"
A11Y_REISSUE_SLIDER_HINT: Final = "Adjust the number of days allowed for reissue"

# ============================================================================
# Alerts and status
# ============================================================================

ALERT_SUCCESS_TITLE: Final = "Success"
ALERT_SUCCESS_MESSAGE: Final = "Borrow settings have been updated."
ALERT_ERROR_TITLE: Final = "Error"
ALERT_UNEXPECTED_ERROR_MESSAGE: Final = "Failed to save borrowing settings."
SAVING_MESSAGE: Final = "Saving policy..."
RELOADED_MESSAGE: Final = "Policy reloaded from store."
NO_POLICY_MESSAGE: Final = "No policy loaded; nothing to save."

__all__ = [
    "A11Y_CANCEL_HINT",
    "A11Y_CANCEL_LABEL",
    "A11Y_MAX_BOOKS_SLIDER_HINT",
    "A11Y_MAX_BOOKS_SLIDER_LABEL",
    "A11Y_MAX_BOOKS_VALUE_LABEL",
    "A11Y_REISSUE_SLIDER_HINT",
    "A11Y_REISSUE_SLIDER_LABEL",
    "A11Y_REISSUE_VALUE_LABEL",
    "A11Y_SAVE_HINT",
    "A11Y_SAVE_LABEL",
    "ALERT_ERROR_TITLE",
    "ALERT_SUCCESS_MESSAGE",
    "ALERT_SUCCESS_TITLE",
    "ALERT_UNEXPECTED_ERROR_MESSAGE",
    "BUTTON_CANCEL",
    "BUTTON_OK",
    "BUTTON_SAVE",
    "NO_POLICY_MESSAGE",
    "RELOADED_MESSAGE",
    "SAVING_MESSAGE",
    "SCREEN_TITLE",
    "SECTION_MAX_BOOKS",
    "SECTION_REISSUE_PERIOD",
    "UNIT_BOOK",
    "UNIT_DAY",
]

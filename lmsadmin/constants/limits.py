"""Limit values (min/max) for policy fields and controls."""

from typing import Final

# ============================================================================
# Borrowing policy bounds
# ============================================================================

MAX_BOOKS_MIN: Final = 1
MAX_BOOKS_MAX: Final = 15
BORROW_DAYS_MIN: Final = 1
BORROW_DAYS_MAX: Final = 60

# ============================================================================
# Slider stepping
# ============================================================================

SLIDER_STEP: Final = 1
SLIDER_PAGE_STEP: Final = 5

# ============================================================================
# Store
# ============================================================================

SAVE_DELAY_SECONDS_MAX: Final = 10.0

__all__ = [
    "BORROW_DAYS_MAX",
    "BORROW_DAYS_MIN",
    "MAX_BOOKS_MAX",
    "MAX_BOOKS_MIN",
    "SAVE_DELAY_SECONDS_MAX",
    "SLIDER_PAGE_STEP",
    "SLIDER_STEP",
]

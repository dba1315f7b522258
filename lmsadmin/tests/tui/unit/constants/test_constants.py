"""Tests for constants - defaults, limits, enums and screen text."""

from __future__ import annotations

from lmsadmin.constants import (
    BORROW_DAYS_MAX,
    BORROW_DAYS_MIN,
    MAX_BOOKS_DEFAULT,
    MAX_BOOKS_MAX,
    MAX_BOOKS_MIN,
    REISSUE_PERIOD_DAYS_DEFAULT,
    SLIDER_STEP,
    SaveResultKind,
    ThemeMode,
)
from lmsadmin.constants.screens import borrowing_settings as screen_text


class TestLimits:
    """Test range limits and defaults."""

    def test_max_books_range(self) -> None:
        assert (MAX_BOOKS_MIN, MAX_BOOKS_MAX) == (1, 15)

    def test_borrow_days_range(self) -> None:
        assert (BORROW_DAYS_MIN, BORROW_DAYS_MAX) == (1, 60)

    def test_defaults_within_ranges(self) -> None:
        assert MAX_BOOKS_DEFAULT == 5
        assert REISSUE_PERIOD_DAYS_DEFAULT == 14
        assert MAX_BOOKS_MIN <= MAX_BOOKS_DEFAULT <= MAX_BOOKS_MAX
        assert BORROW_DAYS_MIN <= REISSUE_PERIOD_DAYS_DEFAULT <= BORROW_DAYS_MAX

    def test_integer_step(self) -> None:
        assert SLIDER_STEP == 1


class TestEnums:
    """Test enum values."""

    def test_theme_mode_values(self) -> None:
        assert ThemeMode("dark") is ThemeMode.DARK
        assert ThemeMode("light") is ThemeMode.LIGHT

    def test_theme_mode_textual_theme(self) -> None:
        assert ThemeMode.DARK.textual_theme == "textual-dark"
        assert ThemeMode.LIGHT.textual_theme == "textual-light"

    def test_save_result_kind_values(self) -> None:
        assert SaveResultKind.SUCCESS.value == "success"
        assert SaveResultKind.ERROR.value == "error"


class TestScreenText:
    """Test user-facing text of the borrowing settings screen."""

    def test_alert_text(self) -> None:
        assert screen_text.ALERT_SUCCESS_TITLE == "Success"
        assert screen_text.ALERT_SUCCESS_MESSAGE == "Borrow settings have been updated."
        assert screen_text.ALERT_ERROR_TITLE == "Error"

    def test_title_and_units(self) -> None:
        assert screen_text.SCREEN_TITLE == "Borrowing Settings"
        assert screen_text.UNIT_BOOK == "Book"
        assert screen_text.UNIT_DAY == "Day"

    def test_all_exports_exist(self) -> None:
        for name in screen_text.__all__:
            assert isinstance(getattr(screen_text, name), str)

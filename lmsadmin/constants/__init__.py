"""Constants module for LMS Admin TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings and policy
- screens/: Screen-specific constants

Note: Keyboard bindings are defined in lmsadmin.keyboard module.
"""

from lmsadmin.constants.defaults import (
    LOG_LEVEL_DEFAULT,
    MAX_BOOKS_DEFAULT,
    REISSUE_PERIOD_DAYS_DEFAULT,
    THEME_DEFAULT,
)
from lmsadmin.constants.enums import SaveResultKind, ThemeMode
from lmsadmin.constants.limits import (
    BORROW_DAYS_MAX,
    BORROW_DAYS_MIN,
    MAX_BOOKS_MAX,
    MAX_BOOKS_MIN,
    SLIDER_PAGE_STEP,
    SLIDER_STEP,
)
from lmsadmin.constants.values import APP_NAME, APP_TITLE, CONFIG_ENV_VAR

__all__ = [
    "APP_NAME",
    "APP_TITLE",
    "BORROW_DAYS_MAX",
    "BORROW_DAYS_MIN",
    "CONFIG_ENV_VAR",
    "LOG_LEVEL_DEFAULT",
    "MAX_BOOKS_DEFAULT",
    "MAX_BOOKS_MAX",
    "MAX_BOOKS_MIN",
    "REISSUE_PERIOD_DAYS_DEFAULT",
    "SLIDER_PAGE_STEP",
    "SLIDER_STEP",
    "SaveResultKind",
    "THEME_DEFAULT",
    "ThemeMode",
]

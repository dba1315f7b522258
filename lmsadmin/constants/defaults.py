"""Default values for settings.

All default values used in the AppSettings and Policy models and as
validation fallback values.
"""

from typing import Final

# ============================================================================
# Policy defaults
# ============================================================================

MAX_BOOKS_DEFAULT: Final = 5
REISSUE_PERIOD_DAYS_DEFAULT: Final = 14
FINE_PER_DAY_DEFAULT: Final = 0.0

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "dark"

# ============================================================================
# Storage and logging defaults
# ============================================================================

POLICY_FILENAME_DEFAULT: Final = "policy.yaml"
SETTINGS_FILENAME_DEFAULT: Final = "settings.yaml"
LOG_LEVEL_DEFAULT: Final = "INFO"
SAVE_DELAY_SECONDS_DEFAULT: Final = 0.0

__all__ = [
    "FINE_PER_DAY_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "MAX_BOOKS_DEFAULT",
    "POLICY_FILENAME_DEFAULT",
    "REISSUE_PERIOD_DAYS_DEFAULT",
    "SAVE_DELAY_SECONDS_DEFAULT",
    "SETTINGS_FILENAME_DEFAULT",
    "THEME_DEFAULT",
]

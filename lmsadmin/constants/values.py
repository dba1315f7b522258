"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "lmsadmin"
APP_TITLE: Final = "LMS Admin"

# ============================================================================
# Environment
# ============================================================================

CONFIG_ENV_VAR: Final = "LMSADMIN_CONFIG"
CONFIG_DIR_NAME: Final = ".config"

# ============================================================================
# Logging
# ============================================================================

LOG_FORMAT: Final = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

__all__ = [
    "APP_NAME",
    "APP_TITLE",
    "CONFIG_DIR_NAME",
    "CONFIG_ENV_VAR",
    "LOG_FORMAT",
]

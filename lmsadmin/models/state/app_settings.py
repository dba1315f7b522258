"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from lmsadmin.constants.defaults import (
    LOG_LEVEL_DEFAULT,
    SAVE_DELAY_SECONDS_DEFAULT,
    THEME_DEFAULT,
)
from lmsadmin.constants.limits import SAVE_DELAY_SECONDS_MAX


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Paths
    policy_path: str = ""  # empty -> <config dir>/policy.yaml
    log_file: str = ""  # empty -> no file logging

    # UI preferences
    theme: str = THEME_DEFAULT  # dark|light

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT

    # Store behaviour
    save_delay_seconds: float = Field(
        default=SAVE_DELAY_SECONDS_DEFAULT,
        ge=0,
        le=SAVE_DELAY_SECONDS_MAX,
    )
    seed_default_policy: bool = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""

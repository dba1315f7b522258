"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from lmsadmin.constants.defaults import SETTINGS_FILENAME_DEFAULT
from lmsadmin.constants.values import APP_NAME, CONFIG_DIR_NAME, CONFIG_ENV_VAR
from lmsadmin.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save :class:`AppSettings`.

    The settings file lives at ``~/.config/lmsadmin/settings.yaml`` unless
    the ``LMSADMIN_CONFIG`` environment variable points elsewhere.
    """

    @staticmethod
    def config_path() -> Path:
        """Return the settings file path."""
        override = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if override:
            return Path(override).expanduser()
        return Path.home() / CONFIG_DIR_NAME / APP_NAME / SETTINGS_FILENAME_DEFAULT

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists yet.

        Raises:
            ConfigLoadError: If the file can't be read, isn't valid YAML, or
                fails validation.
        """
        settings_path = path or cls.config_path()
        if not settings_path.exists():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read {settings_path}: {e}") from e

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{settings_path} must contain a mapping")

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {e}") from e

        logger.info("Loaded settings from %s", settings_path)
        return settings

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> None:
        """Write settings to disk.

        Raises:
            ConfigSaveError: If the file can't be written.
        """
        settings_path = path or cls.config_path()
        payload = yaml.safe_dump(
            settings.model_dump(mode="json"),
            sort_keys=True,
            default_flow_style=False,
        )
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = settings_path.with_suffix(settings_path.suffix + ".tmp")
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(settings_path)
        except OSError as e:
            raise ConfigSaveError(f"Cannot write {settings_path}: {e}") from e
        logger.debug("Saved settings to %s", settings_path)

    @classmethod
    def reset(cls, path: Path | None = None) -> AppSettings:
        """Overwrite the settings file with defaults and return them."""
        defaults = AppSettings()
        cls.save(defaults, path)
        return defaults


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]

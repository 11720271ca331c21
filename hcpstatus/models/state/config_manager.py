"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from hcpstatus.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "HCPSTATUS_CONFIG_DIR"
SETTINGS_FILENAME = "settings.yaml"


class ConfigManager:
    """Loads and saves AppSettings.

    The settings file lives in ``$HCPSTATUS_CONFIG_DIR`` when set, otherwise
    in ``~/.config/hcpstatus``.
    """

    @staticmethod
    def settings_path() -> Path:
        config_dir = os.environ.get(CONFIG_DIR_ENV)
        base = Path(config_dir) if config_dir else Path.home() / ".config" / "hcpstatus"
        return base / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists.

        Raises:
            ConfigLoadError: The file is unreadable, not YAML, or fails validation.
        """
        settings_file = path or cls.settings_path()
        if not settings_file.exists():
            logger.debug("No settings file at %s, using defaults", settings_file)
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_file.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"cannot read settings from {settings_file}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"settings file {settings_file} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid settings in {settings_file}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk and return the file path."""
        settings_file = path or cls.settings_path()
        try:
            settings_file.parent.mkdir(parents=True, exist_ok=True)
            settings_file.write_text(
                yaml.safe_dump(settings.model_dump(), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"cannot write settings to {settings_file}: {exc}") from exc
        logger.debug("Saved settings to %s", settings_file)
        return settings_file

    @classmethod
    def reset(cls, path: Path | None = None) -> AppSettings:
        """Overwrite the settings file with defaults."""
        settings = AppSettings()
        cls.save(settings, path)
        return settings


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]

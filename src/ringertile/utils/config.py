"""
Configuration management for RingerTile.

This module provides a ConfigManager that persists the tile's two shared settings,
the vibrate-when-ringing flag and the selectable mode order, in a JSON file. It
validates loaded values against defaults, writes atomically, and notifies a
SystemEventHandler whenever a setting changes so that observers re-read it.
"""

import json
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

from .helpers import get_app_data_path
from ringertile import constants

if TYPE_CHECKING:
    from ringertile.core.system_events import SystemEventHandler


class ConfigError(Exception):
    """Custom exception for configuration-related errors, such as I/O or permission issues."""


class ConfigManager:
    """
    Manages loading, saving, and validation of RingerTile's settings.

    Also serves as the key-value settings store read and written by the sound button.
    """

    def __init__(self,
                 config_path: Optional[Union[str, Path]] = None,
                 notifier: Optional['SystemEventHandler'] = None) -> None:
        """
        Initializes the ConfigManager.

        Args:
            config_path: Location of the JSON file. Defaults to the app data directory.
            notifier: Receives `notify_setting_changed` for every changed key.
        """
        if config_path is None:
            config_path = get_app_data_path() / constants.config.defaults.CONFIG_FILENAME
        self.config_path = Path(config_path)
        self.notifier = notifier
        self.logger = logging.getLogger("RingerTile.Config")
        self._last_config: Optional[Dict[str, Any]] = None
        self._config: Optional[Dict[str, Any]] = None

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_flag(self, key: str, value: Any, default: int) -> int:
        """Validates a 0/1 flag, accepting booleans."""
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int) and value in (0, 1):
            return value
        self.logger.warning(constants.config.messages.INVALID_FLAG.format(key=key, value=value, default=default))
        return default

    def _validate_text(self, key: str, value: Any, default: Optional[str]) -> Optional[str]:
        """Validates an optional string value."""
        if value is None or isinstance(value, str):
            return value
        self.logger.warning(constants.config.messages.INVALID_TEXT.format(key=key, value=value, default=default))
        return default

    def _validate_config(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the configuration, merges it with defaults for missing keys,
        and sanitizes all values.
        """
        default_ref = constants.config.defaults.DEFAULT_CONFIG
        keys = constants.config.keys

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(sorted(unknown_keys)))

        validated = default_ref.copy()
        validated.update({k: v for k, v in loaded_config.items() if k in default_ref})

        validated[keys.VIBRATE_WHEN_RINGING] = self._validate_flag(
            keys.VIBRATE_WHEN_RINGING, validated.get(keys.VIBRATE_WHEN_RINGING),
            default_ref[keys.VIBRATE_WHEN_RINGING])
        validated[keys.SELECTABLE_ORDER] = self._validate_text(
            keys.SELECTABLE_ORDER, validated.get(keys.SELECTABLE_ORDER),
            default_ref[keys.SELECTABLE_ORDER])
        return validated

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> Dict[str, Any]:
        """Loads and validates the configuration from the file."""
        if not self.config_path.exists():
            self.logger.info("Configuration file not found. Creating with default settings.")
            return self.reset_to_defaults()
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
            if not isinstance(config, dict):
                raise json.JSONDecodeError("Top-level value is not an object", "", 0)
        except (json.JSONDecodeError, UnicodeDecodeError):
            self.logger.error("Configuration file is corrupt. Backing it up and using defaults.")
            try:
                corrupt_path = self.config_path.with_name(f"{self.config_path.name}.corrupt")
                shutil.move(str(self.config_path), str(corrupt_path))
            except OSError:
                self.logger.exception("Failed to back up corrupt config file.")
            return self.reset_to_defaults()
        except OSError as e:
            msg = f"OS error reading config file {self.config_path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        validated_config = self._validate_config(config)
        self._last_config = validated_config.copy()
        self._config = validated_config.copy()
        return validated_config

    def save(self, config: Dict[str, Any]) -> None:
        """Atomically saves the provided configuration to the file."""
        validated_config = self._validate_config(config)

        if self._last_config == validated_config:
            self.logger.debug("Skipping save, configuration is unchanged.")
            self._config = validated_config.copy()
            return

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", delete=False, dir=self.config_path.parent, encoding="utf-8"
            ) as temp_f:
                json.dump(validated_config, temp_f, indent=4)
                temp_path = temp_f.name
            shutil.move(temp_path, str(self.config_path))
            self._last_config = validated_config.copy()
            self._config = validated_config.copy()
            self.logger.debug("Configuration saved successfully to %s", self.config_path)
        except OSError as e:
            msg = f"Failed to save configuration to {self.config_path}: {e}"
            self.logger.error(msg)
            raise ConfigError(msg) from e

    def reset_to_defaults(self) -> Dict[str, Any]:
        """Resets the configuration to factory defaults and saves it."""
        self.logger.info("Resetting configuration to default values.")
        defaults = constants.config.defaults.DEFAULT_CONFIG.copy()
        self.save(defaults)
        return defaults

    # ------------------------------------------------------------------
    # Settings store
    # ------------------------------------------------------------------

    @property
    def config(self) -> Dict[str, Any]:
        if self._config is None:
            self._config = self.load()
        return self._config

    def _check_key(self, key: str) -> None:
        if key not in constants.config.defaults.DEFAULT_CONFIG:
            raise KeyError(f"Unknown setting: {key}")

    def get_int(self, key: str, default: int = 0) -> int:
        self._check_key(key)
        value = self.config.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_string(self, key: str) -> Optional[str]:
        self._check_key(key)
        value = self.config.get(key)
        return None if value is None else str(value)

    def put_int(self, key: str, value: int) -> None:
        self._put(key, int(value))

    def put_string(self, key: str, value: Optional[str]) -> None:
        self._put(key, value)

    def _put(self, key: str, value: Any) -> None:
        self._check_key(key)
        updated = self.config.copy()
        previous = updated.get(key)
        updated[key] = value
        self.save(updated)
        if self.config.get(key) != previous and self.notifier is not None:
            self.notifier.notify_setting_changed(key)

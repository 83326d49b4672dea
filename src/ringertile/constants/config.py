"""
Constants for application configuration defaults and constraints.
"""
from typing import Final, Dict, Any


class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_FLAG: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_TEXT: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigKeys:
    """Names of the persisted settings shared with the rest of the system."""
    VIBRATE_WHEN_RINGING: Final[str] = "vibrate_when_ringing"
    SELECTABLE_ORDER: Final[str] = "selectable_order"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.VIBRATE_WHEN_RINGING or not self.SELECTABLE_ORDER:
            raise ValueError("Setting keys must not be empty")
        if self.VIBRATE_WHEN_RINGING == self.SELECTABLE_ORDER:
            raise ValueError("Setting keys must be distinct")


class ConfigConstants:
    """Defines default values for all persisted settings."""
    DEFAULT_VIBRATE_WHEN_RINGING: Final[int] = 0
    DEFAULT_SELECTABLE_ORDER: Final[None] = None

    CONFIG_FILENAME: Final[str] = "RingerTile_Settings.json"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        ConfigKeys.VIBRATE_WHEN_RINGING: DEFAULT_VIBRATE_WHEN_RINGING,
        ConfigKeys.SELECTABLE_ORDER: DEFAULT_SELECTABLE_ORDER,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.DEFAULT_VIBRATE_WHEN_RINGING not in (0, 1):
            raise ValueError("DEFAULT_VIBRATE_WHEN_RINGING must be 0 or 1")
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")

        expected_keys = {ConfigKeys.VIBRATE_WHEN_RINGING, ConfigKeys.SELECTABLE_ORDER}
        actual_keys = set(self.DEFAULT_CONFIG.keys())
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            extra = actual_keys - expected_keys
            raise ValueError(f"DEFAULT_CONFIG key mismatch. Missing: {missing or 'None'}. Extra: {extra or 'None'}.")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.keys = ConfigKeys()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()

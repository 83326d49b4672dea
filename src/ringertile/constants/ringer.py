"""
Constants for the ringer mode catalog, its display mapping, and user actions.
"""
from typing import Final, Tuple


class ModeConstants:
    """Constants describing the mode catalog and the selectable order."""
    # Number of entries in the fixed mode catalog (SILENT, VIBRATE, NORMAL, NORMAL_VIBRATE).
    CATALOG_SIZE: Final[int] = 4
    DEFAULT_ORDER: Final[Tuple[int, ...]] = (0, 1, 2, 3)
    # Catalog index used whenever external state or a stored order cannot be resolved.
    FALLBACK_INDEX: Final[int] = 0

    # Separator written by older settings screens when storing the order.
    LEGACY_ORDER_SEPARATOR: Final[str] = "OV=I=XseparatorX=I=VO"
    ORDER_SEPARATOR: Final[str] = ","

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.CATALOG_SIZE <= 0:
            raise ValueError("CATALOG_SIZE must be positive")
        if tuple(range(self.CATALOG_SIZE)) != self.DEFAULT_ORDER:
            raise ValueError("DEFAULT_ORDER must be the identity order over the catalog")
        if not (0 <= self.FALLBACK_INDEX < self.CATALOG_SIZE):
            raise ValueError("FALLBACK_INDEX must be a valid catalog index")
        if not self.LEGACY_ORDER_SEPARATOR or not self.ORDER_SEPARATOR:
            raise ValueError("Order separators must not be empty")


class DisplayConstants:
    """Icon names per catalog index; the first two indices render as disabled."""
    ICON_SILENT: Final[str] = "stat_silent"
    ICON_VIBRATE: Final[str] = "stat_vibrate_off"
    ICON_RING: Final[str] = "stat_ring_on"
    ICON_RING_VIBRATE: Final[str] = "stat_ring_vibrate_on"

    ICONS: Final[Tuple[str, ...]] = (ICON_SILENT, ICON_VIBRATE, ICON_RING, ICON_RING_VIBRATE)
    ENABLED: Final[Tuple[bool, ...]] = (False, False, True, True)

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if len(self.ICONS) != ModeConstants.CATALOG_SIZE:
            raise ValueError("ICONS must have one entry per catalog mode")
        if len(self.ENABLED) != ModeConstants.CATALOG_SIZE:
            raise ValueError("ENABLED must have one entry per catalog mode")
        if not all(self.ICONS):
            raise ValueError("Icon names must not be empty")


class ActionConstants:
    """Constants for the side effects of user actions."""
    VIBRATE_DURATION_MS: Final[int] = 250  # 0.25s
    SOUND_SETTINGS_ACTION: Final[str] = "android.settings.SOUND_SETTINGS"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.VIBRATE_DURATION_MS <= 0:
            raise ValueError("VIBRATE_DURATION_MS must be positive")
        if not self.SOUND_SETTINGS_ACTION:
            raise ValueError("SOUND_SETTINGS_ACTION must not be empty")


class RingerConstants:
    """Container for ringer-related constant groups."""
    def __init__(self) -> None:
        self.modes = ModeConstants()
        self.display = DisplayConstants()
        self.actions = ActionConstants()

# Singleton instance for easy access
ringer = RingerConstants()

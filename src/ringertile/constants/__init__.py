"""
Provides centralized, immutable constants for the RingerTile application.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from ringertile import constants

    # Access application metadata
    print(constants.app.VERSION)

    # Access a default configuration value
    order = constants.ringer.modes.DEFAULT_ORDER

    # Access the settings key for the vibrate flag
    key = constants.config.keys.VIBRATE_WHEN_RINGING
"""

from .app import app
from .config import config
from .logs import logs
from .ringer import ringer

__all__ = [
    "app",
    "config",
    "logs",
    "ringer",
]

"""
Utilities submodule for RingerTile.

Provides helper functions and configuration management.
"""

from .config import ConfigError, ConfigManager
from .helpers import setup_logging, get_app_data_path

__all__ = ["ConfigError", "ConfigManager", "setup_logging", "get_app_data_path"]

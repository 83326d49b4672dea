"""
Helper utilities for RingerTile.

This module provides foundational functions for directory management and logging setup.
"""

import os
import sys
import logging
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional
from pathlib import Path

from ringertile import constants

# Thread lock for logging setup
_logging_lock: threading.Lock = threading.Lock()


def get_app_data_path() -> Path:
    """
    Retrieve the application data directory path, creating it if needed.

    Uses APPDATA when set (Windows), then XDG_CONFIG_HOME, then ~/.config.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    base: Optional[str] = os.getenv("APPDATA") or os.getenv("XDG_CONFIG_HOME")
    if not base:
        base = os.path.join(os.path.expanduser("~"), ".config")
        logger.debug("APPDATA/XDG_CONFIG_HOME not set, using %s", base)
    path: Path = Path(base) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except PermissionError as e:
        logger.error("Permission denied creating app data directory %s: %s", path, e)
        raise PermissionError(f"Cannot access app data directory: {path}. Please check permissions.") from e
    except OSError as e:
        logger.error("Failed to create app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e


def is_production() -> bool:
    return os.environ.get(constants.app.ENV_VAR_PROD_MODE, "").lower() == "true"


def setup_logging(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure logging with both a rotating file handler and a console handler in a thread-safe manner.

    Args:
        log_dir: Directory for the log file. Defaults to the app data directory.

    Returns:
        logging.Logger: The application's root logger.
    """
    logger: logging.Logger = logging.getLogger(constants.app.APP_NAME)
    with _logging_lock:
        if logger.handlers:
            return logger

        production = is_production()
        logger.setLevel(constants.logs.PRODUCTION_LOG_LEVEL if production else logging.DEBUG)

        log_formatter = logging.Formatter(
            fmt=constants.logs.LOG_FORMAT, datefmt=constants.logs.LOG_DATE_FORMAT
        )

        # File Handler
        log_file_path: Optional[Path] = None
        try:
            log_file_path = (log_dir or get_app_data_path()) / constants.logs.LOG_FILENAME
            file_handler = RotatingFileHandler(
                log_file_path,
                maxBytes=constants.logs.MAX_LOG_SIZE,
                backupCount=constants.logs.LOG_BACKUP_COUNT,
                encoding='utf-8',
                delay=True
            )
            file_handler.setFormatter(log_formatter)
            file_handler.setLevel(constants.logs.PRODUCTION_LOG_LEVEL if production else constants.logs.FILE_LOG_LEVEL)
            logger.addHandler(file_handler)
        except (PermissionError, OSError) as e:
            print(f"CRITICAL: Failed to set up file logging at {log_file_path}: {e}. File logging will be disabled.", file=sys.stderr)

        # Console Handler
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(log_formatter)
        console_handler.setLevel(constants.logs.PRODUCTION_LOG_LEVEL if production else constants.logs.CONSOLE_LOG_LEVEL)
        logger.addHandler(console_handler)

        if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            logger.info("File logging target: %s", log_file_path)
        else:
            logger.warning("File logging is disabled; logging to console only.")

    return logger

"""
Logging Configuration
Sets up the loggers for the solver, the desktop window and the HTTP API.
"""
import logging
import os
import sys
from typing import Optional

LOGGER_NAMES = ("solver", "gui", "backend")


def level_from_env(default: int = logging.INFO) -> int:
    """Read ``LINSOLVER_LOG_LEVEL`` (e.g. ``DEBUG``); fall back to *default*."""
    name = os.environ.get("LINSOLVER_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the package loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate output when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("solver").info("Logging initialized.")

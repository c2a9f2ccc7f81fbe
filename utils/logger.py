# -*- coding: utf-8 -*-
"""
Logging configuration.

All modules log through children of the "stepforms" logger:

    logger = get_logger(__name__)

The first call configures a rotating log file under Config.LOGS_DIR and a
console handler whose level comes from LOG_LEVEL.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = "stepforms"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_root_logger: Optional[logging.Logger] = None


def _console_level(level_name: str) -> int:
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(console_level: Optional[str] = None) -> logging.Logger:
    """
    Configure the application logger.

    Safe to call again: existing handlers are replaced, not duplicated.

    Args:
        console_level: Level name for console output; defaults to Config.LOG_LEVEL
    """
    global _root_logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.ensure_directories()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.handlers.clear()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(_console_level(console_level or Config.LOG_LEVEL))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _root_logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger of the application logger, configuring it on first use."""
    if _root_logger is None:
        setup_logger()

    return _root_logger.getChild(name)

"""
Logging Configuration
Sets up and tears down the 'intensitylist' package logger.

Rejected range updates are reported on this logger at ERROR level, so the
level chosen here decides whether they show up.
"""
import logging
import sys
from typing import Optional, Union

from intensitylist import config

PACKAGE_LOGGER: str = "intensitylist"


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'intensitylist' namespace.

    Args:
        level: Logging level as int (logging.DEBUG) or name ("debug").
               Defaults to config.LOG_LEVEL.
        log_file: Optional path to save logs to a file.
    """
    level = config.parse_log_level(level, default=config.LOG_LEVEL)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate logs when called more than once
    reset_logging()

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")


def reset_logging() -> None:
    """Close and remove every handler attached by setup_logging()."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (figure sizes, dict keys, ...)
   scattered throughout the code.
2. Deployment: It lets the log level be changed through the environment
   without touching the code that calls setup_logging().

Exports:
    LOG_LEVEL (int): Default logging level for the 'intensitylist' logger.
    PLOT_FIGSIZE (tuple): Default matplotlib figure size in inches.
    PLOT_MARGIN_FRACTION (float): Fraction of the plotted span added on each side.
    POSITIONS_KEY, INTENSITIES_KEY (str): Keys used by IntensityList.to_dict().
"""
import logging
import os
from typing import Union

LOG_LEVEL_ENV_VAR: str = "INTENSITYLIST_LOG_LEVEL"


def parse_log_level(raw: Union[int, str, None], default: int = logging.INFO) -> int:
    """
    Turn a level name ("DEBUG", "warning") or number (10, "10") into an int.
    Unknown values fall back to the default.
    """
    if raw is None:
        return default
    if isinstance(raw, int):
        return raw
    raw = raw.strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return default


def get_log_level(default: int = logging.INFO) -> int:
    """Read the log level from the INTENSITYLIST_LOG_LEVEL environment variable."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR), default)


# Global Constants
LOG_LEVEL: int = get_log_level()

PLOT_FIGSIZE: tuple[float, float] = (7.0, 5.0)
PLOT_MARGIN_FRACTION: float = 0.1

POSITIONS_KEY: str = "positions"
INTENSITIES_KEY: str = "intensities"

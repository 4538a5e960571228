"""
Configuration & Constants
=========================
This module serves as the central registry for the formatting convention and
the environment-driven application settings.

Why is this file needed?
------------------------
1. Single convention: the separator, decimal point and group size are used by
   the sanitizer, the grouper and the cursor mapper. Keeping them here stops
   them from drifting apart.
2. Deployment: log level and log file can be changed through the environment
   without touching the code.

Exports:
    GROUP_SEPARATOR (str): Character inserted between digit groups.
    DECIMAL_POINT (str): The one decimal point accepted in decimal mode.
    GROUP_SIZE (int): Number of digits per group.
    SIGNIFICANT_CHARS (frozenset[str]): Characters counted for caret mapping.
    LOG_LEVEL (int): Logging level for the application.
    LOG_FILE (str | None): Optional path of the application log file.
"""
import logging
import os
from typing import Optional

GROUP_SEPARATOR: str = ","
DECIMAL_POINT: str = "."
GROUP_SIZE: int = 3

ASCII_DIGITS: str = "0123456789"
SIGNIFICANT_CHARS: frozenset[str] = frozenset(ASCII_DIGITS + DECIMAL_POINT)


def get_log_level(default: int = logging.INFO) -> int:
    """
    Read the log level from NUMBERINPUT_LOG_LEVEL ("DEBUG", "INFO", ... or a number).
    """
    raw = os.environ.get("NUMBERINPUT_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


LOG_LEVEL: int = get_log_level()
LOG_FILE: Optional[str] = os.environ.get("NUMBERINPUT_LOG_FILE") or None

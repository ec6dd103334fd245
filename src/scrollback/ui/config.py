"""UI configuration constants.

Centralizes magic numbers and display strings for the UI module.
"""

import logging

from ..logging_setup import parse_level


class LogLevel:
    """Log panel thresholds.

    Aliases of the ``logging`` levels, so records filter against them directly.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @staticmethod
    def name(level: int) -> str:
        return logging.getLevelName(level)

    @staticmethod
    def from_string(level_str: str) -> int:
        """Convert a level name to its number. Unknown names mean INFO."""
        return parse_level(level_str)[1]


# Rows from the edge that count as reaching it
SCROLL_TOP_THRESHOLD = 1
SCROLL_BOTTOM_THRESHOLD = 2

# Status bar text
STATUS_LOADING = "Loading..."
STATUS_LOADED = "Loaded!"

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

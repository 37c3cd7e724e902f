"""
Log level enumeration

Severity scale shared by loggers, formatters and transports.
"""

from enum import IntEnum
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Lower values are more severe. A logger configured at a given level
    forwards every entry whose level is numerically less than or equal to it.
    """

    ERROR = 0   # Failures that need attention
    WARN = 1    # Unexpected but recoverable conditions
    INFO = 2    # Informational messages
    DEBUG = 3   # Debug information
    TRACE = 4   # Most verbose, detailed tracing

    def __str__(self) -> str:
        """String representation of log level."""
        return LEVEL_NAMES[self]

    def __format__(self, format_spec: str) -> str:
        # IntEnum formats as int on 3.11+
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, name: Any) -> Optional["LogLevel"]:
        """Alias of :func:`parse_level`."""
        return parse_level(name)


# Mapping from log level to canonical names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARN",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.TRACE: "TRACE",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}


def parse_level(name: Any) -> Optional[LogLevel]:
    """
    Convert a level name to LogLevel.

    Args:
        name: Level name (case-insensitive)

    Returns:
        Matching LogLevel, or None if the name is not one of the five
        canonical names. Aliases such as "WARNING" and numeric strings
        are not recognized.
    """
    if not isinstance(name, str):
        return None
    return LEVEL_FROM_NAME.get(name.upper())

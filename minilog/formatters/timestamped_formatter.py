"""
Timestamped text formatter

Format: [timestamp] [LEVEL] [context] message
"""

from minilog.core.log_entry import LogEntry, format_timestamp
from minilog.formatters.base_formatter import LineFormatter


class TimestampedFormatter(LineFormatter):
    """
    Same layout as SimpleFormatter, prefixed with an ISO-8601 UTC timestamp.

    Example:
        "[2024-01-15T10:30:00.000Z] [INFO] Test message"
    """

    def _prefix(self, entry: LogEntry) -> str:
        return f"[{format_timestamp(entry.timestamp)}] "

    def __repr__(self) -> str:
        """String representation."""
        return "TimestampedFormatter()"

"""
JSON formatter for structured logging

Formats log entries as single-line JSON objects
"""

from minilog.core.log_entry import LogEntry
from minilog.formatters.base_formatter import BaseFormatter, dump_json


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(self, ensure_ascii: bool = False):
        """
        Initialize JSON formatter.

        Args:
            ensure_ascii: Escape non-ASCII characters

        Output keys are ``level``, ``message`` and ``timestamp``, plus
        ``context`` when the entry has one, ``data`` whenever data was given
        (an empty mapping included) and ``error`` as an object with
        ``name``, ``message`` and ``stack``.

        Example:
            {"level":"INFO","message":"started","timestamp":"2024-01-15T10:30:00.000Z"}
        """
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string
        """
        return dump_json(entry.to_dict(), ensure_ascii=self.ensure_ascii)

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(ensure_ascii={self.ensure_ascii})"

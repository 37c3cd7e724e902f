"""
Simple text formatter

Format: [LEVEL] [context] message
"""

from minilog.formatters.base_formatter import LineFormatter


class SimpleFormatter(LineFormatter):
    """
    Format log entries as ``[LEVEL] [context] message``.

    The context segment, including its trailing space, is left out when the
    entry has no context. Non-empty data is appended as compact JSON and an
    attached error adds a line with its traceback (or message).

    Example:
        "[INFO] [TestModule] Test message"
        "[INFO] Test message {\"userId\":123}"
    """

    def __repr__(self) -> str:
        """String representation."""
        return "SimpleFormatter()"

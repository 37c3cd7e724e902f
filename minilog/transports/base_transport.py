"""
Base transport interface

A transport receives unformatted log entries from a logger and performs the
actual output.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from minilog.core.log_entry import LogEntry
from minilog.formatters.base_formatter import BaseFormatter
from minilog.formatters.simple_formatter import SimpleFormatter


class TransportError(Exception):
    """
    Raised by Logger.flush() / Logger.close() when transports failed.

    Every transport operation has settled by the time this is raised.
    ``failures`` lists each ``(transport_name, exception)`` pair in
    transport order.
    """

    def __init__(self, operation: str, failures: List[Tuple[str, BaseException]]):
        self.operation = operation
        self.failures = failures
        names = ", ".join(name for name, _ in failures)
        super().__init__(f"{operation} failed for {len(failures)} transport(s): {names}")


class BaseTransport(ABC):
    """
    Abstract base class for transports.

    ``write`` may return None or an awaitable. ``flush`` and ``close`` are
    no-ops unless overridden. Loggers also accept any object that has a
    ``name`` and a ``write`` method; such objects need not define
    ``flush``/``close`` at all.
    """

    name: str = "transport"

    @abstractmethod
    def write(self, entry: LogEntry) -> Any:
        """
        Output a log entry.

        Args:
            entry: The log entry to write

        Returns:
            None, or an awaitable completing when the write is done
        """
        pass

    def flush(self) -> Any:
        """Flush buffered output."""
        return None

    def close(self) -> Any:
        """Release resources."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FormattingTransport(BaseTransport):
    """
    Transport that renders entries through a formatter before output.

    The formatter given at construction wins. Otherwise the default supplied
    by the logger the transport is attached to is used, and SimpleFormatter
    when neither exists.
    """

    def __init__(self, formatter: Optional[BaseFormatter] = None):
        self._formatter = formatter
        self._default_formatter: Optional[BaseFormatter] = None
        self._fallback = SimpleFormatter()

    @property
    def formatter(self) -> BaseFormatter:
        """Formatter in effect for this transport."""
        return self._formatter or self._default_formatter or self._fallback

    def use_default_formatter(self, formatter: BaseFormatter) -> None:
        """Install the logger-supplied formatter; ignored if one was given."""
        if self._formatter is None:
            self._default_formatter = formatter

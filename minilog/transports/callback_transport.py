"""
Callback transport

Hands each formatted entry to a user-supplied function.
"""

from typing import Any, Callable, Optional

from minilog.core.log_entry import LogEntry
from minilog.formatters.base_formatter import BaseFormatter
from minilog.transports.base_transport import FormattingTransport


class CallbackTransport(FormattingTransport):
    """
    Invoke a callback for each entry.

    Useful for custom integrations.
    """

    name = "callback"

    def __init__(
        self,
        callback: Callable[[LogEntry, str], Any],
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize callback transport.

        Args:
            callback: Function taking the raw entry and the formatted
                     string. May be a coroutine function; the write then
                     completes when the returned coroutine does.
            formatter: Log formatter (default: logger default or SimpleFormatter)

        Raises:
            TypeError: If callback is not callable

        Example:
            lines = []
            transport = CallbackTransport(lambda entry, text: lines.append(text))

            async def ship(entry, text):
                await client.send(text)

            transport = CallbackTransport(ship, formatter=JSONFormatter())
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        super().__init__(formatter)
        self.callback = callback

    def write(self, entry: LogEntry) -> Any:
        formatted = self.formatter.format(entry)
        return self.callback(entry, formatted)

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackTransport(callback={callback_name})"

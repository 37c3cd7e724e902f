"""
Transports module - Log output destinations

Provides the built-in transports and their factories.
"""

from typing import Any, Callable, Dict, Optional, TextIO

from minilog.core.log_entry import LogEntry
from minilog.formatters.base_formatter import BaseFormatter
from minilog.transports.base_transport import (
    BaseTransport,
    FormattingTransport,
    TransportError,
)
from minilog.transports.console_transport import ConsoleTransport
from minilog.transports.memory_transport import MemoryTransport
from minilog.transports.callback_transport import CallbackTransport


def create_console_transport(
    formatter: Optional[BaseFormatter] = None,
    colors: bool = False,
    streams: Optional[Dict[str, TextIO]] = None,
) -> ConsoleTransport:
    """Create a console transport."""
    return ConsoleTransport(formatter=formatter, colors=colors, streams=streams)


def create_memory_transport() -> MemoryTransport:
    """Create a memory transport."""
    return MemoryTransport()


def create_callback_transport(
    callback: Callable[[LogEntry, str], Any],
    formatter: Optional[BaseFormatter] = None,
) -> CallbackTransport:
    """Create a callback transport."""
    return CallbackTransport(callback, formatter=formatter)


__all__ = [
    "BaseTransport",
    "FormattingTransport",
    "TransportError",
    "ConsoleTransport",
    "MemoryTransport",
    "CallbackTransport",
    "create_console_transport",
    "create_memory_transport",
    "create_callback_transport",
]

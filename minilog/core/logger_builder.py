"""Logger builder pattern"""

import dataclasses
from typing import Any, Callable, List, Optional

from minilog.core.logger import Logger
from minilog.core.logger_config import LoggerConfig
from minilog.core.log_entry import LogEntry
from minilog.core.log_level import LogLevel, parse_level
from minilog.formatters.base_formatter import BaseFormatter
from minilog.transports.console_transport import ConsoleTransport
from minilog.transports.memory_transport import MemoryTransport
from minilog.transports.callback_transport import CallbackTransport


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        # Copied so the caller's config is never modified
        if config is not None:
            self._config = dataclasses.replace(config)
        else:
            self._config = LoggerConfig(console_output=False)
        self._transports: List[Any] = []

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set the level threshold."""
        self._config.level = LogLevel(level)
        return self

    def with_level_name(self, name: str) -> "LoggerBuilder":
        """
        Set the level threshold from its name.

        Raises:
            ValueError: If name is not a known level
        """
        level = parse_level(name)
        if level is None:
            raise ValueError(f"Invalid log level: {name!r}")
        self._config.level = level
        return self

    def with_context(self, context: str) -> "LoggerBuilder":
        """Set default context."""
        if not context:
            raise ValueError("context cannot be empty")
        self._config.context = context
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LoggerBuilder":
        """Set the default formatter for transports without their own."""
        self._config.formatter = formatter
        return self

    def with_console(
        self, formatter: Optional[BaseFormatter] = None, **options
    ) -> "LoggerBuilder":
        """
        Enable console output.

        Args:
            formatter: Console-specific formatter
            **options: Further ConsoleTransport arguments (colors, streams)
        """
        self._transports.append(ConsoleTransport(formatter=formatter, **options))
        return self

    def with_memory(self, transport: Optional[MemoryTransport] = None) -> "LoggerBuilder":
        """
        Add an in-memory transport.

        Example:
            memory = MemoryTransport()
            logger = LoggerBuilder().with_memory(memory).build()
            logger.info("hello")
            assert memory.entries[0].message == "hello"
        """
        self._transports.append(transport or MemoryTransport())
        return self

    def with_callback(
        self,
        callback: Callable[[LogEntry, str], Any],
        formatter: Optional[BaseFormatter] = None,
    ) -> "LoggerBuilder":
        """Add a callback transport."""
        self._transports.append(CallbackTransport(callback, formatter=formatter))
        return self

    def add_transport(self, transport: Any) -> "LoggerBuilder":
        """
        Add a custom transport.

        Args:
            transport: Object with ``name`` and ``write(entry)``

        Returns:
            Self for method chaining
        """
        self._transports.append(transport)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        transports = list(self._transports)
        if self._config.console_output and not any(
            isinstance(t, ConsoleTransport) for t in transports
        ):
            transports.insert(0, ConsoleTransport())
        return Logger.from_config(self._config, transports=transports)

"""
Main Logger class - level filtering and fan-out to transports
"""

from __future__ import annotations

import asyncio
import inspect
import sys
from functools import partial
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from minilog.core.async_writes import PendingWrite, PendingWrites
from minilog.core.log_level import LogLevel
from minilog.core.log_entry import LogEntry
from minilog.formatters.base_formatter import BaseFormatter
from minilog.formatters.simple_formatter import SimpleFormatter
from minilog.transports.base_transport import TransportError
from minilog.transports.console_transport import ConsoleTransport

if TYPE_CHECKING:
    from minilog.core.logger_config import LoggerConfig


class Logger:
    """
    Leveled logger that fans each accepted entry out to its transports.

    ``log`` never raises because of a transport: synchronous failures are
    reported and counted, asynchronous writes are scheduled and not awaited.
    Without a running event loop, asynchronous writes run on a background
    thread.
    ``flush`` and ``close`` are the only points that wait for transports.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        context: Optional[str] = None,
        transports: Optional[Iterable[Any]] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize logger.

        Args:
            level: Least severe level that is still forwarded
            context: Default context attached to every entry
            transports: Output transports (default: one ConsoleTransport).
                        Pass an empty list for a logger with no output.
            formatter: Default formatter handed to transports that were not
                       given their own (default: SimpleFormatter)
        """
        self._level = LogLevel(level)
        self._context = context
        self._formatter = formatter or SimpleFormatter()
        self._transports: List[Any] = []
        self._pending = PendingWrites()
        self._metrics = {"logged": 0, "write_errors": 0}

        if transports is None:
            transports = [ConsoleTransport()]
        for transport in transports:
            self.add_transport(transport)

    @classmethod
    def from_config(
        cls, config: "LoggerConfig", transports: Optional[Iterable[Any]] = None
    ) -> "Logger":
        """
        Create a logger from a LoggerConfig.

        Without explicit transports, a console transport is installed only
        when ``config.console_output`` is set.
        """
        if transports is None:
            transports = [ConsoleTransport()] if config.console_output else []
        return cls(
            level=config.level,
            context=config.context,
            transports=transports,
            formatter=config.formatter,
        )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        context: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        """
        Log a message.

        Args:
            level: Entry level
            message: Log message
            context: Context for this call only (default: logger context)
            data: Structured data attached to the entry
            error: Exception attached to the entry
        """
        if level > self._level:
            return

        entry = LogEntry(
            level=LogLevel(level),
            message=message,
            context=context if context is not None else self._context,
            data=data,
            error=error,
        )
        self._metrics["logged"] += 1

        for transport in tuple(self._transports):
            try:
                result = transport.write(entry)
            except Exception as e:
                self._report_error(transport, e)
                continue
            if inspect.isawaitable(result):
                self._schedule(transport, result)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, **kwargs)

    def error_with_exception(
        self,
        message: str,
        error: BaseException,
        *,
        context: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log error message with an attached exception."""
        self.log(LogLevel.ERROR, message, context=context, data=data, error=error)

    def warn(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, **kwargs)

    def trace(self, message: str, **kwargs) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, **kwargs)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def context(self) -> Optional[str]:
        return self._context

    @property
    def transports(self) -> Tuple[Any, ...]:
        """Snapshot of the current transports."""
        return tuple(self._transports)

    def set_level(self, level: LogLevel) -> None:
        """Set the level threshold; applies from the next call."""
        self._level = LogLevel(level)

    def get_level(self) -> LogLevel:
        return self._level

    def child(self, context: str) -> "Logger":
        """
        Create a child logger with a nested context.

        The child starts with this logger's level and formatter and shares
        its transport list: transports added to or removed from either one
        later are seen by both. In-flight asynchronous writes are shared as
        well, so flushing either one waits for writes issued through both.
        Level changes are independent.

        Args:
            context: Context segment, joined to the parent context with ":"

        Raises:
            ValueError: If context is empty
        """
        if not context:
            raise ValueError("child context segment must be non-empty")

        child = Logger(
            level=self._level,
            context=f"{self._context}:{context}" if self._context else context,
            transports=[],
            formatter=self._formatter,
        )
        child._transports = self._transports
        child._pending = self._pending
        return child

    def add_transport(self, transport: Any) -> None:
        """Append a transport; later log calls dispatch in insertion order."""
        use_default = getattr(transport, "use_default_formatter", None)
        if use_default is not None:
            use_default(self._formatter)
        self._transports.append(transport)

    def remove_transport(self, name: str) -> bool:
        """
        Remove the first transport with the given name.

        Returns:
            True if a transport was removed
        """
        for index, transport in enumerate(self._transports):
            if getattr(transport, "name", None) == name:
                del self._transports[index]
                return True
        return False

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        return self._metrics.copy()

    # ------------------------------------------------------------------
    # Synchronization
    # ------------------------------------------------------------------

    async def flush(self) -> None:
        """
        Flush all transports.

        Waits for asynchronous writes still in flight, then calls ``flush``
        on every transport that has one, concurrently.

        Raises:
            TransportError: If any transport flush failed
        """
        await self._drain()
        await self._run_all("flush")

    async def close(self) -> None:
        """
        Close all transports.

        Raises:
            TransportError: If any transport close failed
        """
        await self._drain()
        await self._run_all("close")

    async def _drain(self) -> None:
        # Failures were already reported by the done callback
        await self._pending.wait()

    async def _run_all(self, operation: str) -> None:
        transports = tuple(self._transports)
        results = await asyncio.gather(
            *(self._invoke(transport, operation) for transport in transports),
            return_exceptions=True,
        )
        failures = [
            (getattr(transport, "name", repr(transport)), result)
            for transport, result in zip(transports, results)
            if isinstance(result, BaseException)
        ]
        if failures:
            raise TransportError(operation, failures) from failures[0][1]

    @staticmethod
    async def _invoke(transport: Any, operation: str) -> None:
        method = getattr(transport, operation, None)
        if method is None:
            return
        result = method()
        if inspect.isawaitable(result):
            await result

    # ------------------------------------------------------------------
    # Asynchronous writes
    # ------------------------------------------------------------------

    def _schedule(self, transport: Any, pending: Any) -> None:
        self._pending.schedule(pending, partial(self._on_write_done, transport))

    def _on_write_done(self, transport: Any, future: PendingWrite) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            self._report_error(transport, error)

    def _report_error(self, transport: Any, error: BaseException) -> None:
        self._metrics["write_errors"] += 1
        name = getattr(transport, "name", repr(transport))
        print(f"Transport error ({name}): {error}", file=sys.stderr)

    def __repr__(self) -> str:
        return (
            f"Logger(level={self._level}, context={self._context!r}, "
            f"transports={[getattr(t, 'name', t) for t in self._transports]})"
        )


def create_logger(**options) -> Logger:
    """Create a logger. Accepts the Logger constructor arguments."""
    return Logger(**options)

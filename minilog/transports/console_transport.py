"""Console transport with per-level output channels"""

import sys
from typing import Dict, Optional, TextIO

from minilog.core.log_entry import LogEntry
from minilog.core.log_level import LogLevel
from minilog.formatters.base_formatter import BaseFormatter
from minilog.transports.base_transport import FormattingTransport

# Output channel for each level
LEVEL_CHANNELS: Dict[LogLevel, str] = {
    LogLevel.ERROR: "error",
    LogLevel.WARN: "warn",
    LogLevel.INFO: "info",
    LogLevel.DEBUG: "debug",
    LogLevel.TRACE: "debug",
}


class ConsoleTransport(FormattingTransport):
    """Write formatted logs to the console, one channel per level."""

    name = "console"

    def __init__(
        self,
        formatter: Optional[BaseFormatter] = None,
        colors: bool = False,
        streams: Optional[Dict[str, TextIO]] = None,
    ):
        """
        Initialize console transport.

        Args:
            formatter: Log formatter (default: logger default or SimpleFormatter)
            colors: Reserved, currently unused
            streams: Stream per channel ("error", "warn", "info", "debug").
                     Missing channels write to sys.stderr (error, warn) or
                     sys.stdout (info, debug), looked up at write time.
        """
        super().__init__(formatter)
        self.colors = colors
        self.streams = dict(streams or {})

    def _stream_for(self, channel: str) -> TextIO:
        stream = self.streams.get(channel)
        if stream is not None:
            return stream
        if channel in ("error", "warn"):
            return sys.stderr
        return sys.stdout

    def write(self, entry: LogEntry) -> None:
        """Write log entry to the channel matching its level."""
        msg = self.formatter.format(entry)
        stream = self._stream_for(LEVEL_CHANNELS[entry.level])
        stream.write(msg + "\n")
        stream.flush()

    def flush(self) -> None:
        """Flush every channel stream."""
        seen = set()
        for channel in ("error", "warn", "info", "debug"):
            stream = self._stream_for(channel)
            if id(stream) not in seen:
                seen.add(id(stream))
                stream.flush()

"""In-memory transport, mostly useful in tests"""

from typing import List, Optional

from minilog.core.log_entry import LogEntry
from minilog.core.log_level import LogLevel
from minilog.transports.base_transport import BaseTransport


class MemoryTransport(BaseTransport):
    """Store every received entry, unformatted and in arrival order."""

    name = "memory"

    def __init__(self):
        self.entries: List[LogEntry] = []

    def write(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    def get_entries(self, level: Optional[LogLevel] = None) -> List[LogEntry]:
        """
        Get stored entries.

        Args:
            level: Only return entries of exactly this level

        Returns:
            A new list; mutating it does not affect the transport
        """
        if level is None:
            return list(self.entries)
        return [e for e in self.entries if e.level == level]

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

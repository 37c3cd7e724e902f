"""
Log entry data structure

One immutable record is built per accepted log call.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from minilog.core.log_level import LogLevel, LEVEL_NAMES


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(timestamp: datetime) -> str:
    """
    Render a timestamp as ISO-8601 UTC with millisecond precision.

    Naive datetimes are treated as UTC.

    Example:
        >>> format_timestamp(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        '2024-01-15T10:30:00.000Z'
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    else:
        timestamp = timestamp.astimezone(timezone.utc)
    return (
        timestamp.strftime("%Y-%m-%dT%H:%M:%S")
        + f".{timestamp.microsecond // 1000:03d}Z"
    )


@dataclass(frozen=True)
class ErrorInfo:
    """Name, message and optional stack trace of a captured exception."""

    name: str
    message: str
    stack: Optional[str] = None

    @classmethod
    def from_exception(cls, error: BaseException) -> "ErrorInfo":
        stack = None
        if error.__traceback__ is not None:
            stack = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            ).rstrip("\n")
        return cls(name=type(error).__name__, message=str(error), stack=stack)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "message": self.message, "stack": self.stack}


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message. Entries are frozen;
    the data mapping is copied on construction so later changes to the
    caller's dict do not leak into an entry already handed to transports.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=_utc_now)
    context: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    error: Optional[BaseException] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        if self.data is not None:
            object.__setattr__(self, "data", dict(self.data))
        if self.error is not None and not isinstance(self.error, BaseException):
            raise TypeError("error must be an exception instance")

    @property
    def error_info(self) -> Optional[ErrorInfo]:
        """Captured error details, or None."""
        if self.error is None:
            return None
        return ErrorInfo.from_exception(self.error)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Optional fields are only present when set; ``context`` is omitted
        when empty while ``data`` is kept even when it is an empty mapping.

        Returns:
            Dictionary representation
        """
        result: Dict[str, Any] = {
            "level": LEVEL_NAMES[self.level],
            "message": self.message,
            "timestamp": format_timestamp(self.timestamp),
        }
        if self.context:
            result["context"] = self.context
        if self.data is not None:
            result["data"] = self.data
        if self.error is not None:
            result["error"] = ErrorInfo.from_exception(self.error).to_dict()
        return result

    def __str__(self) -> str:
        """String representation."""
        return f"[{LEVEL_NAMES[self.level]}] {self.message}"

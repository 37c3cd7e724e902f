"""
Base formatter interface
"""

import json
import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from minilog.core.log_entry import LogEntry
from minilog.core.log_level import LEVEL_NAMES


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into formatted strings. They hold no
    per-entry state and may be shared between transports.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)


def _jsonable(value: Any) -> Any:
    # NaN and infinities are not JSON; keys must be strings
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {
            key if isinstance(key, str) else str(key): _jsonable(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def dump_json(obj: Any, ensure_ascii: bool = False) -> str:
    """
    Serialize to single-line, strictly valid JSON.

    Non-finite floats become null, non-string keys are converted with str()
    and other unknown types fall back to str().
    """
    return json.dumps(
        _jsonable(obj),
        separators=(",", ":"),
        ensure_ascii=ensure_ascii,
        allow_nan=False,
        default=str,
    )


class LineFormatter(BaseFormatter):
    """
    Shared layout of the text formatters.

    Renders ``[LEVEL] [context] message`` followed by the data and error
    suffixes. Subclasses prepend their own fields via ``_prefix``.
    """

    def _prefix(self, entry: LogEntry) -> str:
        return ""

    def format(self, entry: LogEntry) -> str:
        parts = [self._prefix(entry), f"[{LEVEL_NAMES[entry.level]}] "]
        if entry.context:
            parts.append(f"[{entry.context}] ")
        parts.append(entry.message)

        if entry.data:
            parts.append(" " + dump_json(entry.data))

        if entry.error is not None:
            info = entry.error_info
            parts.append("\n" + (info.stack or info.message))

        return "".join(parts)

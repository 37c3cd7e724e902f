"""
Log formatters module

Provides the built-in formatter implementations and their factories.
"""

from minilog.formatters.base_formatter import BaseFormatter
from minilog.formatters.simple_formatter import SimpleFormatter
from minilog.formatters.timestamped_formatter import TimestampedFormatter
from minilog.formatters.json_formatter import JSONFormatter


def create_simple_formatter() -> SimpleFormatter:
    """Create a simple formatter."""
    return SimpleFormatter()


def create_timestamped_formatter() -> TimestampedFormatter:
    """Create a timestamped formatter."""
    return TimestampedFormatter()


def create_json_formatter(ensure_ascii: bool = False) -> JSONFormatter:
    """Create a JSON formatter."""
    return JSONFormatter(ensure_ascii=ensure_ascii)


__all__ = [
    "BaseFormatter",
    "SimpleFormatter",
    "TimestampedFormatter",
    "JSONFormatter",
    "create_simple_formatter",
    "create_timestamped_formatter",
    "create_json_formatter",
]

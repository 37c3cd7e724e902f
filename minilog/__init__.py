"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

minilog - Leveled, contextual logging with pluggable formatters and transports
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from minilog.core.log_level import LogLevel, LEVEL_NAMES, parse_level
from minilog.core.log_entry import LogEntry, ErrorInfo
from minilog.core.logger import Logger, create_logger
from minilog.core.logger_builder import LoggerBuilder
from minilog.core.logger_config import LoggerConfig
from minilog.core.default_logger import (
    get_default_logger,
    set_default_logger,
    reset_default_logger,
)
from minilog.formatters import (
    BaseFormatter,
    SimpleFormatter,
    TimestampedFormatter,
    JSONFormatter,
    create_simple_formatter,
    create_timestamped_formatter,
    create_json_formatter,
)
from minilog.transports import (
    BaseTransport,
    TransportError,
    ConsoleTransport,
    MemoryTransport,
    CallbackTransport,
    create_console_transport,
    create_memory_transport,
    create_callback_transport,
)

# Import submodules (not all classes by default)
from minilog import formatters
from minilog import transports

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "ErrorInfo",
    "LogLevel",
    "LEVEL_NAMES",
    "LoggerConfig",
    "parse_level",
    "create_logger",
    "get_default_logger",
    "set_default_logger",
    "reset_default_logger",
    "BaseFormatter",
    "SimpleFormatter",
    "TimestampedFormatter",
    "JSONFormatter",
    "create_simple_formatter",
    "create_timestamped_formatter",
    "create_json_formatter",
    "BaseTransport",
    "TransportError",
    "ConsoleTransport",
    "MemoryTransport",
    "CallbackTransport",
    "create_console_transport",
    "create_memory_transport",
    "create_callback_transport",
    "formatters",
    "transports",
]

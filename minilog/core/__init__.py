"""
Core module for the logging library

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

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
]

"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Optional

from minilog.core.log_level import LogLevel
from minilog.formatters.base_formatter import BaseFormatter
from minilog.formatters.json_formatter import JSONFormatter


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Transports are not part of the configuration; pass them to
    Logger.from_config() or add them through LoggerBuilder.
    """

    level: LogLevel = LogLevel.INFO
    context: Optional[str] = None
    formatter: Optional[BaseFormatter] = None  # None means SimpleFormatter
    console_output: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.level, LogLevel):
            raise ValueError("level must be a LogLevel")
        if self.context is not None and not self.context:
            raise ValueError("context cannot be empty")
        if self.formatter is not None and not isinstance(self.formatter, BaseFormatter):
            raise ValueError("formatter must be a BaseFormatter")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(level=LogLevel.DEBUG, console_output=True)

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production: warnings and errors as JSON."""
        return cls(
            level=LogLevel.WARN,
            formatter=JSONFormatter(),
            console_output=True,
        )

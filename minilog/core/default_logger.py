"""
Process-wide default logger

The instance is created on first access and can be replaced or reset, so
tests can start each case from an uninitialized state.
"""

import threading
from typing import Optional

from minilog.core.logger import Logger

_default_logger: Optional[Logger] = None
_lock = threading.Lock()


def get_default_logger() -> Logger:
    """
    Get the default logger.

    Creates one (INFO, console transport, SimpleFormatter) if none is set.
    """
    global _default_logger
    with _lock:
        if _default_logger is None:
            _default_logger = Logger()
        return _default_logger


def set_default_logger(logger: Logger) -> None:
    """Replace the default logger."""
    global _default_logger
    with _lock:
        _default_logger = logger


def reset_default_logger() -> None:
    """Clear the default logger; the next get creates a fresh one."""
    global _default_logger
    with _lock:
        _default_logger = None

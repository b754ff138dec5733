"""
Process-wide default logger slot

One explicit slot, set and reset by the application. Until a logger is
set, get_default_logger() returns a shared NullLogger.
"""

import threading
from typing import Optional

from fanout_logger.core.logger import Logger, NullLogger

_lock = threading.Lock()
_default: Optional[Logger] = None
_null = NullLogger()


def get_default_logger() -> Logger:
    """Return the default logger, or a NullLogger when none is set."""
    with _lock:
        return _default if _default is not None else _null


def set_default_logger(logger: Optional[Logger]) -> Optional[Logger]:
    """
    Install logger as the default.

    Args:
        logger: Logger to install (None clears the slot)

    Returns:
        The previously installed logger, not disposed
    """
    global _default
    with _lock:
        previous, _default = _default, logger
    return previous


def reset_default_logger(dispose: bool = True) -> None:
    """
    Clear the slot, disposing the installed logger by default.

    Intended for application teardown and test isolation.
    """
    previous = set_default_logger(None)
    if dispose and previous is not None:
        previous.dispose()

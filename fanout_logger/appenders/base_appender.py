"""
Base appender interface

An appender consumes one LogEntry and performs a side effect. The logger
that registered it owns its lifetime and is the sole caller of dispose().
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from fanout_logger.core.log_entry import LogEntry


class BaseAppender(ABC):
    """
    Abstract base class for appenders.

    Subclasses implement log() and, when they own a resource, _release().
    """

    def __init__(self, name: str):
        """
        Initialize appender.

        Args:
            name: Identity used by Logger.add_appender to reject duplicates
        """
        self._name = name
        self._disposed = False

    @property
    def name(self) -> str:
        """Identity of this appender."""
        return self._name

    @property
    def disposed(self) -> bool:
        """True once dispose() has run."""
        return self._disposed

    @abstractmethod
    def log(self, entry: LogEntry) -> None:
        """
        Consume one entry.

        Must not keep a reference to entry after returning.

        Args:
            entry: Entry to write

        Raises:
            Exception: Any write failure; the logger isolates it
        """
        pass

    def dispose(self) -> None:
        """Release owned resources. Calling it again is a no-op."""
        if self._disposed:
            return
        self._release()
        self._disposed = True

    def _release(self) -> None:
        """Release owned resources (default: none)."""

    def close(self) -> None:
        """Alias for dispose()."""
        self.dispose()

    def describe(self) -> Dict[str, Any]:
        """
        Descriptor for configuration snapshots.

        Returns:
            Dictionary with at least ``type`` and ``name``
        """
        return {"type": type(self).__name__, "name": self._name}

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.dispose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name='{self._name}')"

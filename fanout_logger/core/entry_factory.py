"""
Entry factories

A logger builds every entry through one factory instance, so callers can
swap in a factory producing an extended entry type.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Type
import uuid

from fanout_logger.core.severity import Severity
from fanout_logger.core.log_entry import LogEntry, CorrelatedLogEntry


class EntryFactory(ABC):
    """
    Abstract base class for entry factories.

    Implementations must return a LogEntry (or subclass) so appenders can
    read severity, message, error and timestamp.
    """

    entry_type: Type[LogEntry] = LogEntry

    @abstractmethod
    def create(
        self,
        severity: Severity,
        message: str,
        error: Optional[Any] = None
    ) -> LogEntry:
        """
        Create a log entry stamped with the current UTC time.

        Args:
            severity: Entry severity
            message: Non-empty message text
            error: Optional associated error

        Returns:
            New immutable entry

        Raises:
            InvalidArgumentError: If message is empty
        """
        pass

    def __call__(self, severity: Severity, message: str, error: Optional[Any] = None) -> LogEntry:
        """Allow factories to be callable."""
        return self.create(severity, message, error)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entry_type={self.entry_type.__name__})"


class DefaultEntryFactory(EntryFactory):
    """Produces plain LogEntry values."""

    def create(self, severity, message, error=None) -> LogEntry:
        return LogEntry(severity=severity, message=message, error=error)


class CorrelatedEntryFactory(EntryFactory):
    """Produces CorrelatedLogEntry values sharing one correlation id."""

    entry_type = CorrelatedLogEntry

    def __init__(self, correlation_id: Optional[str] = None):
        """
        Initialize correlated factory.

        Args:
            correlation_id: Identifier stamped on every entry
                            (default: random uuid4 hex)
        """
        self.correlation_id = correlation_id or uuid.uuid4().hex

    def create(self, severity, message, error=None) -> CorrelatedLogEntry:
        return CorrelatedLogEntry(
            severity=severity,
            message=message,
            error=error,
            correlation_id=self.correlation_id,
        )

    def __repr__(self) -> str:
        return f"CorrelatedEntryFactory(correlation_id='{self.correlation_id}')"

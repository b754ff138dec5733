"""
Log entry data structure

Immutable values created once per log call and passed to every appender.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any
import traceback

from fanout_logger.core.severity import Severity
from fanout_logger.core.exceptions import InvalidArgumentError


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def describe_error(error: Any) -> str:
    """
    Full string form of an error value.

    Exceptions render as their formatted traceback (just ``Type: message``
    when they were never raised); anything else via ``str()``.
    """
    if isinstance(error, BaseException):
        lines = traceback.format_exception(type(error), error, error.__traceback__)
        return "".join(lines).rstrip("\n")
    return str(error)


def summarize_error(error: Any) -> str:
    """One-line ``Type: message`` summary of an error value."""
    if isinstance(error, BaseException):
        return f"{type(error).__name__}: {error}"
    return str(error)


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single logged event. The timestamp
    is captured when the entry is created, not when it is written.
    """

    severity: Severity
    message: str
    error: Optional[Any] = None
    timestamp: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.severity, Severity):
            raise TypeError("severity must be Severity enum")
        if not isinstance(self.message, str) or not self.message:
            raise InvalidArgumentError("message must be a non-empty string")

    @property
    def error_text(self) -> Optional[str]:
        """Full string form of the error, or None."""
        if self.error is None:
            return None
        return describe_error(self.error)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "severity": self.severity.name,
            "message": self.message,
            "error": self.error_text,
        }

    def __str__(self) -> str:
        """String representation."""
        return f"[{self.severity.name}] {self.message}"


@dataclass(frozen=True)
class CorrelatedLogEntry(LogEntry):
    """Log entry carrying a correlation identifier."""

    correlation_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["correlation_id"] = self.correlation_id
        return data

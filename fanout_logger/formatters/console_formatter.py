"""Console formatter: ``[SEVERITY] message``"""

from fanout_logger.core.log_entry import LogEntry
from fanout_logger.formatters.base_formatter import BaseFormatter


class ConsoleFormatter(BaseFormatter):
    """Short format for interactive output."""

    def format(self, entry: LogEntry) -> str:
        # Entries from custom factories may carry a plain int severity
        severity = getattr(entry.severity, "name", str(entry.severity))
        return f"[{severity}] {entry.message}"

    def __repr__(self) -> str:
        return "ConsoleFormatter()"

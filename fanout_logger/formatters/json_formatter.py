"""
JSON formatter for structured logging

Formats log entries as compact single-line JSON objects
"""

import json
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Keys: ``timestamp`` (ISO-8601 UTC), ``severity``, ``message`` and
    ``error`` (null when absent), plus any fields an extended entry adds.
    """

    def __init__(self, ensure_ascii: bool = False):
        """
        Initialize JSON formatter.

        Args:
            ensure_ascii: Escape non-ASCII characters
        """
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string without newlines
        """
        return json.dumps(
            entry.to_dict(),
            ensure_ascii=self.ensure_ascii,
            separators=(",", ":"),
            default=str,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(ensure_ascii={self.ensure_ascii})"

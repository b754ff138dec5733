"""
Text formatter for flat log files

Produces one line per entry, with an error's string form appended as
indented continuation lines.
"""

from fanout_logger.core.log_entry import LogEntry
from fanout_logger.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries as ``[timestamp] [SEVERITY] message``.
    """

    DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
    INDENT = "    "

    def __init__(self, timestamp_format: str = None):
        """
        Initialize text formatter.

        Args:
            timestamp_format: strftime format for timestamps. The default
                              format is trimmed to milliseconds.

        Example:
            formatter = TextFormatter()
            # [2024-05-01 09:30:00.123] [ERROR  ] disk full
            #     OSError: [Errno 28] No space left on device
        """
        self.timestamp_format = timestamp_format or self.DEFAULT_TIMESTAMP_FORMAT

    def _format_timestamp(self, entry: LogEntry) -> str:
        text = entry.timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            text = text[:-3]  # Microseconds -> milliseconds
        return text

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as text.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string, possibly spanning several lines
        """
        line = f"[{self._format_timestamp(entry)}] [{entry.severity.label}] {entry.message}"

        error_text = entry.error_text
        if error_text:
            continuation = "\n".join(
                f"{self.INDENT}{part}" for part in error_text.splitlines()
            )
            line = f"{line}\n{continuation}"

        return line

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(timestamp_format='{self.timestamp_format}')"

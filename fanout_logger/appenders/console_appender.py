"""Console appender with ANSI colors"""

import sys
from typing import Any, Dict, Optional, TextIO

from fanout_logger.core.log_entry import LogEntry, summarize_error
from fanout_logger.core.severity import SEVERITY_COLORS, RESET_CODE
from fanout_logger.appenders.base_appender import BaseAppender
from fanout_logger.formatters.console_formatter import ConsoleFormatter


class ConsoleAppender(BaseAppender):
    """Write entries to stdout, error summaries to stderr."""

    def __init__(
        self,
        name: str = "console",
        colored: bool = True,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
        formatter=None
    ):
        """
        Initialize console appender.

        Args:
            name: Appender identity (default: 'console')
            colored: Use ANSI color codes
            stream: Output stream (default: sys.stdout at write time)
            error_stream: Stream for error summaries (default: sys.stderr)
            formatter: Log formatter (default: ConsoleFormatter)
        """
        super().__init__(name)
        self.colored = colored
        self._stream = stream
        self._error_stream = error_stream
        self.formatter = formatter or ConsoleFormatter()

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    @property
    def error_stream(self) -> TextIO:
        return self._error_stream or sys.stderr

    def log(self, entry: LogEntry) -> None:
        """Write log entry to console."""
        msg = self.formatter.format(entry)

        if self.colored:
            color = SEVERITY_COLORS.get(entry.severity, RESET_CODE)
            msg = f"{color}{msg}{RESET_CODE}"

        self.stream.write(msg + "\n")
        self.stream.flush()

        if entry.error is not None:
            self.error_stream.write(summarize_error(entry.error) + "\n")
            self.error_stream.flush()

    def describe(self) -> Dict[str, Any]:
        data = super().describe()
        data["colored"] = self.colored
        return data

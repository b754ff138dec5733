"""
Formatter contract

Appenders call a formatter once per entry; the returned text is written
as-is, followed by a newline.
"""

from abc import ABC, abstractmethod
from fanout_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Renders a LogEntry for one appender.

    Implementations must not keep the entry and should not raise for
    entries produced by a custom EntryFactory.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Render an entry.

        Args:
            entry: Entry being dispatched

        Returns:
            Text for the appender; may span several lines
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)

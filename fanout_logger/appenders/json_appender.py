"""JSON-lines file appender"""

from fanout_logger.appenders.file_appender import FileAppender
from fanout_logger.formatters.json_formatter import JSONFormatter


class JsonAppender(FileAppender):
    """
    Append one JSON object per line.

    Construction, locking and disposal are those of FileAppender.
    """

    identity_prefix = "json"

    def _default_formatter(self):
        return JSONFormatter()

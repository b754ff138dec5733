"""File appender"""

import threading
from pathlib import Path
from typing import Any, Dict, Optional

from fanout_logger.core.exceptions import ObjectDisposedError
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.core.paths import PathLike, resolve_path, ensure_directory
from fanout_logger.appenders.base_appender import BaseAppender
from fanout_logger.formatters.text_formatter import TextFormatter


class FileAppender(BaseAppender):
    """
    Append formatted entries to a file.

    Owns one append-mode handle and one private lock. Every write is
    flushed before log() returns.

    Thread Safety:
        log() and dispose() serialize on the same lock, so a dispose
        racing a write never closes the handle mid-write.
    """

    identity_prefix = "file"

    def __init__(
        self,
        path: PathLike,
        name: Optional[str] = None,
        encoding: str = "utf-8",
        formatter=None
    ):
        """
        Initialize file appender.

        Args:
            path: Path to log file (parent directories are created)
            name: Appender identity (default: '<prefix>:<absolute path>')
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: TextFormatter)

        Raises:
            InvalidArgumentError: If path is empty or its parent is a file
            OSError: If the file cannot be opened
        """
        self._path = resolve_path(path)
        super().__init__(name or f"{self.identity_prefix}:{self._path}")
        self.encoding = encoding
        self.formatter = formatter or self._default_formatter()
        self._lock = threading.Lock()
        self._file = None
        self._open()

    def _default_formatter(self):
        return TextFormatter()

    def _open(self):
        """Open log file."""
        ensure_directory(self._path.parent)
        self._file = open(self._path, "a", encoding=self.encoding)

    @property
    def path(self) -> Path:
        """Absolute path of the log file."""
        return self._path

    def log(self, entry: LogEntry) -> None:
        """
        Write log entry to file.

        Raises:
            ObjectDisposedError: If the appender was disposed
        """
        if self._disposed:
            raise ObjectDisposedError(self.name)

        msg = self.formatter.format(entry)

        with self._lock:
            # dispose() may have won the lock while we were waiting
            if self._disposed or self._file is None:
                raise ObjectDisposedError(self.name)
            self._file.write(msg + "\n")
            self._file.flush()

    def flush(self) -> None:
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def dispose(self) -> None:
        """Flush and close the file. Calling it again is a no-op."""
        with self._lock:
            if self._disposed:
                return
            try:
                if self._file:
                    try:
                        self._file.flush()
                    finally:
                        self._file.close()
            finally:
                self._file = None
                self._disposed = True

    def describe(self) -> Dict[str, Any]:
        data = super().describe()
        data["path"] = str(self._path)
        data["encoding"] = self.encoding
        return data

"""
Main Logger class - synchronous fan-out to appenders
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union
import sys
import threading
import warnings

from fanout_logger.core.severity import Severity, DISABLED_THRESHOLD, is_enabled
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.core.logger_config import LoggerConfig
from fanout_logger.core.entry_factory import EntryFactory, DefaultEntryFactory
from fanout_logger.core.exceptions import (
    ObjectDisposedError,
    DuplicateAppenderError,
    DuplicateAppenderWarning,
)
from fanout_logger.core.paths import ensure_directory
from fanout_logger.appenders.base_appender import BaseAppender
from fanout_logger.appenders.console_appender import ConsoleAppender

ErrorHandler = Callable[[BaseAppender, BaseException], None]


def report_appender_error(appender: BaseAppender, error: BaseException) -> None:
    """Default error channel: one line on stderr."""
    print(
        f"Appender error [{appender.name}]: {type(error).__name__}: {error}",
        file=sys.stderr,
    )


class Logger:
    """
    Main logger class.

    Every call runs on the caller's thread: threshold check, entry
    creation, then delivery to each appender in insertion order. One
    failing appender never keeps the entry from the others.

    Thread Safety:
        The appender list is guarded by one lock shared by registration,
        dispatch and disposal. Dispatch iterates an immutable snapshot.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        entry_factory: Optional[EntryFactory] = None,
        appenders: Optional[Iterable[BaseAppender]] = None,
        on_error: Optional[ErrorHandler] = None
    ):
        """
        Initialize logger.

        Args:
            config: Logger configuration (default: LoggerConfig.default())
            entry_factory: Entry construction strategy
                           (default: DefaultEntryFactory)
            appenders: Appenders to register, in order
            on_error: Called with (appender, exception) for every isolated
                      appender failure (default: print to stderr)
        """
        self._config = config or LoggerConfig.default()
        self._entry_factory = entry_factory or DefaultEntryFactory()
        self._on_error = on_error or report_appender_error
        self._lock = threading.RLock()
        self._appenders: Tuple[BaseAppender, ...] = ()
        self._disposed = False

        self._directory = None
        if self._config.log_directory is not None:
            self._directory = ensure_directory(self._config.log_directory)

        for appender in appenders or ():
            self.add_appender(appender)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def min_severity(self) -> Union[Severity, int]:
        return self._config.min_severity

    @property
    def directory(self):
        """Session directory, or None."""
        return self._directory

    @property
    def entry_factory(self) -> EntryFactory:
        return self._entry_factory

    @property
    def appenders(self) -> Tuple[BaseAppender, ...]:
        """Registered appenders in insertion order."""
        return self._appenders

    @property
    def disposed(self) -> bool:
        return self._disposed

    def is_enabled(self, severity: Severity) -> bool:
        """Check whether severity passes this logger's threshold."""
        return is_enabled(severity, self.min_severity)

    def get_appender(self, name: str) -> Optional[BaseAppender]:
        """Find a registered appender by identity."""
        for appender in self._appenders:
            if appender.name == name:
                return appender
        return None

    def _check_disposed(self) -> None:
        if self._disposed:
            raise ObjectDisposedError(f"Logger '{self.name}'")

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_appender(self, appender: BaseAppender) -> bool:
        """
        Register an appender; the logger takes ownership of it.

        Args:
            appender: Appender to add

        Returns:
            True if added, False if an appender with the same name exists
            (warn policy)

        Raises:
            ObjectDisposedError: If the logger was disposed
            DuplicateAppenderError: On duplicates under the raise policy
        """
        with self._lock:
            self._check_disposed()
            if self.get_appender(appender.name) is not None:
                if self._config.duplicate_policy == "raise":
                    raise DuplicateAppenderError(appender.name)
                warnings.warn(
                    f"Appender '{appender.name}' is already registered; ignoring",
                    DuplicateAppenderWarning,
                    stacklevel=2,
                )
                return False
            # Replace rather than mutate so in-flight dispatches keep
            # iterating a complete tuple
            self._appenders = self._appenders + (appender,)
            return True

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(
        self,
        severity: Severity,
        message: str,
        error: Optional[Any] = None
    ) -> Optional[LogEntry]:
        """
        Log a message.

        Args:
            severity: Entry severity
            message: Non-empty message text
            error: Optional associated error (usually an exception)

        Returns:
            The dispatched entry, or None if filtered out

        Raises:
            ObjectDisposedError: If the logger was disposed
            InvalidArgumentError: If message is empty
        """
        self._check_disposed()
        if not self.is_enabled(severity):
            return None

        entry = self._entry_factory.create(severity, message, error)
        self._dispatch(entry)
        return entry

    def _dispatch(self, entry: LogEntry) -> None:
        """Deliver entry to every appender, isolating failures."""
        with self._lock:
            if not self._appenders and self._config.default_console and not self._disposed:
                self._appenders = (
                    ConsoleAppender(colored=self._config.colored_output),
                )
            appenders = self._appenders

        for appender in appenders:
            try:
                appender.log(entry)
            except Exception as e:
                self._report(appender, e)

    def _report(self, appender: BaseAppender, error: BaseException) -> None:
        try:
            self._on_error(appender, error)
        except Exception as e:
            report_appender_error(appender, e)

    def debug(self, message: str, error: Optional[Any] = None) -> Optional[LogEntry]:
        """Log debug message."""
        return self.log(Severity.DEBUG, message, error)

    def info(self, message: str, error: Optional[Any] = None) -> Optional[LogEntry]:
        """Log info message."""
        return self.log(Severity.INFO, message, error)

    def warning(self, message: str, error: Optional[Any] = None) -> Optional[LogEntry]:
        """Log warning message."""
        return self.log(Severity.WARNING, message, error)

    def error(self, message: str, error: Optional[Any] = None) -> Optional[LogEntry]:
        """Log error message."""
        return self.log(Severity.ERROR, message, error)

    def fatal(self, message: str, error: Optional[Any] = None) -> Optional[LogEntry]:
        """Log fatal message."""
        return self.log(Severity.FATAL, message, error)

    def exception(self, message: str) -> Optional[LogEntry]:
        """Log an error message with the exception currently being handled."""
        return self.log(Severity.ERROR, message, sys.exc_info()[1])

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def dispose(self) -> None:
        """
        Dispose every owned appender and reject further use.

        Appender disposal failures are reported and do not stop the
        remaining appenders from being disposed. Calling it again is a
        no-op.
        """
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            appenders = self._appenders
            self._appenders = ()

        for appender in appenders:
            try:
                appender.dispose()
            except Exception as e:
                self._report(appender, e)

    def close(self) -> None:
        """Alias for dispose()."""
        self.dispose()

    def __enter__(self) -> "Logger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.dispose()

    def snapshot(self) -> Dict[str, Any]:
        """
        Describe this logger for an external persistence layer.

        Returns:
            Dictionary with name, directory, min_severity, entry_type
            and appender descriptors
        """
        min_severity = self.min_severity
        return {
            "name": self.name,
            "directory": str(self._directory) if self._directory else None,
            "min_severity": getattr(min_severity, "name", min_severity),
            "entry_type": self._entry_factory.entry_type.__name__,
            "appenders": [a.describe() for a in self._appenders],
        }

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else "active"
        return (
            f"{type(self).__name__}(name='{self.name}', "
            f"min_severity={self.min_severity}, "
            f"appenders={len(self._appenders)}, {state})"
        )


class NullLogger(Logger):
    """
    Logger that accepts every call and does nothing.

    Filters every severity, performs no I/O and stays silent after
    dispose(). Use it where logging is disabled instead of None.
    """

    def __init__(self, name: str = "null"):
        super().__init__(LoggerConfig(name=name, default_console=False))

    @property
    def min_severity(self) -> int:
        return DISABLED_THRESHOLD

    def add_appender(self, appender: BaseAppender) -> bool:
        """Ignore the appender; ownership stays with the caller."""
        return False

    def log(self, severity, message, error=None) -> None:
        return None

    def exception(self, message: str) -> None:
        return None

    def dispose(self) -> None:
        self._disposed = True

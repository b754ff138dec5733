"""Logger builder pattern"""

from typing import Optional, Union
from pathlib import Path

from fanout_logger.core.logger import Logger, ErrorHandler
from fanout_logger.core.logger_config import LoggerConfig
from fanout_logger.core.severity import Severity
from fanout_logger.core.entry_factory import EntryFactory, CorrelatedEntryFactory
from fanout_logger.core.paths import resolve_path
from fanout_logger.appenders.console_appender import ConsoleAppender
from fanout_logger.appenders.file_appender import FileAppender
from fanout_logger.appenders.json_appender import JsonAppender


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._console_enabled = False
        self._file_paths = []
        self._json_paths = []
        self._custom_appenders = []
        self._entry_factory: Optional[EntryFactory] = None
        self._on_error: Optional[ErrorHandler] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: Union[Severity, str]) -> "LoggerBuilder":
        """Set minimum severity."""
        if isinstance(level, str):
            level = Severity.from_string(level)
        self._config.min_severity = level
        return self

    def with_directory(self, directory: Union[str, Path]) -> "LoggerBuilder":
        """
        Set the session directory.

        The directory is created when the logger is built, and relative
        file paths given to with_file/with_json_file resolve against it.
        """
        self._config.log_directory = Path(directory)
        return self

    def with_console(self, colored: bool = True) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._config.colored_output = colored
        return self

    def with_file(self, filepath: Union[str, Path]) -> "LoggerBuilder":
        """Enable text file output."""
        self._file_paths.append(filepath)
        return self

    def with_json_file(self, filepath: Union[str, Path]) -> "LoggerBuilder":
        """Enable JSON-lines file output."""
        self._json_paths.append(filepath)
        return self

    def with_entry_factory(self, factory: EntryFactory) -> "LoggerBuilder":
        """Use a custom entry factory."""
        self._entry_factory = factory
        return self

    def with_correlation(self, correlation_id: Optional[str] = None) -> "LoggerBuilder":
        """
        Stamp every entry with a correlation id.

        Example:
            logger = (LoggerBuilder()
                .with_correlation("req-42")
                .with_json_file("logs/app.jsonl")
                .build())
        """
        self._entry_factory = CorrelatedEntryFactory(correlation_id)
        return self

    def with_duplicate_policy(self, policy: str) -> "LoggerBuilder":
        """Set duplicate registration policy ('warn' or 'raise')."""
        self._config.duplicate_policy = policy
        return self

    def with_default_console(self, enabled: bool = True) -> "LoggerBuilder":
        """Attach a console appender lazily when no appender is configured."""
        self._config.default_console = enabled
        return self

    def with_error_handler(self, handler: ErrorHandler) -> "LoggerBuilder":
        """Receive (appender, exception) for isolated appender failures."""
        self._on_error = handler
        return self

    def add_appender(self, appender) -> "LoggerBuilder":
        """
        Add a custom appender.

        Args:
            appender: Appender instance

        Returns:
            Self for method chaining
        """
        self._custom_appenders.append(appender)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        # Re-run validation on fields set after construction
        config = LoggerConfig(**vars(self._config))
        logger = Logger(
            config,
            entry_factory=self._entry_factory,
            on_error=self._on_error,
        )
        base = logger.directory

        try:
            # Add console appender
            if self._console_enabled:
                self._attach(logger, ConsoleAppender(colored=config.colored_output))

            # Add file appenders
            for path in self._file_paths:
                self._attach(logger, FileAppender(resolve_path(path, base)))
            for path in self._json_paths:
                self._attach(logger, JsonAppender(resolve_path(path, base)))

            # Add custom appenders; the caller keeps any that are rejected
            for appender in self._custom_appenders:
                logger.add_appender(appender)
        except Exception:
            logger.dispose()
            raise

        return logger

    @staticmethod
    def _attach(logger: Logger, appender) -> None:
        """Register a builder-created appender, disposing it if rejected."""
        try:
            added = logger.add_appender(appender)
        except Exception:
            appender.dispose()
            raise
        if not added:
            appender.dispose()

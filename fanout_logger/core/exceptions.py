"""Exceptions and warnings raised by the logger"""


class LoggerError(Exception):
    """Base class for logger errors."""


class InvalidArgumentError(LoggerError, ValueError):
    """Bad input rejected at the call that introduced it."""


class ObjectDisposedError(LoggerError, RuntimeError):
    """A logger or appender was used after dispose()."""

    def __init__(self, object_name: str):
        super().__init__(f"Cannot access a disposed object: {object_name}")
        self.object_name = object_name


class DuplicateAppenderError(LoggerError):
    """An appender with the same identity is already registered."""

    def __init__(self, appender_name: str):
        super().__init__(f"Appender already registered: {appender_name}")
        self.appender_name = appender_name


class DuplicateAppenderWarning(UserWarning):
    """Issued instead of DuplicateAppenderError under the 'warn' policy."""

"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Fanout Logger - A synchronous logging facade with pluggable appenders
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from fanout_logger.core.logger import Logger, NullLogger
from fanout_logger.core.logger_builder import LoggerBuilder
from fanout_logger.core.log_entry import LogEntry, CorrelatedLogEntry
from fanout_logger.core.severity import Severity
from fanout_logger.core.logger_config import LoggerConfig
from fanout_logger.core.entry_factory import (
    EntryFactory,
    DefaultEntryFactory,
    CorrelatedEntryFactory,
)
from fanout_logger.core.default_logger import (
    get_default_logger,
    set_default_logger,
    reset_default_logger,
)
from fanout_logger.core.exceptions import (
    LoggerError,
    InvalidArgumentError,
    ObjectDisposedError,
    DuplicateAppenderError,
    DuplicateAppenderWarning,
)

# Import submodules (not all classes by default)
from fanout_logger import appenders
from fanout_logger import formatters

__all__ = [
    "Logger",
    "NullLogger",
    "LoggerBuilder",
    "LogEntry",
    "CorrelatedLogEntry",
    "Severity",
    "LoggerConfig",
    "EntryFactory",
    "DefaultEntryFactory",
    "CorrelatedEntryFactory",
    "get_default_logger",
    "set_default_logger",
    "reset_default_logger",
    "LoggerError",
    "InvalidArgumentError",
    "ObjectDisposedError",
    "DuplicateAppenderError",
    "DuplicateAppenderWarning",
    "appenders",
    "formatters",
]

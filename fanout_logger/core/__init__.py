"""
Core module for the fanout logger

This module contains the fundamental classes:
- Logger / NullLogger: Orchestrators fanning entries out to appenders
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Immutable log entry value
- EntryFactory: Pluggable entry construction strategy
- Severity: Severity enumeration
- LoggerConfig: Configuration management
"""

from fanout_logger.core.logger import Logger, NullLogger
from fanout_logger.core.logger_builder import LoggerBuilder
from fanout_logger.core.log_entry import LogEntry, CorrelatedLogEntry
from fanout_logger.core.entry_factory import (
    EntryFactory,
    DefaultEntryFactory,
    CorrelatedEntryFactory,
)
from fanout_logger.core.severity import Severity
from fanout_logger.core.logger_config import LoggerConfig

__all__ = [
    "Logger",
    "NullLogger",
    "LoggerBuilder",
    "LogEntry",
    "CorrelatedLogEntry",
    "EntryFactory",
    "DefaultEntryFactory",
    "CorrelatedEntryFactory",
    "Severity",
    "LoggerConfig",
]

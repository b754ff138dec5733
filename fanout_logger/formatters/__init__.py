"""
Log formatters module

Provides the format functions appenders call to render an entry.
"""

from fanout_logger.formatters.base_formatter import BaseFormatter
from fanout_logger.formatters.text_formatter import TextFormatter
from fanout_logger.formatters.json_formatter import JSONFormatter
from fanout_logger.formatters.console_formatter import ConsoleFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
    "ConsoleFormatter",
]

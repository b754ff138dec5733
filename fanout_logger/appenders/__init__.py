"""Appenders module - Log output sinks"""

from fanout_logger.appenders.base_appender import BaseAppender
from fanout_logger.appenders.console_appender import ConsoleAppender
from fanout_logger.appenders.file_appender import FileAppender
from fanout_logger.appenders.json_appender import JsonAppender

__all__ = ["BaseAppender", "ConsoleAppender", "FileAppender", "JsonAppender"]

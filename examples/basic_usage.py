#!/usr/bin/env python3
"""Basic usage example"""

from fanout_logger import LoggerBuilder, Severity

def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(Severity.DEBUG)
        .with_directory("logs")
        .with_console(colored=True)
        .with_file("example.log")
        .with_json_file("example.jsonl")
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started")
    logger.warning("This is warning")
    try:
        1 / 0
    except ZeroDivisionError as e:
        logger.error("Division failed", e)
    logger.fatal("This is fatal")

    # Flush and close every appender
    logger.dispose()

if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Basic usage example"""

from minilog import ConsoleHandler, Logger, LoggerBuilder

def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level("TRACE")
        .with_console(colored=True, message_format="{datetime} {levelName} {pid} {loggerName} {msg}")
        .build())

    # Log messages
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("Application started", {"port": 8080})
    logger.warn({"payload": "data", "other": 123})
    logger.error("This is error")

    # Or wire handlers directly
    plain = Logger("plain", "INFO", handlers=ConsoleHandler("INFO", formatter="{levelName} {msg}", use_colors=False))
    plain.debug("suppressed")
    plain.info("Hello, world!")

    try:
        raise ValueError("Uh-oh!")
    except ValueError as e:
        plain.error(e)

if __name__ == "__main__":
    main()

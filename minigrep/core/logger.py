"""
Centralized logging setup for minigrep.

Provides console and rotating file output with configuration from
config.json. Console output goes to stderr so stdout only ever carries
matching lines. Uses a guard to prevent multiple initialization.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO

LOG_FILENAME = "minigrep.log"

_logger_initialized = False


def setup_logging(
    log_level: str = "WARNING",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    logs_directory: Path = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    stream: Optional[TextIO] = None
) -> None:
    """
    Initialize the root logger with a console handler and an optional
    rotating file handler.

    Args:
        log_level: Logging level name; unknown names fall back to WARNING.
        log_format: Format string for log messages.
        logs_directory: Directory for LOG_FILENAME. If None, no file log.
        max_file_size_mb: Size at which the log file rotates.
        backup_count: Number of rotated files to keep.
        stream: Console stream, sys.stderr when None. Never sys.stdout,
                which carries search results.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if logs_directory:
        logs_directory = Path(logs_directory)
        logs_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_directory / LOG_FILENAME,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logger_initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Automatically initializes logging from config on first call.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Configured Logger instance.
    """
    if not _logger_initialized:
        try:
            from .config_loader import get_config
            config = get_config()
            setup_logging(
                log_level=config.logging.level,
                log_format=config.logging.format,
                logs_directory=config.logging.logs_directory,
                max_file_size_mb=config.logging.max_file_size_mb,
                backup_count=config.logging.backup_count
            )
        except Exception:
            setup_logging()

    return logging.getLogger(name)


if __name__ == "__main__":
    setup_logging(log_level="DEBUG")

    logger = get_logger("minigrep.demo")
    logger.debug("Scanning poem.txt for 'body'")
    logger.warning("poem.txt is empty")

    # stdout stays reserved for matching lines
    print("I'm nobody! Who are you?")

"""Structured logging configuration for webcalc."""

import logging
import sys
from datetime import datetime
from typing import Optional

ROOT_LOGGER = "webcalc"


class StructuredFormatter(logging.Formatter):
    """Formatter producing `timestamp [LEVEL] name: message` lines."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        return f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the application.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to also write logs to

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the `webcalc.<name>` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")

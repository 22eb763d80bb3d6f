# path: activitybot/infra/logger.py
"""
Logger - Logging configuration and utilities.
"""

import logging
import sys
from typing import Optional, Dict, Any
from pathlib import Path
from datetime import datetime


_initialized = False
_log_level = logging.INFO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

QUIET_LOGGERS = ("httpx", "httpcore", "telegram")


class ColorFormatter(logging.Formatter):
    """
    Formatter that colours the level name on a terminal.
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m"
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        # Copy so file handlers sharing the record keep a plain level name.
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{reset}"

        return super().format(record)


def setup_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    force: bool = False
) -> None:
    """
    Setup the application logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for file logging
        format_string: Optional custom format string
        force: Reconfigure even if logging was already set up
    """
    global _initialized, _log_level

    if _initialized and not force:
        return

    _log_level = getattr(logging, level.upper(), logging.INFO)

    if format_string is None:
        format_string = DEFAULT_FORMAT

    root_logger = logging.getLogger()
    root_logger.setLevel(_log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(_log_level)

    if sys.stdout.isatty():
        console_formatter = ColorFormatter(format_string)
    else:
        console_formatter = logging.Formatter(format_string)

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(_log_level)
        file_handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _initialized = True

    root_logger.info(f"Logger initialized with level: {level}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    if not _initialized:
        setup_logger()

    return logging.getLogger(name)


class AsyncLogContext:
    """
    Async context manager that logs the duration of an operation.
    """

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        **context: Any
    ):
        self.logger = logger
        self.operation = operation
        self.context: Dict[str, Any] = context
        self.start_time: Optional[datetime] = None
        self.duration: float = 0.0

    async def __aenter__(self):
        self.start_time = datetime.now()
        self.logger.debug(f"Starting {self.operation}: {self.context}")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type:
            self.logger.error(
                f"Failed {self.operation} after {self.duration:.2f}s: "
                f"{exc_type.__name__}: {exc_val}"
            )
        else:
            self.logger.debug(f"Completed {self.operation} in {self.duration:.2f}s")

        return False

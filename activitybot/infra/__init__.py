# path: activitybot/infra/__init__.py
"""
Infra module - Logging and exceptions.
"""

from activitybot.infra.logger import setup_logger, get_logger, AsyncLogContext
from activitybot.infra.exceptions import (
    ActivityBotError,
    ConfigurationError,
    StartupError,
    AdapterError
)

__all__ = [
    "setup_logger",
    "get_logger",
    "AsyncLogContext",
    "ActivityBotError",
    "ConfigurationError",
    "StartupError",
    "AdapterError"
]

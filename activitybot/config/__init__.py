# path: activitybot/config/__init__.py
"""
Config module - Application configuration and settings.
"""

from activitybot.config.settings import Settings, get_settings, reload_settings
from activitybot.config.env import load_environment, validate_environment

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    "load_environment",
    "validate_environment"
]

# path: activitybot/bot/handlers/__init__.py
"""
Bot handlers module - Sample activity handlers and the error handler.
"""

from activitybot.bot.handlers.sample import SampleHandlers, register_sample_handlers
from activitybot.bot.handlers.error import error_handler

__all__ = ["SampleHandlers", "register_sample_handlers", "error_handler"]

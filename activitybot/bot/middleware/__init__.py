# path: activitybot/bot/middleware/__init__.py
"""
Bot middleware module - Turn-level logging middleware.
"""

from activitybot.bot.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]

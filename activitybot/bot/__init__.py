# path: activitybot/bot/__init__.py
"""
Bot module - Telegram transport for the activity handler.
"""

from activitybot.bot.adapter import TelegramAdapter, activity_from_update
from activitybot.bot.client import BotClient

__all__ = ["TelegramAdapter", "activity_from_update", "BotClient"]

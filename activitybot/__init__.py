# path: activitybot/__init__.py
"""
Activity handler bot
A category dispatch engine for conversational bots, with a Telegram host.
"""

__version__ = "1.0.0"
__author__ = "Activity Bot Team"

from activitybot.core.handler import ActivityHandler
from activitybot.core.categories import Category
from activitybot.core.context import TurnContext
from activitybot.core.activity import Activity, ActivityTypes

__all__ = [
    "ActivityHandler",
    "Category",
    "TurnContext",
    "Activity",
    "ActivityTypes",
    "__version__"
]

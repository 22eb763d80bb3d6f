# path: activitybot/core/__init__.py
"""
Core module - Categories, registry, dispatcher, resolver and activity handler.
"""

from activitybot.core.activity import (
    Activity,
    ActivityTypes,
    ChannelAccount,
    ConversationAccount,
    MessageReaction
)
from activitybot.core.categories import Category
from activitybot.core.context import TurnContext
from activitybot.core.dispatcher import Dispatcher, noop
from activitybot.core.handler import ActivityHandler
from activitybot.core.registry import HandlerRegistry
from activitybot.core.resolver import CategoryResolver, Resolution

__all__ = [
    "Activity",
    "ActivityTypes",
    "ChannelAccount",
    "ConversationAccount",
    "MessageReaction",
    "Category",
    "TurnContext",
    "Dispatcher",
    "noop",
    "ActivityHandler",
    "HandlerRegistry",
    "CategoryResolver",
    "Resolution"
]

# path: activitybot/bot/handlers/sample.py
"""
Sample handlers - Shows the registration surface on a small echo bot.
"""

from typing import Optional

from activitybot.config.constants import (
    DEFAULT_WELCOME_TEXT,
    ECHO_TEMPLATE,
    GOODBYE_TEMPLATE,
    REACTION_ADDED_TEMPLATE,
    REACTION_REMOVED_TEMPLATE,
    PROACTIVE_TEXT,
    UNRECOGNIZED_TEMPLATE,
    TURN_STATE_LAST_TYPE
)
from activitybot.core.context import TurnContext
from activitybot.core.handler import ActivityHandler
from activitybot.core.registry import NextHandler


class SampleHandlers:
    """Echo bot behaviour, one method per category it cares about."""

    def __init__(self, welcome_text: Optional[str] = None):
        self.welcome_text = welcome_text or DEFAULT_WELCOME_TEXT

    async def on_message(self, context: TurnContext, next_handler: NextHandler) -> None:
        text = (context.activity.text or "").strip()
        if text:
            await context.send_activity(ECHO_TEMPLATE.format(text=text))
        await next_handler()

    async def on_members_added(self, context: TurnContext, next_handler: NextHandler) -> None:
        activity = context.activity
        recipient_id = activity.recipient.id if activity.recipient else None

        for member in activity.members_added:
            # Skip the bot's own join.
            if member.id != recipient_id and member.role != "bot":
                await context.send_activity(f"{self.welcome_text} {member.name}".strip())

        await next_handler()

    async def on_members_removed(self, context: TurnContext, next_handler: NextHandler) -> None:
        for member in context.activity.members_removed:
            await context.send_activity(GOODBYE_TEMPLATE.format(name=member.name or member.id))
        await next_handler()

    async def on_reaction_added(self, context: TurnContext, next_handler: NextHandler) -> None:
        reactions = ", ".join(r.type for r in context.activity.reactions_added)
        await context.send_activity(REACTION_ADDED_TEMPLATE.format(reactions=reactions))
        await next_handler()

    async def on_reaction_removed(self, context: TurnContext, next_handler: NextHandler) -> None:
        reactions = ", ".join(r.type for r in context.activity.reactions_removed)
        await context.send_activity(REACTION_REMOVED_TEMPLATE.format(reactions=reactions))
        await next_handler()

    async def on_continue_conversation(self, context: TurnContext, next_handler: NextHandler) -> None:
        value = context.activity.value
        await context.send_activity(value if isinstance(value, str) and value else PROACTIVE_TEXT)
        await next_handler()

    async def on_unrecognized(self, context: TurnContext, next_handler: NextHandler) -> None:
        # Only answer in a conversation we can reply to.
        if context.activity.conversation is not None:
            await context.send_activity(
                UNRECOGNIZED_TEMPLATE.format(type=context.activity.type_name or "unknown")
            )
        await next_handler()

    async def on_dialog(self, context: TurnContext, next_handler: NextHandler) -> None:
        context.turn_state[TURN_STATE_LAST_TYPE] = context.activity.type_name
        await next_handler()


def register_sample_handlers(
    handler: ActivityHandler,
    welcome_text: Optional[str] = None
) -> ActivityHandler:
    """
    Attach the sample handlers to an activity handler.

    Returns:
        The same activity handler
    """
    sample = SampleHandlers(welcome_text)

    return (
        handler
        .on_message(sample.on_message)
        .on_conversation_members_added(sample.on_members_added)
        .on_conversation_members_removed(sample.on_members_removed)
        .on_message_reaction_added(sample.on_reaction_added)
        .on_message_reaction_removed(sample.on_reaction_removed)
        .on_continue_conversation(sample.on_continue_conversation)
        .on_unrecognized_activity_type(sample.on_unrecognized)
        .on_dialog(sample.on_dialog)
    )

# path: activitybot/bot/adapter.py
"""
Telegram adapter - Turns Telegram updates into activities and runs them.
"""

from typing import Optional, Any, List, Iterable

from telegram import Update, Bot, User, Chat, Message, ChatMember
from telegram.ext import ContextTypes

from activitybot.config.constants import CHANNEL_ID, CALLBACK_QUERY_INVOKE
from activitybot.core.activity import (
    Activity,
    ActivityTypes,
    ChannelAccount,
    ConversationAccount,
    MessageReaction,
    CONTINUE_CONVERSATION_EVENT
)
from activitybot.core.context import TurnContext
from activitybot.core.handler import ActivityHandler
from activitybot.infra.exceptions import AdapterError
from activitybot.infra.logger import get_logger, AsyncLogContext


logger = get_logger(__name__)


TELEGRAM_UPDATE_KEY = "telegram_update"

PRESENT_STATUSES = {
    ChatMember.OWNER,
    ChatMember.ADMINISTRATOR,
    ChatMember.MEMBER
}


def _account(user: Optional[User]) -> Optional[ChannelAccount]:
    if user is None:
        return None
    return ChannelAccount(
        id=str(user.id),
        name=user.full_name,
        role="bot" if user.is_bot else "user"
    )


def _conversation(chat: Optional[Chat]) -> Optional[ConversationAccount]:
    if chat is None:
        return None
    return ConversationAccount(
        id=str(chat.id),
        name=chat.title or chat.full_name or "",
        is_group=chat.type in (Chat.GROUP, Chat.SUPERGROUP)
    )


def _reaction_key(reaction: Any) -> str:
    for attr in ("emoji", "custom_emoji_id"):
        value = getattr(reaction, attr, None)
        if value:
            return value
    return reaction.type


def _reactions(keys: Iterable[str]) -> List[MessageReaction]:
    return [MessageReaction(type=key) for key in keys]


def _is_present(member: ChatMember) -> bool:
    if member.status in PRESENT_STATUSES:
        return True
    # Restricted members may still be in the chat.
    return member.status == ChatMember.RESTRICTED and getattr(member, "is_member", False)


def update_kind(update: Update) -> Optional[str]:
    """Name of the populated payload field of an update, e.g. "poll"."""
    for kind in Update.ALL_TYPES:
        if getattr(update, kind, None) is not None:
            return kind
    return None


def _from_message(message: Message, activity_type: str) -> Activity:
    activity = Activity(
        type=activity_type,
        id=str(message.message_id),
        timestamp=message.date,
        channel_id=CHANNEL_ID,
        from_property=_account(message.from_user),
        conversation=_conversation(message.chat),
        text=message.text or message.caption
    )

    if message.reply_to_message is not None:
        activity.reply_to_id = str(message.reply_to_message.message_id)

    return activity


def activity_from_update(update: Update) -> Activity:
    """
    Convert a Telegram update into an activity.

    Updates with no activity counterpart keep their Telegram kind as the
    activity type and resolve as unrecognized.

    Args:
        update: The incoming Telegram update

    Returns:
        The activity to dispatch
    """
    if update.message is not None:
        message = update.message

        if message.new_chat_members:
            activity = _from_message(message, ActivityTypes.CONVERSATION_UPDATE)
            activity.members_added = [_account(u) for u in message.new_chat_members]
        elif message.left_chat_member is not None:
            activity = _from_message(message, ActivityTypes.CONVERSATION_UPDATE)
            activity.members_removed = [_account(message.left_chat_member)]
        else:
            activity = _from_message(message, ActivityTypes.MESSAGE)

    elif update.edited_message is not None:
        activity = _from_message(update.edited_message, ActivityTypes.MESSAGE_UPDATE)

    elif update.message_reaction is not None:
        reaction = update.message_reaction
        old = [_reaction_key(r) for r in reaction.old_reaction]
        new = [_reaction_key(r) for r in reaction.new_reaction]

        activity = Activity(
            type=ActivityTypes.MESSAGE_REACTION,
            timestamp=reaction.date,
            channel_id=CHANNEL_ID,
            from_property=_account(reaction.user),
            conversation=_conversation(reaction.chat),
            reply_to_id=str(reaction.message_id),
            reactions_added=_reactions(k for k in new if k not in old),
            reactions_removed=_reactions(k for k in old if k not in new)
        )

    elif update.callback_query is not None:
        query = update.callback_query
        message = query.message

        activity = Activity(
            type=ActivityTypes.INVOKE,
            id=query.id,
            channel_id=CHANNEL_ID,
            from_property=_account(query.from_user),
            conversation=_conversation(message.chat if message else None),
            name=CALLBACK_QUERY_INVOKE,
            value=query.data
        )

    elif update.my_chat_member is not None:
        change = update.my_chat_member

        activity = Activity(
            type=ActivityTypes.INSTALLATION_UPDATE,
            timestamp=change.date,
            channel_id=CHANNEL_ID,
            from_property=_account(change.from_user),
            conversation=_conversation(change.chat),
            action="add" if _is_present(change.new_chat_member) else "remove"
        )

    elif update.chat_member is not None:
        change = update.chat_member
        member = _account(change.new_chat_member.user)

        activity = Activity(
            type=ActivityTypes.CONVERSATION_UPDATE,
            timestamp=change.date,
            channel_id=CHANNEL_ID,
            from_property=_account(change.from_user),
            conversation=_conversation(change.chat)
        )

        was_present = _is_present(change.old_chat_member)
        is_present = _is_present(change.new_chat_member)

        if is_present and not was_present:
            activity.members_added = [member]
        elif was_present and not is_present:
            activity.members_removed = [member]

    else:
        activity = Activity(
            type=update_kind(update),
            channel_id=CHANNEL_ID,
            from_property=_account(update.effective_user),
            conversation=_conversation(update.effective_chat)
        )

    if activity.id is None:
        activity.id = str(update.update_id)

    return activity


class TelegramAdapter:
    """
    Bridges python-telegram-bot and an ActivityHandler.

    Replies sent through the turn context are posted with the Telegram bot.
    Handler exceptions are not caught here; they reach the application's
    error handler.
    """

    def __init__(self, handler: ActivityHandler, bot: Optional[Bot] = None):
        self.handler = handler
        self.bot = bot

    async def process_update(
        self,
        update: Update,
        context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """python-telegram-bot callback for every incoming update."""
        bot = self.bot or context.bot
        activity = activity_from_update(update)

        turn_context = TurnContext(activity, sender=self._sender(bot))
        turn_context.turn_state[TELEGRAM_UPDATE_KEY] = update

        try:
            await self.run_activity(turn_context)
        finally:
            # Clears the button's loading state even when a handler fails.
            if update.callback_query is not None:
                await update.callback_query.answer()

    async def continue_conversation(
        self,
        chat_id: int,
        value: Any = None
    ) -> TurnContext:
        """
        Run a proactive continueConversation event for a chat.

        Args:
            chat_id: Chat to continue
            value: Optional payload for the handlers

        Returns:
            The finished turn context
        """
        if self.bot is None:
            raise AdapterError("No bot available for proactive messages")

        activity = Activity(
            type=ActivityTypes.EVENT,
            channel_id=CHANNEL_ID,
            conversation=ConversationAccount(id=str(chat_id)),
            name=CONTINUE_CONVERSATION_EVENT,
            value=value
        )

        turn_context = TurnContext(activity, sender=self._sender(self.bot))
        await self.run_activity(turn_context)
        return turn_context

    async def run_activity(self, turn_context: TurnContext) -> None:
        """Run one turn, logging its duration."""
        activity = turn_context.activity

        async with AsyncLogContext(
            logger,
            "turn",
            type=activity.type_name,
            conversation=activity.conversation.id if activity.conversation else None
        ):
            await self.handler.run(turn_context)

    def _sender(self, bot: Bot):
        async def send(activity: Activity) -> Any:
            conversation_id = activity.conversation.id if activity.conversation else None

            if not conversation_id:
                raise AdapterError(
                    "Outgoing activity has no conversation",
                    activity_type=activity.type_name
                )

            chat_id = int(conversation_id) if conversation_id.lstrip("-").isdigit() else conversation_id

            if activity.type_name == ActivityTypes.TYPING.value:
                return await bot.send_chat_action(chat_id=chat_id, action="typing")

            if activity.type_name != ActivityTypes.MESSAGE.value or not activity.text:
                raise AdapterError(
                    "Telegram can only send text messages and typing indicators",
                    activity_type=activity.type_name,
                    conversation_id=conversation_id
                )

            return await bot.send_message(chat_id=chat_id, text=activity.text)

        return send

"""Test the sample handlers wired onto an ActivityHandler."""

import pytest

from activitybot.bot.handlers.sample import register_sample_handlers
from activitybot.core.activity import (
    Activity,
    ActivityTypes,
    ChannelAccount,
    ConversationAccount,
    MessageReaction,
)
from activitybot.core.context import TurnContext


CONVERSATION = ConversationAccount(id="c1")
BOT = ChannelAccount(id="b1", name="Bot", role="bot")


@pytest.fixture
def sample(bot):
    return register_sample_handlers(bot, welcome_text="Welcome!")


async def run(sample, **fields):
    context = TurnContext(Activity(conversation=CONVERSATION, recipient=BOT, **fields))
    await sample.run(context)
    return context


class TestSampleHandlers:
    async def test_echo(self, sample):
        context = await run(sample, type=ActivityTypes.MESSAGE, text="  hello ")
        assert [a.text for a in context.sent_activities] == ["You said 'hello'"]
        assert context.turn_state["last_activity_type"] == "message"

    async def test_empty_message_not_echoed(self, sample):
        context = await run(sample, type=ActivityTypes.MESSAGE, text="")
        assert context.sent_activities == []

    async def test_welcome_skips_bot(self, sample):
        context = await run(
            sample,
            type=ActivityTypes.CONVERSATION_UPDATE,
            members_added=[ChannelAccount(id="u1", name="Ada"), BOT],
        )
        assert [a.text for a in context.sent_activities] == ["Welcome! Ada"]

    async def test_goodbye(self, sample):
        context = await run(
            sample,
            type=ActivityTypes.CONVERSATION_UPDATE,
            members_removed=[ChannelAccount(id="u1", name="Ada")],
        )
        assert [a.text for a in context.sent_activities] == ["Goodbye, Ada."]

    async def test_reactions(self, sample):
        context = await run(
            sample,
            type=ActivityTypes.MESSAGE_REACTION,
            reactions_added=[MessageReaction("like")],
            reactions_removed=[MessageReaction("heart")],
        )
        assert [a.text for a in context.sent_activities] == [
            "You added like.",
            "You removed heart.",
        ]

    async def test_unrecognized(self, sample):
        context = await run(sample, type="poll")
        assert [a.text for a in context.sent_activities] == [
            "I don't handle 'poll' activities yet."
        ]

    async def test_unrecognized_without_conversation_is_silent(self, sample):
        context = TurnContext(Activity(type="poll"))
        await sample.run(context)
        assert context.sent_activities == []

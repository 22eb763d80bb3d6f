"""Test CategoryResolver against the fixed resolution tree."""

import pytest

from activitybot.core.activity import Activity, ActivityTypes, ChannelAccount, MessageReaction
from activitybot.core.categories import Category
from activitybot.core.resolver import CategoryResolver, Resolution


@pytest.fixture
def resolver():
    return CategoryResolver()


USER = ChannelAccount(id="u1", name="User")


class TestSimpleTypes:
    @pytest.mark.parametrize("activity_type,category", [
        (ActivityTypes.MESSAGE, Category.MESSAGE),
        (ActivityTypes.CONTACT_RELATION_UPDATE, Category.CONTACT_RELATION_UPDATE),
        (ActivityTypes.END_OF_CONVERSATION, Category.END_OF_CONVERSATION),
        (ActivityTypes.INVOKE, Category.INVOKE),
        (ActivityTypes.INSTALLATION_UPDATE, Category.INSTALLATION_UPDATE),
        (ActivityTypes.MESSAGE_DELETE, Category.MESSAGE_DELETE),
        (ActivityTypes.MESSAGE_UPDATE, Category.MESSAGE_UPDATE),
        (ActivityTypes.TYPING, Category.TYPING),
        (ActivityTypes.HANDOFF, Category.HANDOFF),
    ])
    def test_leaf_under_turn(self, resolver, activity_type, category):
        root = resolver.resolve(Activity(type=activity_type))
        assert root == Resolution(Category.TURN, (Resolution(category),))

    def test_plain_string_type(self, resolver):
        root = resolver.resolve(Activity(type="message"))
        assert root.categories() == [Category.TURN, Category.MESSAGE]

    def test_unknown_type(self, resolver):
        root = resolver.resolve(Activity(type="SomeUnknownType"))
        assert root.categories() == [Category.TURN, Category.UNRECOGNIZED_ACTIVITY_TYPE]

    def test_missing_type_is_unrecognized(self, resolver):
        root = resolver.resolve(Activity())
        assert root.categories() == [Category.TURN, Category.UNRECOGNIZED_ACTIVITY_TYPE]

    def test_resolution_is_deterministic(self, resolver):
        activity = Activity(type=ActivityTypes.MESSAGE_REACTION, reactions_added=[MessageReaction("like")])
        assert resolver.resolve(activity) == resolver.resolve(activity)


class TestConversationUpdate:
    def test_members_added(self, resolver):
        root = resolver.resolve(Activity(type=ActivityTypes.CONVERSATION_UPDATE, members_added=[USER]))
        assert root.categories() == [
            Category.TURN, Category.CONVERSATION_UPDATE, Category.CONVERSATION_MEMBERS_ADDED
        ]

    def test_members_removed(self, resolver):
        root = resolver.resolve(Activity(type=ActivityTypes.CONVERSATION_UPDATE, members_removed=[USER]))
        assert root.categories() == [
            Category.TURN, Category.CONVERSATION_UPDATE, Category.CONVERSATION_MEMBERS_REMOVED
        ]

    def test_added_wins_over_removed(self, resolver):
        root = resolver.resolve(Activity(
            type=ActivityTypes.CONVERSATION_UPDATE,
            members_added=[USER],
            members_removed=[USER]
        ))
        assert Category.CONVERSATION_MEMBERS_REMOVED not in root.categories()
        assert Category.CONVERSATION_MEMBERS_ADDED in root.categories()

    def test_neither(self, resolver):
        root = resolver.resolve(Activity(type=ActivityTypes.CONVERSATION_UPDATE))
        (update,) = root.children
        assert update == Resolution(Category.CONVERSATION_UPDATE)
        assert update.children == ()


class TestEvent:
    def test_create_conversation(self, resolver):
        root = resolver.resolve(Activity(type=ActivityTypes.EVENT, name="createConversation"))
        assert root.categories() == [Category.TURN, Category.EVENT, Category.CREATE_CONVERSATION]

    def test_continue_conversation(self, resolver):
        root = resolver.resolve(Activity(type=ActivityTypes.EVENT, name="continueConversation"))
        assert root.categories() == [Category.TURN, Category.EVENT, Category.CONTINUE_CONVERSATION]

    def test_other_event_name(self, resolver):
        root = resolver.resolve(Activity(type=ActivityTypes.EVENT, name="tokens/response"))
        assert root.categories() == [Category.TURN, Category.EVENT]


class TestMessageReaction:
    def test_both_lists_give_three_siblings(self, resolver):
        root = resolver.resolve(Activity(
            type=ActivityTypes.MESSAGE_REACTION,
            reactions_added=[MessageReaction("like")],
            reactions_removed=[MessageReaction("heart")]
        ))
        assert [child.category for child in root.children] == [
            Category.MESSAGE_REACTION,
            Category.MESSAGE_REACTION_ADDED,
            Category.MESSAGE_REACTION_REMOVED,
        ]
        assert all(child.children == () for child in root.children)

    def test_only_removed(self, resolver):
        root = resolver.resolve(Activity(
            type=ActivityTypes.MESSAGE_REACTION,
            reactions_removed=[MessageReaction("heart")]
        ))
        assert root.categories() == [
            Category.TURN, Category.MESSAGE_REACTION, Category.MESSAGE_REACTION_REMOVED
        ]

    def test_no_reactions(self, resolver):
        root = resolver.resolve(Activity(type=ActivityTypes.MESSAGE_REACTION))
        assert root.categories() == [Category.TURN, Category.MESSAGE_REACTION]

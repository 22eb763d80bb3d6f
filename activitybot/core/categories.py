# path: activitybot/core/categories.py
"""
Categories - The closed set of dispatch stages.
"""

from enum import Enum


class Category(Enum):
    """
    A fixed identifier naming one stage of the dispatch tree.

    Handler chains are keyed by these members only; categories are never
    created at runtime.
    """

    TURN = "Turn"
    MESSAGE = "Message"
    CONTACT_RELATION_UPDATE = "ContactRelationUpdate"
    CONVERSATION_UPDATE = "ConversationUpdate"
    CONVERSATION_MEMBERS_ADDED = "ConversationMembersAdded"
    CONVERSATION_MEMBERS_REMOVED = "ConversationMembersRemoved"
    END_OF_CONVERSATION = "EndOfConversation"
    EVENT = "Event"
    CREATE_CONVERSATION = "CreateConversation"
    CONTINUE_CONVERSATION = "ContinueConversation"
    INVOKE = "Invoke"
    INSTALLATION_UPDATE = "InstallationUpdate"
    MESSAGE_DELETE = "MessageDelete"
    MESSAGE_UPDATE = "MessageUpdate"
    MESSAGE_REACTION = "MessageReaction"
    MESSAGE_REACTION_ADDED = "MessageReactionAdded"
    MESSAGE_REACTION_REMOVED = "MessageReactionRemoved"
    TYPING = "Typing"
    HANDOFF = "Handoff"
    UNRECOGNIZED_ACTIVITY_TYPE = "UnrecognizedActivityType"
    DIALOG = "Dialog"

    def __str__(self) -> str:
        return self.value

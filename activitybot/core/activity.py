# path: activitybot/core/activity.py
"""
Activity - The inbound event shape consumed by the dispatch engine.
"""

from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ActivityTypes(str, Enum):
    """Primary discriminators understood by the category resolver."""

    MESSAGE = "message"
    CONTACT_RELATION_UPDATE = "contactRelationUpdate"
    CONVERSATION_UPDATE = "conversationUpdate"
    END_OF_CONVERSATION = "endOfConversation"
    EVENT = "event"
    INVOKE = "invoke"
    INSTALLATION_UPDATE = "installationUpdate"
    MESSAGE_DELETE = "messageDelete"
    MESSAGE_UPDATE = "messageUpdate"
    MESSAGE_REACTION = "messageReaction"
    TYPING = "typing"
    HANDOFF = "handoff"


CREATE_CONVERSATION_EVENT = "createConversation"
CONTINUE_CONVERSATION_EVENT = "continueConversation"


@dataclass
class ChannelAccount:
    """A user or bot on the channel."""

    id: str
    name: str = ""
    role: Optional[str] = None


@dataclass
class ConversationAccount:
    """The conversation an activity belongs to."""

    id: str
    name: str = ""
    is_group: bool = False


@dataclass
class MessageReaction:
    """A single reaction on a message (emoji or custom reaction id)."""

    type: str


@dataclass
class Activity:
    """
    An incoming or outgoing activity.

    Only `type` and the optional membership, name and reaction fields take
    part in category resolution; everything else is carried for handlers.
    `type` may be any string, or None for a malformed activity.
    """

    type: Optional[Union[ActivityTypes, str]] = None
    id: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)
    channel_id: str = ""
    from_property: Optional[ChannelAccount] = None
    recipient: Optional[ChannelAccount] = None
    conversation: Optional[ConversationAccount] = None
    text: Optional[str] = None
    name: Optional[str] = None
    value: Any = None
    action: Optional[str] = None
    reply_to_id: Optional[str] = None
    members_added: List[ChannelAccount] = field(default_factory=list)
    members_removed: List[ChannelAccount] = field(default_factory=list)
    reactions_added: List[MessageReaction] = field(default_factory=list)
    reactions_removed: List[MessageReaction] = field(default_factory=list)
    channel_data: Dict[str, Any] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        """The discriminator as a plain string ("" when missing)."""
        if self.type is None:
            return ""
        if isinstance(self.type, ActivityTypes):
            return self.type.value
        return str(self.type)

    def create_reply(self, text: str = "") -> "Activity":
        """
        Create a message activity addressed back to the sender.

        Args:
            text: Reply text

        Returns:
            Outgoing message activity in the same conversation
        """
        return Activity(
            type=ActivityTypes.MESSAGE,
            channel_id=self.channel_id,
            from_property=self.recipient,
            recipient=self.from_property,
            conversation=self.conversation,
            reply_to_id=self.id,
            text=text
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert activity to a log-friendly dictionary."""
        return {
            "id": self.id,
            "type": self.type_name,
            "channel_id": self.channel_id,
            "conversation": self.conversation.id if self.conversation else None,
            "from": self.from_property.id if self.from_property else None,
            "name": self.name,
            "members_added": len(self.members_added),
            "members_removed": len(self.members_removed),
            "reactions_added": [r.type for r in self.reactions_added],
            "reactions_removed": [r.type for r in self.reactions_removed],
            "timestamp": self.timestamp.isoformat()
        }

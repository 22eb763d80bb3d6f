# path: activitybot/core/resolver.py
"""
Category resolver - Maps an activity onto the fixed dispatch tree.
"""

from typing import Dict, List, Tuple
from dataclasses import dataclass

from activitybot.core.activity import (
    Activity,
    ActivityTypes,
    CREATE_CONVERSATION_EVENT,
    CONTINUE_CONVERSATION_EVENT
)
from activitybot.core.categories import Category


@dataclass(frozen=True)
class Resolution:
    """
    One node of a resolved dispatch tree.

    `children` run in order as this node's continuation; a node without
    children continues into the Dialog stage.
    """

    category: Category
    children: Tuple["Resolution", ...] = ()

    def categories(self) -> List[Category]:
        """Pre-order list of the categories in this subtree."""
        result = [self.category]
        for child in self.children:
            result.extend(child.categories())
        return result


_TYPE_CATEGORIES: Dict[str, Category] = {
    ActivityTypes.MESSAGE.value: Category.MESSAGE,
    ActivityTypes.CONTACT_RELATION_UPDATE.value: Category.CONTACT_RELATION_UPDATE,
    ActivityTypes.CONVERSATION_UPDATE.value: Category.CONVERSATION_UPDATE,
    ActivityTypes.END_OF_CONVERSATION.value: Category.END_OF_CONVERSATION,
    ActivityTypes.EVENT.value: Category.EVENT,
    ActivityTypes.INVOKE.value: Category.INVOKE,
    ActivityTypes.INSTALLATION_UPDATE.value: Category.INSTALLATION_UPDATE,
    ActivityTypes.MESSAGE_DELETE.value: Category.MESSAGE_DELETE,
    ActivityTypes.MESSAGE_UPDATE.value: Category.MESSAGE_UPDATE,
    ActivityTypes.MESSAGE_REACTION.value: Category.MESSAGE_REACTION,
    ActivityTypes.TYPING.value: Category.TYPING,
    ActivityTypes.HANDOFF.value: Category.HANDOFF,
}


class CategoryResolver:
    """
    Resolves an activity into a tree rooted at Turn.

    Pure and deterministic: the result depends only on the activity's type,
    membership lists, event name and reaction lists.
    """

    def resolve(self, activity: Activity) -> Resolution:
        """
        Resolve the categories that apply to an activity.

        Args:
            activity: The incoming activity

        Returns:
            Root Turn node whose children are dispatched in order
        """
        category = _TYPE_CATEGORIES.get(
            activity.type_name,
            Category.UNRECOGNIZED_ACTIVITY_TYPE
        )

        if category == Category.CONVERSATION_UPDATE:
            branches = (self._resolve_conversation_update(activity),)
        elif category == Category.EVENT:
            branches = (self._resolve_event(activity),)
        elif category == Category.MESSAGE_REACTION:
            branches = self._resolve_message_reaction(activity)
        else:
            branches = (Resolution(category),)

        return Resolution(Category.TURN, branches)

    def _resolve_conversation_update(self, activity: Activity) -> Resolution:
        # Added wins over removed; at most one sub-category.
        if activity.members_added:
            child = (Resolution(Category.CONVERSATION_MEMBERS_ADDED),)
        elif activity.members_removed:
            child = (Resolution(Category.CONVERSATION_MEMBERS_REMOVED),)
        else:
            child = ()

        return Resolution(Category.CONVERSATION_UPDATE, child)

    def _resolve_event(self, activity: Activity) -> Resolution:
        if activity.name == CREATE_CONVERSATION_EVENT:
            child = (Resolution(Category.CREATE_CONVERSATION),)
        elif activity.name == CONTINUE_CONVERSATION_EVENT:
            child = (Resolution(Category.CONTINUE_CONVERSATION),)
        else:
            child = ()

        return Resolution(Category.EVENT, child)

    def _resolve_message_reaction(
        self,
        activity: Activity
    ) -> Tuple[Resolution, ...]:
        # Unlike conversation updates, added and removed are independent
        # siblings of MessageReaction, each with its own Dialog stage.
        branches = [Resolution(Category.MESSAGE_REACTION)]

        if activity.reactions_added:
            branches.append(Resolution(Category.MESSAGE_REACTION_ADDED))

        if activity.reactions_removed:
            branches.append(Resolution(Category.MESSAGE_REACTION_REMOVED))

        return tuple(branches)

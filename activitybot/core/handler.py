# path: activitybot/core/handler.py
"""
Activity handler - Registration surface and per-turn entry point.
"""

from typing import Optional, Callable, Tuple

from activitybot.core.categories import Category
from activitybot.core.context import TurnContext
from activitybot.core.dispatcher import Dispatcher, Terminal, noop
from activitybot.core.registry import HandlerRegistry, BotHandler
from activitybot.core.resolver import CategoryResolver, Resolution
from activitybot.infra.logger import get_logger


logger = get_logger(__name__)


class ActivityHandler:
    """
    Routes each incoming activity through the category chains.

    Every turn starts with the Turn chain, continues into the chains of the
    resolved categories, and ends each resolved path with the Dialog chain.

    Usage:
        bot = ActivityHandler()
        bot.on_message(echo).on_conversation_members_added(welcome)
        await bot.run(TurnContext(activity))
    """

    def __init__(
        self,
        registry: Optional[HandlerRegistry] = None,
        resolver: Optional[CategoryResolver] = None
    ):
        self.registry = registry or HandlerRegistry()
        self.resolver = resolver or CategoryResolver()
        self.dispatcher = Dispatcher(self.registry)

    def on(self, category: Category, handler: BotHandler) -> "ActivityHandler":
        """
        Register a handler for any category.

        Args:
            category: The category to attach to
            handler: Async callable taking (context, next_handler)

        Returns:
            This handler, for chained registration
        """
        self.registry.register(category, handler)
        return self

    def handles(self, category: Category) -> Callable[[BotHandler], BotHandler]:
        """
        Decorator form of `on`.

        Usage:
            @bot.handles(Category.MESSAGE)
            async def echo(context, next_handler):
                await context.send_activity(context.activity.text)
                await next_handler()
        """
        def decorator(func: BotHandler) -> BotHandler:
            self.on(category, func)
            return func
        return decorator

    def on_turn(self, handler: BotHandler) -> "ActivityHandler":
        """Fires first for every incoming activity."""
        return self.on(Category.TURN, handler)

    def on_message(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.MESSAGE, handler)

    def on_contact_relation_update(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.CONTACT_RELATION_UPDATE, handler)

    def on_conversation_update(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.CONVERSATION_UPDATE, handler)

    def on_conversation_members_added(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.CONVERSATION_MEMBERS_ADDED, handler)

    def on_conversation_members_removed(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.CONVERSATION_MEMBERS_REMOVED, handler)

    def on_end_of_conversation(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.END_OF_CONVERSATION, handler)

    def on_event(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.EVENT, handler)

    def on_create_conversation(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.CREATE_CONVERSATION, handler)

    def on_continue_conversation(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.CONTINUE_CONVERSATION, handler)

    def on_invoke(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.INVOKE, handler)

    def on_installation_update(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.INSTALLATION_UPDATE, handler)

    def on_message_delete(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.MESSAGE_DELETE, handler)

    def on_message_update(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.MESSAGE_UPDATE, handler)

    def on_message_reaction(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.MESSAGE_REACTION, handler)

    def on_message_reaction_added(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.MESSAGE_REACTION_ADDED, handler)

    def on_message_reaction_removed(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.MESSAGE_REACTION_REMOVED, handler)

    def on_typing(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.TYPING, handler)

    def on_handoff(self, handler: BotHandler) -> "ActivityHandler":
        return self.on(Category.HANDOFF, handler)

    def on_unrecognized_activity_type(self, handler: BotHandler) -> "ActivityHandler":
        """Fires for activity types the resolver does not know."""
        return self.on(Category.UNRECOGNIZED_ACTIVITY_TYPE, handler)

    def on_dialog(self, handler: BotHandler) -> "ActivityHandler":
        """Fires last on every resolved path; use it to drive dialogs."""
        return self.on(Category.DIALOG, handler)

    async def run(self, context: TurnContext) -> None:
        """
        Dispatch one activity through the whole resolved tree.

        Returns once every chain, including each Dialog stage, has
        completed or been vetoed. Handler exceptions propagate unchanged.

        Args:
            context: Turn context carrying the incoming activity
        """
        if context.activity is None:
            raise TypeError("TurnContext has no activity to run")

        root = self.resolver.resolve(context.activity)
        logger.debug(
            f"Resolved {context.activity.type_name or '<missing type>'} to "
            f"{' > '.join(str(c) for c in root.categories())}"
        )

        await self.dispatcher.dispatch(
            context,
            root.category,
            self._continue_with(context, root.children)
        )

    async def run_dialogs(self, context: TurnContext) -> None:
        """Terminal stage: the Dialog chain with a no-op continuation."""
        await self.dispatcher.dispatch(context, Category.DIALOG, noop)

    def _continue_with(
        self,
        context: TurnContext,
        children: Tuple[Resolution, ...]
    ) -> Terminal:
        async def next_stage() -> None:
            if not children:
                await self.run_dialogs(context)
                return

            for child in children:
                await self.dispatcher.dispatch(
                    context,
                    child.category,
                    self._continue_with(context, child.children)
                )

        return next_stage

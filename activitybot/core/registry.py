# path: activitybot/core/registry.py
"""
Handler registry - Ordered handler chains keyed by category.
"""

from typing import Dict, List, Tuple, Callable, Awaitable, Any

from activitybot.core.categories import Category
from activitybot.infra.logger import get_logger


logger = get_logger(__name__)


NextHandler = Callable[[], Awaitable[None]]
BotHandler = Callable[[Any, NextHandler], Awaitable[None]]


class HandlerRegistry:
    """
    Holds, per category, the handlers in registration order.

    Built once during setup and read on every turn afterwards. There is no
    locking: registrations must not race with an in-flight dispatch.
    """

    def __init__(self):
        self._chains: Dict[Category, List[BotHandler]] = {}

    def register(
        self,
        category: Category,
        handler: BotHandler
    ) -> "HandlerRegistry":
        """
        Append a handler to a category's chain.

        Args:
            category: The category to attach to
            handler: Async callable taking (context, next_handler)

        Returns:
            This registry, for chained calls
        """
        if not isinstance(category, Category):
            raise TypeError(f"Unknown category: {category!r}")

        if not callable(handler):
            raise TypeError(f"Handler for {category} is not callable: {handler!r}")

        if category not in self._chains:
            self._chains[category] = [handler]
        else:
            self._chains[category].append(handler)

        logger.debug(
            f"Registered {getattr(handler, '__name__', repr(handler))} "
            f"for {category} (position {len(self._chains[category])})"
        )

        return self

    def chain_for(self, category: Category) -> Tuple[BotHandler, ...]:
        """
        Get the current chain for a category.

        Returns:
            Snapshot of the handlers in registration order (empty if none)
        """
        return tuple(self._chains.get(category, ()))

    def categories(self) -> List[Category]:
        """Categories that have at least one handler."""
        return [category for category, chain in self._chains.items() if chain]

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._chains.values())

    def __contains__(self, category: object) -> bool:
        return bool(self._chains.get(category))

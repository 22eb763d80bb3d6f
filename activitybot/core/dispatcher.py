# path: activitybot/core/dispatcher.py
"""
Dispatcher - Runs a category's handler chain by continuation passing.
"""

from typing import Any, Callable, Awaitable, Tuple

from activitybot.core.categories import Category
from activitybot.core.registry import HandlerRegistry, BotHandler
from activitybot.infra.logger import get_logger


logger = get_logger(__name__)


Terminal = Callable[[], Awaitable[None]]


async def noop() -> None:
    """Terminal continuation that does nothing."""
    return None


class _ChainRun:
    """
    One pass over a chain snapshot.

    Each step hands its handler a continuation bound to the next index; the
    terminal is awaited once the index runs past the end of the chain.
    """

    def __init__(
        self,
        context: Any,
        category: Category,
        handlers: Tuple[BotHandler, ...],
        terminal: Terminal
    ):
        self.context = context
        self.category = category
        self.handlers = handlers
        self.terminal = terminal
        self.reached_terminal = False

    def continuation(self, index: int) -> Terminal:
        async def next_handler() -> None:
            await self.step(index)
        return next_handler

    async def step(self, index: int) -> None:
        if index >= len(self.handlers):
            self.reached_terminal = True
            await self.terminal()
            return

        await self.handlers[index](self.context, self.continuation(index + 1))


class Dispatcher:
    """
    Executes handler chains looked up from a registry.

    No retries, no catching, no fan-out: a handler exception propagates
    straight out of `dispatch`, and a handler that does not call its
    continuation ends the chain.
    """

    def __init__(self, registry: HandlerRegistry):
        self.registry = registry

    async def dispatch(
        self,
        context: Any,
        category: Category,
        terminal: Terminal = noop
    ) -> bool:
        """
        Run the chain for a category.

        Args:
            context: Execution context passed to every handler
            category: Which chain to run
            terminal: Awaited after the last handler calls its continuation

        Returns:
            True if the terminal was reached, False if a handler vetoed
        """
        handlers = self.registry.chain_for(category)
        logger.debug(f"Dispatching {category} ({len(handlers)} handlers)")

        run = _ChainRun(context, category, handlers, terminal)
        await run.step(0)

        if not run.reached_terminal:
            logger.debug(f"Chain for {category} stopped before its terminal")

        return run.reached_terminal

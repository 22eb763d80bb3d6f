"""Test Dispatcher continuation passing, veto and error propagation."""

import asyncio

import pytest

from activitybot.core.categories import Category
from activitybot.core.dispatcher import Dispatcher, noop


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry)


class TestDispatchOrder:
    async def test_handlers_run_in_registration_order(self, registry, dispatcher, call_log):
        for label in ("h1", "h2", "h3"):
            registry.register(Category.MESSAGE, call_log.handler(label))

        async def terminal():
            call_log.calls.append("terminal")

        reached = await dispatcher.dispatch(object(), Category.MESSAGE, terminal)

        assert reached is True
        assert call_log.calls == ["h1", "h2", "h3", "terminal"]

    async def test_empty_chain_goes_straight_to_terminal(self, dispatcher, call_log):
        async def terminal():
            call_log.calls.append("terminal")

        assert await dispatcher.dispatch(object(), Category.TYPING, terminal) is True
        assert call_log.calls == ["terminal"]

    async def test_default_terminal_is_noop(self, registry, dispatcher, call_log):
        registry.register(Category.DIALOG, call_log.handler("dialog"))
        assert await dispatcher.dispatch(object(), Category.DIALOG) is True
        assert call_log.calls == ["dialog"]
        assert await noop() is None

    async def test_context_is_passed_through(self, registry, dispatcher):
        seen = []
        context = object()

        async def handler(ctx, next_handler):
            seen.append(ctx)
            await next_handler()

        registry.register(Category.MESSAGE, handler).register(Category.MESSAGE, handler)
        await dispatcher.dispatch(context, Category.MESSAGE)

        assert seen == [context, context]

    async def test_handler_can_work_after_continuation(self, registry, dispatcher, call_log):
        async def wrapper(context, next_handler):
            call_log.calls.append("before")
            await next_handler()
            call_log.calls.append("after")

        registry.register(Category.MESSAGE, wrapper)
        registry.register(Category.MESSAGE, call_log.handler("inner"))

        await dispatcher.dispatch(object(), Category.MESSAGE)

        assert call_log.calls == ["before", "inner", "after"]

    async def test_handler_may_suspend_before_continuing(self, registry, dispatcher, call_log):
        async def slow(context, next_handler):
            await asyncio.sleep(0)
            call_log.calls.append("slow")
            await next_handler()

        registry.register(Category.MESSAGE, slow)
        registry.register(Category.MESSAGE, call_log.handler("next"))

        await dispatcher.dispatch(object(), Category.MESSAGE)

        assert call_log.calls == ["slow", "next"]

    async def test_long_chain(self, registry, dispatcher, call_log):
        for i in range(100):
            registry.register(Category.MESSAGE, call_log.handler(str(i)))

        assert await dispatcher.dispatch(object(), Category.MESSAGE) is True
        assert call_log.calls == [str(i) for i in range(100)]


class TestVeto:
    async def test_handler_not_calling_next_stops_chain(self, registry, dispatcher, call_log):
        registry.register(Category.MESSAGE, call_log.handler("h1"))
        registry.register(Category.MESSAGE, call_log.handler("h2", proceed=False))
        registry.register(Category.MESSAGE, call_log.handler("h3"))

        async def terminal():
            call_log.calls.append("terminal")

        reached = await dispatcher.dispatch(object(), Category.MESSAGE, terminal)

        assert reached is False
        assert call_log.calls == ["h1", "h2"]


class TestErrors:
    async def test_exception_propagates_unchanged(self, registry, dispatcher, call_log):
        error = ValueError("boom")
        registry.register(Category.MESSAGE, call_log.handler("h1"))
        registry.register(Category.MESSAGE, call_log.failing("h2", error))
        registry.register(Category.MESSAGE, call_log.handler("h3"))

        with pytest.raises(ValueError) as excinfo:
            await dispatcher.dispatch(object(), Category.MESSAGE)

        assert excinfo.value is error
        assert call_log.calls == ["h1", "h2"]

    async def test_terminal_exception_propagates(self, dispatcher):
        async def terminal():
            raise RuntimeError("terminal failed")

        with pytest.raises(RuntimeError):
            await dispatcher.dispatch(object(), Category.MESSAGE, terminal)

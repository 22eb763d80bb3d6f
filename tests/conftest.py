"""Shared fixtures for the activitybot test suite."""

import os

os.environ.setdefault("ENVIRONMENT", "test")

from typing import Callable, List

import pytest

from activitybot.core.activity import Activity
from activitybot.core.context import TurnContext
from activitybot.core.handler import ActivityHandler
from activitybot.core.registry import BotHandler, HandlerRegistry


class CallLog:
    """Records which handlers ran, in order."""

    def __init__(self):
        self.calls: List[str] = []

    def handler(self, label: str, proceed: bool = True) -> BotHandler:
        async def record(context, next_handler):
            self.calls.append(label)
            if proceed:
                await next_handler()
        record.__name__ = f"record_{label}"
        return record

    def failing(self, label: str, error: Exception) -> BotHandler:
        async def fail(context, next_handler):
            self.calls.append(label)
            raise error
        return fail


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def registry() -> HandlerRegistry:
    return HandlerRegistry()


@pytest.fixture
def bot() -> ActivityHandler:
    return ActivityHandler()


@pytest.fixture
def make_context() -> Callable[..., TurnContext]:
    def factory(**fields) -> TurnContext:
        return TurnContext(Activity(**fields))
    return factory

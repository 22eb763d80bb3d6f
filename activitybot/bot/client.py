# path: activitybot/bot/client.py
"""
Telegram Bot Client - Feeds every Telegram update into the activity handler.
"""

from typing import Optional
from telegram import Update, Bot
from telegram.ext import (
    Application,
    ApplicationBuilder,
    TypeHandler
)

from activitybot.bot.adapter import TelegramAdapter
from activitybot.bot.handlers.error import error_handler
from activitybot.config.settings import Settings
from activitybot.core.handler import ActivityHandler
from activitybot.infra.logger import get_logger


logger = get_logger(__name__)


class BotClient:
    """
    Owns the python-telegram-bot application and the adapter in front of
    the activity handler.
    """

    def __init__(
        self,
        handler: ActivityHandler,
        settings: Settings
    ):
        self.handler = handler
        self.settings = settings

        self.application: Optional[Application] = None
        self.bot: Optional[Bot] = None
        self.adapter: Optional[TelegramAdapter] = None

    async def initialize(self) -> None:
        """Build the Telegram application and register the update route."""
        logger.info("Initializing bot client...")

        self.application = (
            ApplicationBuilder()
            .token(self.settings.telegram_token)
            .build()
        )

        self.bot = self.application.bot
        self.adapter = TelegramAdapter(self.handler, self.bot)

        self._register_handlers()

        logger.info("Bot client initialized successfully")

    def _register_handlers(self) -> None:
        """Route every update type through the adapter."""
        self.application.add_handler(
            TypeHandler(Update, self.adapter.process_update)
        )
        self.application.add_error_handler(error_handler)

        logger.info("Update route registered")

    async def start(self) -> None:
        """Start the bot polling."""
        logger.info("Starting bot...")

        await self.application.initialize()
        await self.application.start()
        await self.application.updater.start_polling(
            allowed_updates=self.settings.allowed_updates or Update.ALL_TYPES,
            drop_pending_updates=self.settings.drop_pending_updates
        )

        logger.info("Bot started successfully")

    async def stop(self) -> None:
        """Stop the bot."""
        logger.info("Stopping bot...")

        if self.application:
            if self.application.updater and self.application.updater.running:
                await self.application.updater.stop()
            if self.application.running:
                await self.application.stop()
            await self.application.shutdown()

        logger.info("Bot stopped")

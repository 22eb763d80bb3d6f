# path: activitybot/main.py
"""
Main entry point for the activity handler bot.
"""

import asyncio
import signal
import sys
from typing import Optional

from activitybot.bot.client import BotClient
from activitybot.bot.handlers.sample import register_sample_handlers
from activitybot.bot.middleware.logging import LoggingMiddleware
from activitybot.config.settings import Settings, get_settings
from activitybot.config.env import load_environment, validate_environment
from activitybot.core.handler import ActivityHandler
from activitybot.infra.logger import setup_logger, get_logger
from activitybot.infra.exceptions import StartupError, ConfigurationError


logger = get_logger(__name__)


def build_activity_handler(settings: Settings) -> ActivityHandler:
    """Create the activity handler with middleware and sample handlers."""
    handler = ActivityHandler()
    handler.on_turn(LoggingMiddleware())
    return register_sample_handlers(handler, welcome_text=settings.welcome_text)


class Application:
    """Main application class that wires settings, handler and transport."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.activity_handler: Optional[ActivityHandler] = None
        self.bot_client: Optional[BotClient] = None
        self._shutdown_event = asyncio.Event()

    async def initialize(self) -> None:
        """Initialize all application components."""
        logger.info("Initializing application components...")

        try:
            self.activity_handler = build_activity_handler(self.settings)
            logger.info(
                f"Activity handler ready with {len(self.activity_handler.registry)} handlers"
            )

            self.bot_client = BotClient(
                handler=self.activity_handler,
                settings=self.settings
            )
            await self.bot_client.initialize()

            logger.info("All components initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize application: {e}")
            raise StartupError(f"Application initialization failed: {e}") from e

    async def start(self) -> None:
        """Start the application."""
        logger.info("Starting activity handler bot...")

        await self.initialize()

        self._setup_signal_handlers()

        try:
            await self.bot_client.start()
            logger.info("Bot is running. Press Ctrl+C to stop.")
            await self._shutdown_event.wait()
        finally:
            await self.shutdown()

    async def shutdown(self) -> None:
        """Gracefully shutdown the application."""
        logger.info("Shutting down application...")

        if self.bot_client:
            await self.bot_client.stop()

        logger.info("Application shutdown complete")

    def _setup_signal_handlers(self) -> None:
        """Setup signal handlers for graceful shutdown."""
        loop = asyncio.get_running_loop()

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, self._handle_shutdown)

    def _handle_shutdown(self) -> None:
        """Handle shutdown signal."""
        logger.info("Received shutdown signal")
        self._shutdown_event.set()


async def main() -> None:
    """Main entry point."""
    load_environment()

    try:
        settings = get_settings()
    except ConfigurationError as e:
        setup_logger()
        logger.error(f"Invalid configuration: {e}")
        missing = validate_environment()["missing_required"]
        if missing:
            logger.error(f"Missing required variables: {', '.join(missing)}")
        sys.exit(1)

    setup_logger(
        level=settings.log_level,
        log_file=settings.log_file,
        format_string=settings.log_format,
        force=True
    )

    app = Application(settings)

    try:
        await app.start()
    except StartupError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")


if __name__ == "__main__":
    run()

# path: activitybot/bot/handlers/error.py
"""
Error handler for failures that escape a turn.
"""

import traceback
from telegram import Update
from telegram.ext import ContextTypes
from telegram.error import (
    TelegramError,
    Forbidden,
    BadRequest,
    TimedOut,
    NetworkError
)

from activitybot.config.constants import ERROR_TEXT
from activitybot.infra.exceptions import AdapterError
from activitybot.infra.logger import get_logger


logger = get_logger(__name__)


async def error_handler(
    update: object,
    context: ContextTypes.DEFAULT_TYPE
) -> None:
    """
    Handle errors raised while a turn was being dispatched.

    Transport problems are logged and dropped; anything else gets an apology
    sent to the chat when one is known.
    """
    error = context.error

    logger.error(f"Exception while handling an update: {error}")

    tb_string = "".join(
        traceback.format_exception(None, error, error.__traceback__)
    )
    logger.error(f"Traceback:\n{tb_string}")

    if isinstance(error, Forbidden):
        logger.warning(
            f"Forbidden error - bot may have been blocked or removed: {error}"
        )
        return

    if isinstance(error, BadRequest):
        if "chat not found" in str(error).lower():
            logger.warning("Chat not found - may have been deleted")
            return

        logger.error(f"Bad request error: {error}")

    if isinstance(error, TimedOut):
        logger.warning(f"Request timed out: {error}")
        return

    if isinstance(error, NetworkError):
        logger.warning(f"Network error occurred: {error}")
        return

    if isinstance(error, AdapterError):
        logger.warning(f"Adapter could not deliver a reply: {error.to_dict()}")

    if isinstance(update, Update) and update.effective_message:
        try:
            await update.effective_message.reply_text(ERROR_TEXT)
        except TelegramError as e:
            logger.error(f"Failed to send error message to user: {e}")

    if isinstance(update, Update):
        update_data = {
            "update_id": update.update_id,
            "user": update.effective_user.id if update.effective_user else None,
            "chat": update.effective_chat.id if update.effective_chat else None
        }
        logger.error(f"Update that caused error: {update_data}")

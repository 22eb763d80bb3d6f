# path: activitybot/bot/middleware/logging.py
"""
Logging middleware - A Turn handler that logs and counts every activity.
"""

import time
from datetime import datetime
from typing import Dict, Any

from activitybot.config.constants import TURN_STATE_DURATION
from activitybot.core.context import TurnContext
from activitybot.core.registry import NextHandler
from activitybot.infra.logger import get_logger


logger = get_logger(__name__)


class LoggingMiddleware:
    """
    Middleware for logging bot activities and metrics.

    Register the instance itself as a Turn handler:

        bot.on_turn(LoggingMiddleware())
    """

    def __init__(self):
        self._request_count: int = 0
        self._error_count: int = 0
        self._start_time: datetime = datetime.now()
        self._activity_types: Dict[str, int] = {}

    async def __call__(
        self,
        context: TurnContext,
        next_handler: NextHandler
    ) -> None:
        activity = context.activity
        type_name = activity.type_name or "<missing>"

        self._request_count += 1
        self._activity_types[type_name] = self._activity_types.get(type_name, 0) + 1

        start_time = time.monotonic()

        try:
            await next_handler()
        except Exception as e:
            self._error_count += 1
            error_data = {
                "activity_id": activity.id,
                "type": type_name,
                "error_type": type(e).__name__,
                "error_message": str(e)
            }
            logger.error(f"Error in turn: {error_data}")
            raise

        duration_ms = (time.monotonic() - start_time) * 1000
        context.turn_state[TURN_STATE_DURATION] = duration_ms

        log_data = {
            "activity_id": activity.id,
            "type": type_name,
            "conversation": activity.conversation.id if activity.conversation else None,
            "from": activity.from_property.id if activity.from_property else None,
            "responded": context.responded,
            "duration_ms": round(duration_ms, 2)
        }

        logger.info(f"Activity processed: {log_data}")

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get current metrics.
        """
        uptime = datetime.now() - self._start_time

        return {
            "total_requests": self._request_count,
            "total_errors": self._error_count,
            "error_rate": (
                self._error_count / self._request_count
                if self._request_count > 0 else 0
            ),
            "uptime_seconds": uptime.total_seconds(),
            "activity_types": dict(self._activity_types)
        }

    def reset_metrics(self) -> None:
        """Reset all metrics."""
        self._request_count = 0
        self._error_count = 0
        self._start_time = datetime.now()
        self._activity_types = {}

# path: activitybot/core/context.py
"""
Turn context - Carries the current activity and ambient turn state.
"""

from typing import Dict, Any, List, Optional, Callable, Awaitable, Union

from activitybot.core.activity import Activity, ActivityTypes


Sender = Callable[[Activity], Awaitable[Any]]


class TurnContext:
    """
    Execution context for one dispatched activity.

    Owned by the caller of `ActivityHandler.run` for the duration of a single
    turn. Handlers share data through `turn_state`.
    """

    def __init__(
        self,
        activity: Optional[Activity],
        sender: Optional[Sender] = None,
        turn_state: Optional[Dict[str, Any]] = None
    ):
        self.activity = activity
        self.turn_state: Dict[str, Any] = turn_state if turn_state is not None else {}
        self.sent_activities: List[Activity] = []
        self.responded: bool = False
        self._sender = sender

    async def send_activity(
        self,
        activity_or_text: Union[Activity, str]
    ) -> Any:
        """
        Send an activity back to the channel.

        A plain string is wrapped as a reply to the current activity.

        Args:
            activity_or_text: Outgoing activity or message text

        Returns:
            Whatever the host sender returned (None without a sender)
        """
        if isinstance(activity_or_text, str):
            if self.activity is not None:
                outgoing = self.activity.create_reply(activity_or_text)
            else:
                outgoing = Activity(type=ActivityTypes.MESSAGE, text=activity_or_text)
        else:
            outgoing = activity_or_text

        result = None
        if self._sender is not None:
            result = await self._sender(outgoing)

        # Only delivered replies count.
        self.sent_activities.append(outgoing)
        self.responded = True

        return result

    async def send_activities(
        self,
        activities: List[Union[Activity, str]]
    ) -> List[Any]:
        """Send several activities in order."""
        results = []
        for activity in activities:
            results.append(await self.send_activity(activity))
        return results

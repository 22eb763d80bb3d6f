# path: activitybot/config/constants.py
"""
Constants - Application-wide constants and sample bot texts.
"""

VERSION = "1.0.0"
APP_NAME = "Activity Handler Bot"

CHANNEL_ID = "telegram"

DEFAULT_WELCOME_TEXT = "Welcome to the activity handler bot!"

ECHO_TEMPLATE = "You said '{text}'"
GOODBYE_TEMPLATE = "Goodbye, {name}."
REACTION_ADDED_TEMPLATE = "You added {reactions}."
REACTION_REMOVED_TEMPLATE = "You removed {reactions}."
PROACTIVE_TEXT = "Proactive hello!"
UNRECOGNIZED_TEMPLATE = "I don't handle '{type}' activities yet."

ERROR_TEXT = "Sorry, it looks like something went wrong."

CALLBACK_QUERY_INVOKE = "callbackQuery"

TURN_STATE_LAST_TYPE = "last_activity_type"
TURN_STATE_DURATION = "turn_duration_ms"

"""Teams Adapter - Bot Framework adapter construction and turn error handling."""

import logging

from botbuilder.core import (
    BotFrameworkAdapter,
    BotFrameworkAdapterSettings,
    MessageFactory,
    TurnContext,
)

from package_search_bot.config.settings import Config

logger = logging.getLogger(__name__)

TURN_ERROR_TEXT = "The bot encountered an error or bug."


async def on_turn_error(turn_context: TurnContext, error: Exception) -> None:
    """
    Last-resort handler for exceptions raised while processing a turn.

    Logs the failure with the activity type, then tells the user something
    went wrong. A failure to send that notice is logged as well.
    """
    activity = turn_context.activity
    logger.error(
        "[TEAMS] Unhandled error in %s turn (activity=%s): %s",
        activity.type if activity else "unknown",
        activity.id if activity else None,
        error,
        exc_info=error,
    )
    try:
        await turn_context.send_activity(MessageFactory.text(TURN_ERROR_TEXT))
    except Exception as send_error:
        logger.error("[TEAMS] Failed to notify user of turn error: %s", send_error)


def create_adapter(config=Config) -> BotFrameworkAdapter:
    """Create the Bot Framework adapter with credentials from config."""
    settings = BotFrameworkAdapterSettings(config.APP_ID, config.APP_PASSWORD)
    adapter = BotFrameworkAdapter(settings)
    adapter.on_turn_error = on_turn_error

    if not config.APP_ID:
        logger.warning("MICROSOFT_APP_ID not configured, channel auth is disabled")

    return adapter

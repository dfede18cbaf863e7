"""Teams Bot - Echo, greeting and package search messaging extension handlers."""

import asyncio
import logging
from typing import Any, Optional

from botbuilder.core import MessageFactory, TurnContext
from botbuilder.core.teams import TeamsActivityHandler
from botbuilder.schema import ChannelAccount
from botbuilder.schema.teams import MessagingExtensionQuery, MessagingExtensionResponse

from package_search_bot.adapters.teams.teams_formatter import TeamsFormatter
from package_search_bot.adapters.teams.teams_query import extension_query_from_teams
from package_search_bot.application.queries.packages import (
    SearchPackagesHandler,
    SearchPackagesQuery,
)
from package_search_bot.domain.value_objects.extension_query import extract_query_text
from package_search_bot.domain.value_objects.preview_payload import PreviewPayload

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Hello and welcome!"
ECHO_PREFIX = "Echo: "


class PackageSearchBot(TeamsActivityHandler):
    """
    Teams activity handler for the package search sample.

    - Messages are echoed back.
    - New conversation members (other than the bot) are greeted.
    - Messaging extension queries search the package registry; every hit
      becomes a card whose tap triggers composeExtension/selectItem.
    """

    def __init__(
        self,
        search_handler: SearchPackagesHandler,
        formatter: Optional[TeamsFormatter] = None,
    ):
        super().__init__()
        self._search_handler = search_handler
        self._formatter = formatter or TeamsFormatter()

    async def on_message_activity(self, turn_context: TurnContext):
        await turn_context.send_activity(
            MessageFactory.text(f"{ECHO_PREFIX}{turn_context.activity.text}")
        )

    async def on_members_added_activity(
        self, members_added: list[ChannelAccount], turn_context: TurnContext
    ):
        bot_id = turn_context.activity.recipient.id
        sends = [
            turn_context.send_activity(MessageFactory.text(WELCOME_TEXT))
            for member in members_added
            if member.id != bot_id
        ]
        # Sends run concurrently; the first failure propagates
        await asyncio.gather(*sends)

    async def on_teams_messaging_extension_query(
        self, turn_context: TurnContext, query: MessagingExtensionQuery
    ) -> MessagingExtensionResponse:
        extension_query = extension_query_from_teams(query)
        query_text = extract_query_text(extension_query)
        logger.info("[TEAMS] Messaging extension query: %r", query_text)

        result = await self._search_handler.execute(
            SearchPackagesQuery(
                query_text=query_text,
                skip=extension_query.skip if extension_query else None,
                count=extension_query.count if extension_query else None,
            )
        )
        return self._formatter.format_search_results(result.rows)

    async def on_teams_messaging_extension_select_item(
        self, turn_context: TurnContext, query: Any
    ) -> MessagingExtensionResponse:
        payload = PreviewPayload.from_invoke_value(query)
        logger.info("[TEAMS] Package selected: %s %s", payload.name, payload.version)
        return self._formatter.format_selected_package(payload)

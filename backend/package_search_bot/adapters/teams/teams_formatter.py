"""Teams Response Formatter - Formats package search results into messaging extension cards."""

import logging
from typing import Iterable

from botbuilder.core import CardFactory
from botbuilder.schema import ActionTypes, CardAction, CardImage, HeroCard, ThumbnailCard
from botbuilder.schema.teams import (
    MessagingExtensionAttachment,
    MessagingExtensionResponse,
    MessagingExtensionResult,
)

from package_search_bot.domain.entities.search_result_row import SearchResultRow
from package_search_bot.domain.value_objects.preview_payload import PreviewPayload

logger = logging.getLogger(__name__)

ICON_ALT_TEXT = "Icon"
PROJECT_BUTTON_TITLE = "Project"


class TeamsFormatter:
    """Formats search rows and selections into Teams messaging extension responses."""

    def format_search_results(
        self, rows: Iterable[SearchResultRow]
    ) -> MessagingExtensionResponse:
        """Wrap one attachment per row in a "result" list response."""
        return self._wrap(self.build_result_attachments(rows))

    def build_result_attachments(
        self, rows: Iterable[SearchResultRow]
    ) -> list[MessagingExtensionAttachment]:
        """
        Build a detail/preview attachment pair for every row, in row order.

        The preview's tap carries the whole row, so selecting it can render
        the detail card without a second registry call.
        """
        attachments = []
        for row in rows:
            preview_card = ThumbnailCard(
                title=row.name,
                tap=CardAction(
                    type="invoke",
                    value=PreviewPayload.from_row(row).to_invoke_value(),
                ),
            )
            if row.icon_url:
                preview_card.images = [CardImage(url=row.icon_url, alt=ICON_ALT_TEXT)]

            attachments.append(
                MessagingExtensionAttachment(
                    content_type=CardFactory.content_types.hero_card,
                    content=HeroCard(title=row.name),
                    preview=CardFactory.thumbnail_card(preview_card),
                )
            )

        logger.debug("Built %d result attachments", len(attachments))
        return attachments

    def format_selected_package(
        self, payload: PreviewPayload
    ) -> MessagingExtensionResponse:
        """Render the detail card for a previously selected preview."""
        card = ThumbnailCard(
            title=payload.name,
            subtitle=payload.description,
            buttons=[
                CardAction(
                    type=ActionTypes.open_url,
                    title=PROJECT_BUTTON_TITLE,
                    value=payload.project_url,
                )
            ],
        )
        if payload.icon_url and payload.icon_url.strip():
            card.images = [CardImage(url=payload.icon_url, alt=ICON_ALT_TEXT)]

        attachment = MessagingExtensionAttachment(
            content_type=CardFactory.content_types.thumbnail_card,
            content=card,
        )
        return self._wrap([attachment])

    def _wrap(
        self, attachments: list[MessagingExtensionAttachment]
    ) -> MessagingExtensionResponse:
        return MessagingExtensionResponse(
            compose_extension=MessagingExtensionResult(
                type="result",
                attachment_layout="list",
                attachments=attachments,
            )
        )

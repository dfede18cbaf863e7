"""
PreviewPayload Value Object - Data carried by a preview card's tap action.

Wire form (returned verbatim by Teams on selection):
    {"data": [name, version, description, projectUrl, iconUrl]}

Positions are significant and shared with every card already rendered in a
client, so the order must never change.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from package_search_bot.domain.entities.search_result_row import SearchResultRow
from package_search_bot.domain.exceptions.invalid_selection_payload import (
    InvalidSelectionPayloadError,
)

PAYLOAD_KEY = "data"
PAYLOAD_FIELD_COUNT = 5


@dataclass(frozen=True)
class PreviewPayload:
    name: str
    version: str
    description: str
    project_url: str
    icon_url: str

    @classmethod
    def from_row(cls, row: SearchResultRow) -> PreviewPayload:
        return cls(
            name=row.name,
            version=row.version,
            description=row.description,
            project_url=row.project_url,
            icon_url=row.icon_url,
        )

    def to_invoke_value(self) -> dict:
        """Encode as the invoke value stored on the card's tap action."""
        return {
            PAYLOAD_KEY: [
                self.name,
                self.version,
                self.description,
                self.project_url,
                self.icon_url,
            ]
        }

    @classmethod
    def from_invoke_value(cls, value: Any) -> PreviewPayload:
        """
        Decode the value Teams sends back with composeExtension/selectItem.

        Args:
            value: The activity value; a dict, or the same dict as a JSON string

        Raises:
            InvalidSelectionPayloadError: If the value does not hold at least
                five positional fields under "data"
        """
        if isinstance(value, (str, bytes)):
            try:
                value = json.loads(value)
            except ValueError as e:
                raise InvalidSelectionPayloadError(
                    "Selection payload is not valid JSON"
                ) from e

        if not isinstance(value, dict):
            raise InvalidSelectionPayloadError(
                f"Selection payload must be an object, got {type(value).__name__}"
            )

        data = value.get(PAYLOAD_KEY)
        if not isinstance(data, list):
            raise InvalidSelectionPayloadError(
                f"Selection payload is missing the '{PAYLOAD_KEY}' list"
            )
        if len(data) < PAYLOAD_FIELD_COUNT:
            raise InvalidSelectionPayloadError(
                f"Selection payload has {len(data)} fields, expected {PAYLOAD_FIELD_COUNT}"
            )

        name, version, description, project_url, icon_url = (
            "" if item is None else str(item) for item in data[:PAYLOAD_FIELD_COUNT]
        )
        return cls(
            name=name,
            version=version,
            description=description,
            project_url=project_url,
            icon_url=icon_url,
        )

"""
ExtensionQuery Value Object - The inbound messaging extension search request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

SEARCH_QUERY_PARAMETER = "searchQuery"
EMPTY_QUERY_TEXT = "Empty query"


@dataclass(frozen=True)
class QueryParameter:
    name: str
    value: Any = None


@dataclass(frozen=True)
class ExtensionQuery:
    parameters: tuple[QueryParameter, ...] = field(default_factory=tuple)
    skip: Optional[int] = None
    count: Optional[int] = None

    def __post_init__(self):
        if self.skip is not None and self.skip < 0:
            raise ValueError(f"Invalid skip: {self.skip}")
        if self.count is not None and self.count < 0:
            raise ValueError(f"Invalid count: {self.count}")


def extract_query_text(query: Optional[ExtensionQuery]) -> str:
    """
    Pull the free-text search term out of an extension query.

    Only the first parameter is looked at, and only when it is named
    "searchQuery". Anything else yields EMPTY_QUERY_TEXT.
    """
    if query is None or not query.parameters:
        return EMPTY_QUERY_TEXT

    first = query.parameters[0]
    if first.name != SEARCH_QUERY_PARAMETER or first.value is None:
        return EMPTY_QUERY_TEXT

    return str(first.value)

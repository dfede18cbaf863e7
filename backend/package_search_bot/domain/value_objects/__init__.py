"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Is compared by value
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from package_search_bot.domain.value_objects.extension_query import (
    EMPTY_QUERY_TEXT,
    ExtensionQuery,
    QueryParameter,
    extract_query_text,
)
from package_search_bot.domain.value_objects.preview_payload import PreviewPayload

__all__ = [
    "EMPTY_QUERY_TEXT",
    "ExtensionQuery",
    "QueryParameter",
    "extract_query_text",
    "PreviewPayload",
]

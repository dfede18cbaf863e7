"""
ENTITIES - Business objects built from registry data

Pure Python dataclasses (no ORM, no Pydantic).
"""

from package_search_bot.domain.entities.search_result_row import SearchResultRow

__all__ = [
    "SearchResultRow",
]

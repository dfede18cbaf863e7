"""
PackageRegistry Port - Interface for searching an external package registry.
Implementation: package_search_bot/infrastructure/registry/nuget_search_client.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from package_search_bot.domain.entities.search_result_row import SearchResultRow


class PackageRegistry(ABC):
    @abstractmethod
    async def search(
        self,
        query_text: str,
        skip: Optional[int] = None,
        take: Optional[int] = None,
    ) -> list[SearchResultRow]:
        """
        Run one search against the registry.

        Raises:
            PackageSearchError: On any transport or parse failure
        """
        ...

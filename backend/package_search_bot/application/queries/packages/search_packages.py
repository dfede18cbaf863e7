"""
SearchPackages Query - Run a messaging extension search against the registry.

The handler is the single suspension point of a query turn: the bot awaits
it before building any cards. Registry failures are logged with the query
text and re-raised so the bot adapter's turn error handler reports them.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from package_search_bot.application.common.interfaces import Query, QueryHandler
from package_search_bot.domain.entities.search_result_row import SearchResultRow
from package_search_bot.domain.exceptions.package_search_error import PackageSearchError
from package_search_bot.domain.ports.package_registry import PackageRegistry
from package_search_bot.observability.metrics import (
    SearchOutcome,
    increment_search,
    observe_search_latency,
)

logger = logging.getLogger(__name__)


# ==================== RESULT ====================


@dataclass
class SearchPackagesResult:
    """Result of a package search, rows in registry order."""

    query_text: str
    rows: list[SearchResultRow]


# ==================== QUERY ====================


@dataclass(frozen=True)
class SearchPackagesQuery(Query[SearchPackagesResult]):
    """
    Query to search the package registry.

    Args:
        query_text: Term extracted from the extension query
        skip: Paging offset requested by the client, if any
        count: Page size requested by the client, if any
    """

    query_text: str
    skip: Optional[int] = None
    count: Optional[int] = None


# ==================== HANDLER ====================


class SearchPackagesHandler(QueryHandler[SearchPackagesResult]):
    """Handler for the package search query."""

    def __init__(self, registry: PackageRegistry):
        self._registry = registry

    async def execute(self, query: SearchPackagesQuery) -> SearchPackagesResult:
        start = time.perf_counter()
        try:
            rows = await self._registry.search(
                query.query_text, skip=query.skip, take=query.count
            )
        except PackageSearchError as e:
            increment_search(SearchOutcome.FAILURE)
            logger.error(
                "Package search failed for query=%r: %s",
                query.query_text,
                e.__cause__ or e,
                exc_info=True,
            )
            raise
        finally:
            observe_search_latency(time.perf_counter() - start)

        increment_search(SearchOutcome.SUCCESS)
        logger.info(
            "Package search for query=%r returned %d rows", query.query_text, len(rows)
        )
        return SearchPackagesResult(query_text=query.query_text, rows=rows)

"""NuGet Search Client - Queries the NuGet search service for packages by id."""

import logging
from typing import Any, Optional

import httpx

from package_search_bot.config.settings import Config
from package_search_bot.domain.entities.search_result_row import SearchResultRow
from package_search_bot.domain.exceptions.package_search_error import PackageSearchError
from package_search_bot.domain.ports.package_registry import PackageRegistry

logger = logging.getLogger(__name__)


class NuGetSearchClient(PackageRegistry):
    """Client for the NuGet search query endpoint."""

    def __init__(
        self,
        search_url: Optional[str] = None,
        timeout: Optional[float] = None,
        prerelease: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.search_url = search_url or Config.PACKAGE_SEARCH_URL
        self.timeout = timeout if timeout is not None else Config.PACKAGE_SEARCH_TIMEOUT
        self.prerelease = (
            prerelease if prerelease is not None else Config.PACKAGE_SEARCH_PRERELEASE
        )
        self._transport = transport

    async def search(
        self,
        query_text: str,
        skip: Optional[int] = None,
        take: Optional[int] = None,
    ) -> list[SearchResultRow]:
        """
        Search packages whose id matches query_text.

        Args:
            query_text: Free-text term, sent as "id:<query_text>"
            skip: Number of hits to skip (omitted when None)
            take: Maximum number of hits (registry default when None)

        Returns:
            Rows in the order the registry returned them

        Raises:
            PackageSearchError: On transport failure, timeout, HTTP error
                status or an unexpected response body
        """
        params: dict[str, Any] = {
            "q": f"id:{query_text}",
            "prerelease": "true" if self.prerelease else "false",
        }
        if skip is not None:
            params["skip"] = skip
        if take is not None:
            params["take"] = take

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(self.search_url, params=params)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            raise PackageSearchError(
                query_text,
                f"Registry returned HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            raise PackageSearchError(
                query_text, f"Registry request failed: {type(e).__name__}"
            ) from e
        except ValueError as e:
            raise PackageSearchError(query_text, "Registry returned invalid JSON") from e

        rows = self._parse_rows(query_text, body)
        logger.debug("NuGet search for %r returned %d rows", query_text, len(rows))
        return rows

    def _parse_rows(self, query_text: str, body: Any) -> list[SearchResultRow]:
        """Normalize the registry "data" array into SearchResultRow objects."""
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise PackageSearchError(query_text, "Registry response has no 'data' array")

        rows = []
        for index, item in enumerate(data):
            try:
                rows.append(
                    SearchResultRow(
                        name=self._as_text(item["id"]),
                        version=self._as_text(item["version"]),
                        description=self._as_text(item["description"]),
                        project_url=self._as_text(item.get("projectUrl")),
                        icon_url=self._as_text(item.get("iconUrl")),
                    )
                )
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                raise PackageSearchError(
                    query_text, f"Malformed registry result at index {index}"
                ) from e

        return rows

    @staticmethod
    def _as_text(value: Any) -> str:
        """Render a JSON scalar as text; missing values become empty strings."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

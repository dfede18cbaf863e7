"""Package search queries."""

from package_search_bot.application.queries.packages.search_packages import (
    SearchPackagesQuery,
    SearchPackagesHandler,
    SearchPackagesResult,
)

__all__ = [
    "SearchPackagesQuery",
    "SearchPackagesHandler",
    "SearchPackagesResult",
]

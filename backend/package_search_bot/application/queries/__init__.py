"""
QUERIES - Read operations (CQRS)

Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- packages/ → search_packages
"""

from package_search_bot.application.queries.packages import (
    SearchPackagesQuery,
    SearchPackagesHandler,
    SearchPackagesResult,
)

__all__ = [
    # packages
    "SearchPackagesQuery",
    "SearchPackagesHandler",
    "SearchPackagesResult",
]

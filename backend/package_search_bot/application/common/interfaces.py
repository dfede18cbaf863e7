"""
Base interfaces for the query side of the application layer.

Usage:
    @dataclass(frozen=True)
    class SearchPackagesQuery(Query[SearchPackagesResult]):
        query_text: str

    class SearchPackagesHandler(QueryHandler[SearchPackagesResult]):
        def __init__(self, registry: PackageRegistry):
            self.registry = registry

        async def execute(self, query: SearchPackagesQuery) -> SearchPackagesResult:
            rows = await self.registry.search(query.query_text)
            return SearchPackagesResult(rows=rows)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...

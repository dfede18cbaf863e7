"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- registry/: NuGet search service client (PackageRegistry)
"""

from package_search_bot.infrastructure.registry import NuGetSearchClient

__all__ = [
    "NuGetSearchClient",
]

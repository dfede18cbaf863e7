"""
Registry Layer - External package registry implementations.

Contains the NuGet search client for the PackageRegistry port.
"""

from package_search_bot.infrastructure.registry.nuget_search_client import (
    NuGetSearchClient,
)

__all__ = [
    "NuGetSearchClient",
]

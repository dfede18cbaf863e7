"""
PORTS - Interfaces that infrastructure implements

A "port" defines WHAT the domain needs without specifying HOW:
- Domain says: "I need packages matching a term"
- Infrastructure implements: "I'll ask the NuGet search service"
"""

from package_search_bot.domain.ports.package_registry import PackageRegistry

__all__ = [
    "PackageRegistry",
]

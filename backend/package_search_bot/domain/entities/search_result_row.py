"""
SearchResultRow Entity - One normalized hit from the package registry.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResultRow:
    name: str
    version: str
    description: str
    project_url: str = ""
    icon_url: str = ""

"""
PackageSearchError - Raised when the package registry cannot be queried
or its response cannot be parsed. The whole search turn fails with it.
"""


class PackageSearchError(Exception):
    """Exception raised when a registry search fails."""

    def __init__(self, query_text: str, message: str = "Package search failed"):
        super().__init__(f"{message} (query={query_text!r})")
        self.query_text = query_text
        self.message = message

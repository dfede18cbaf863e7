"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and infrastructure code and surface
through the bot adapter's turn error handler.
"""

from package_search_bot.domain.exceptions.validation_error import DomainValidationError
from package_search_bot.domain.exceptions.invalid_selection_payload import (
    InvalidSelectionPayloadError,
)
from package_search_bot.domain.exceptions.package_search_error import PackageSearchError

__all__ = [
    "DomainValidationError",
    "InvalidSelectionPayloadError",
    "PackageSearchError",
]

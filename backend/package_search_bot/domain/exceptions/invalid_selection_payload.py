"""
InvalidSelectionPayloadError - Raised when a selected card's tap value
cannot be decoded back into a PreviewPayload.
"""

from package_search_bot.domain.exceptions.validation_error import DomainValidationError


class InvalidSelectionPayloadError(DomainValidationError):
    """Exception raised for malformed or tampered selection payloads."""

    def __init__(self, message: str = "Malformed selection payload"):
        super().__init__(message)

"""
DomainValidationError - Raised when a business rule is violated.
Base for malformed input raised while handling a turn; the adapter's
turn error handler reports it to the user.
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

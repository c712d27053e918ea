class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or invalid, before any store call."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist in the store."""


class StoreError(DomainError):
    """Raised when the Record Store rejects or fails an operation."""


class UnsupportedDurationError(ValidationError):
    """Raised when a check-out time of day is earlier than the check-in."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriod(ValidationError):
    """Raised when a requested month/year cannot be turned into a period."""


class AuthenticationError(DomainError):
    """Raised when a bearer token is missing or cannot be verified."""


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""


class UpstreamUnavailable(DomainError):
    """Raised when a backing store (roster, punch events, settings) fails."""


class MalformedEvent(DomainError):
    """Raised for a single punch event that cannot be interpreted."""

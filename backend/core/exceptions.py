"""
Domain exceptions raised by services and repositories.

The API layer maps each class to an HTTP status code in main.py.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Input violates a field rule (empty title, invalid id, ...)."""


class NotFoundError(DomainError):
    """Entity does not exist or has been soft-deleted."""


class ConflictError(DomainError):
    """Entity collides with an existing one (duplicate email)."""


class AuthenticationError(DomainError):
    """Credentials or session token were rejected."""

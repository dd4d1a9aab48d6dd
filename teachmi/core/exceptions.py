"""
Custom exceptions for the application.
"""


class TeachmiException(Exception):
    """Base exception for all Teachmi application exceptions."""
    pass


class ValidationError(TeachmiException):
    """Raised when validation fails."""
    pass


class NotFoundError(TeachmiException):
    """Raised when a requested resource is not found."""
    pass


class DeckError(TeachmiException):
    """Raised when the deck asset is missing or malformed."""
    pass


class PersistenceUnavailableError(TeachmiException):
    """Raised when the progress storage medium cannot be reached at all."""
    pass

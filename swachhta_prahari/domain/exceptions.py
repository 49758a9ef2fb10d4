"""
Exception hierarchy shared by use cases and controllers.

Use cases raise these; controllers translate them into HTTP responses.
Every exception subclasses ValueError or RuntimeError so callers written
against the built-in types keep working.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class PrahariError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationFailedError(PrahariError, ValueError):
    """Raised when input fails validation; carries field-level messages."""

    status_code = 400


class NotFoundError(PrahariError, ValueError):
    """Raised when a referenced document does not exist."""

    status_code = 404


class AuthenticationError(PrahariError, ValueError):
    """Raised when credentials or tokens are missing, invalid or inactive."""

    status_code = 401


class PermissionDeniedError(PrahariError, ValueError):
    """Raised when an authenticated user lacks the role for an action."""

    status_code = 403


class ConflictError(PrahariError, ValueError):
    """Raised on duplicates, stale versions and illegal state transitions."""

    status_code = 409


class InvalidStateTransitionError(ConflictError):
    """Raised when an incident cannot move to the requested status."""
    pass


class PayloadTooLargeError(PrahariError, ValueError):
    """Raised when an uploaded file exceeds the configured limit."""

    status_code = 413


# -----------------------------------------------------------------------------
# Upstream
# -----------------------------------------------------------------------------


class UpstreamServiceError(PrahariError, RuntimeError):
    """Raised when an external service (video storage, mail) fails."""

    status_code = 502

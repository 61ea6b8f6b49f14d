from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTransitionError(ValidationError):
    """Raised when a status change is not offered from the current status."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or no session exists."""


class SessionExpiredError(AuthenticationError):
    """Raised after the backend rejected the token and the session was cleared."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ApiError(DomainError):
    """Raised when the backend answers with a non-2xx status or cannot be reached."""

    def __init__(self, message: str, *, status_code: int = 0, payload: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.payload = payload

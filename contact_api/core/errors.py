"""Domain exception hierarchy with HTTP semantics.

Every error carries the status code the centralized handler answers with and a
human-readable ``description`` surfaced next to the exception message.
"""

from __future__ import annotations

from fastapi import status


class ContactApiError(Exception):
    """Base application error."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    description: str = "Unknown internal server error."

    def __init__(self, message: str, *, description: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if description is not None:
            self.description = description


class ConfigurationError(ContactApiError):
    """Raised at startup when required configuration is missing or malformed."""


class ConflictError(ContactApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    description = "The request conflicts with existing data."


class NotFoundError(ContactApiError):
    status_code = status.HTTP_404_NOT_FOUND
    description = "The requested resource was not found."


class AuthenticationError(ContactApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    description = "The username or password is incorrect"


class AuthorizationError(ContactApiError):
    status_code = status.HTTP_403_FORBIDDEN
    description = "You are not authorized to access this resource"


class TokenError(ContactApiError):
    """Base class for bearer token failures."""

    status_code = status.HTTP_403_FORBIDDEN
    description = "The JWT token is invalid"


class MalformedTokenError(TokenError):
    description = "The JWT token is malformed"


class InvalidSignatureError(TokenError):
    description = "The JWT signature is invalid"


class ExpiredTokenError(TokenError):
    description = "The JWT token has expired"

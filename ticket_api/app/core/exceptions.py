"""
Error taxonomy of the user service.

Each error carries the HTTP status code it maps to and a short
message that is returned to the client verbatim as a plain-text body.
Services raise these; endpoints translate them into ``HTTPException``.
"""

from typing import Optional

from fastapi import status


class UserServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class DecodeError(UserServiceError):
    message = "Request body could not be decoded"


class InvalidIdentifier(UserServiceError):
    message = "ID is required"


class InvalidAge(UserServiceError):
    message = "Age cannot be less than zero"


class InvalidPassport(UserServiceError):
    message = "Invalid passport number"


class DuplicateIdentifier(UserServiceError):
    status_code = status.HTTP_409_CONFLICT
    message = "User already exists"


class NotFound(UserServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


class InvalidPathParameter(UserServiceError):
    message = "Invalid ID"

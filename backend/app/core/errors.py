"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a fixed, caller-safe
message. Internal details (store diagnostics, tracebacks) are logged by the
raiser and never travel inside these objects.
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors rendered as an envelope response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthenticated."


class InvalidToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid password"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden: You do not have enough permissions"


class NotFound(AppError):
    """Entity is absent or owned by another tenant. The two are not distinguished."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"

    @classmethod
    def for_entity(cls, entity: str) -> "NotFound":
        return cls(f"{entity} not found")


class ValidationFailed(AppError):
    """Input rejected by a validation rule that needs the store (e.g. email in use)."""

    status_code = 422
    message = "Validation error"

    def __init__(self, errors: list[dict], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

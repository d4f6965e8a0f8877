"""Typed failures raised by the application services.

Each error carries the HTTP status the API layer answers with, so the
presentation layer can render every failure through a single handler.
"""

from typing import List, Union


class ServiceError(Exception):
    """Base class for failures surfaced to API clients."""

    status_code = 500

    def __init__(self, message: Union[str, List[str]]) -> None:
        super().__init__(message if isinstance(message, str) else "; ".join(message))
        self.message = message


class ValidationError(ServiceError):
    """Request data is malformed or missing required fields."""

    status_code = 400


class UnauthorizedError(ServiceError):
    """Bearer token is missing, invalid or expired."""

    status_code = 401


class ForbiddenError(ServiceError):
    """Credentials are wrong or the caller may not touch the resource."""

    status_code = 403


class ConflictError(ServiceError):
    """A unique value (the account email) is already taken."""

    status_code = 403


class NotFoundError(ServiceError):
    """The requested resource does not exist."""

    status_code = 404

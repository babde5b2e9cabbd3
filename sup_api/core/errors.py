"""Error hierarchy shared by services and rendered by the app's handlers."""

from __future__ import annotations


class ApiError(Exception):
    """Base class for failures that end a request with a JSON message."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequest(ApiError):
    status_code = 400


class Unauthenticated(ApiError):
    status_code = 401


class Forbidden(ApiError):
    """Ownership violation. The status differs per endpoint (401 or 422)."""

    status_code = 401


class NotFound(ApiError):
    status_code = 404


class ValidationError(ApiError):
    status_code = 422


class UnprocessableEntity(ApiError):
    status_code = 422


class InternalError(ApiError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


class HashingError(InternalError):
    """Raised when the password hasher runs out of entropy or memory."""

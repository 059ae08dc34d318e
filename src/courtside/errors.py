"""Error taxonomy surfaced through the API error envelope."""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status and error code."""

    status_code = 500
    code = "SERVER_ERROR"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(ApiError):
    status_code = 400
    code = "VALIDATION"


class InvalidJson(ValidationError):
    code = "INVALID_JSON"


class SignupFailed(ValidationError):
    code = "SIGNUP_FAILED"


class Unauthorized(ApiError):
    status_code = 401
    code = "UNAUTHORIZED"


class InvalidCredentials(Unauthorized):
    code = "INVALID_CREDENTIALS"


class Forbidden(ApiError):
    status_code = 403
    code = "INVALID_TOKEN"


class NotFound(ApiError):
    status_code = 404
    code = "NOT_FOUND"


class StoreFailure(ApiError):
    """The record store call failed; the message is passed through as-is."""

    status_code = 500
    code = "DB"


class ConfigurationError(ApiError):
    status_code = 500
    code = "CONFIG"

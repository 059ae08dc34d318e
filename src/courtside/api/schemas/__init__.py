"""Pydantic models for API I/O."""

from .auth import LoginRequest, SignupRequest
from .envelope import Envelope, ErrorBody, ErrorEnvelope

__all__ = [
    "Envelope",
    "ErrorBody",
    "ErrorEnvelope",
    "LoginRequest",
    "SignupRequest",
]

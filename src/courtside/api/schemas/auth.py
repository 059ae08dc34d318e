from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from courtside.auth import check_password_strength


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SignupRequest(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str
    name: str = Field(..., min_length=2, max_length=100)

    @field_validator("password")
    @classmethod
    def _strong_password(cls, value: str) -> str:
        check_password_strength(value)
        return value


class LoginRequest(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=8, max_length=100)

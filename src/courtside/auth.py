"""Bearer-token identity: JWT issuance/verification and password accounts."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from passlib.context import CryptContext

from courtside.errors import Forbidden, InvalidCredentials, SignupFailed, Unauthorized
from courtside.persistence import RecordStore


logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
USERS_TABLE = "users"
DEFAULT_ROLE = "USER"

_PASSWORD_RULES = (
    (re.compile(r"[A-Z]"), "password must contain an upper-case letter"),
    (re.compile(r"[a-z]"), "password must contain a lower-case letter"),
    (re.compile(r"[0-9]"), "password must contain a digit"),
)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


@dataclass(frozen=True)
class Identity:
    subject_id: str
    email: str
    role: str = DEFAULT_ROLE

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.subject_id, "email": self.email, "role": self.role}


def check_password_strength(password: str) -> None:
    if not 8 <= len(password) <= 100:
        raise ValueError("password length must be between 8 and 100 characters")
    for pattern, message in _PASSWORD_RULES:
        if not pattern.search(password):
            raise ValueError(message)


class IdentityProvider:
    def __init__(self, store: RecordStore, *, secret: str, token_ttl_hours: int = 3):
        self._store = store
        self._secret = secret
        self._ttl = timedelta(hours=token_ttl_hours)

    def issue_token(self, subject_id: str, email: str, *, now: datetime | None = None) -> str:
        issued = now or datetime.now(timezone.utc)
        payload = {
            "sub": subject_id,
            "email": email,
            "role": DEFAULT_ROLE,
            "iat": issued,
            "exp": issued + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify_token(self, token: str | None) -> Identity:
        if not token:
            raise Unauthorized("Authentication required")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except jwt.InvalidTokenError as exc:
            raise Forbidden("Invalid or expired token", str(exc)) from exc
        subject = payload.get("sub")
        email = payload.get("email")
        if not subject or not email:
            raise Forbidden("Invalid or expired token", "token is missing sub or email")
        return Identity(subject_id=str(subject), email=str(email), role=str(payload.get("role", DEFAULT_ROLE)))

    def _find_user(self, email: str) -> Dict[str, Any] | None:
        wanted = email.strip().lower()
        for user in self._store.list_all(USERS_TABLE, "created_at"):
            if str(user.get("email", "")).lower() == wanted:
                return user
        return None

    def signup(self, email: str, password: str, name: str) -> tuple[str, Dict[str, str]]:
        if self._find_user(email) is not None:
            raise SignupFailed("User already registered")
        user = self._store.insert(
            USERS_TABLE,
            {
                "email": email.strip().lower(),
                "name": name,
                "password_hash": pwd_context.hash(password),
            },
        )
        logger.info("Registered user %s", user["id"])
        token = self.issue_token(user["id"], user["email"])
        return token, {"id": user["id"], "email": user["email"], "name": name}

    def login(self, email: str, password: str) -> tuple[str, Dict[str, str]]:
        user = self._find_user(email)
        password_hash = (user or {}).get("password_hash")
        if not password_hash or not pwd_context.verify(password, password_hash):
            logger.info("Rejected login for %s", email)
            raise InvalidCredentials("Invalid login credentials")
        token = self.issue_token(user["id"], user["email"])
        return token, {"id": user["id"], "email": user["email"]}

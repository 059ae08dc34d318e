"""Environment-driven settings for the API service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Tuple

from courtside.errors import ConfigurationError


logger = logging.getLogger(__name__)

_ENV_ENV = "COURTSIDE_ENV"
_DB_PATH_ENV = "COURTSIDE_DB_PATH"
_API_PREFIX_ENV = "COURTSIDE_API_PREFIX"
_JWT_SECRET_ENV = "COURTSIDE_JWT_SECRET"
_TOKEN_TTL_ENV = "COURTSIDE_TOKEN_TTL_HOURS"
_CORS_ORIGINS_ENV = "COURTSIDE_CORS_ORIGINS"
_PORT_ENV = "COURTSIDE_PORT"
_LOG_LEVEL_ENV = "COURTSIDE_LOG_LEVEL"

DEFAULT_JWT_SECRET = "changeme"
_TOKEN_TTL_DEFAULT = 3
_PORT_DEFAULT = 3000


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(env: Mapping[str, str], name: str, default: int, *, min_value: int | None = None) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def normalize_prefix(prefix: str) -> str:
    """Ensure the API base path starts with ``/`` and has no trailing slashes."""
    if not prefix.startswith("/"):
        prefix = f"/{prefix}"
    if len(prefix) > 1:
        prefix = prefix.rstrip("/") or "/"
    return prefix


@dataclass(frozen=True)
class Settings:
    environment: str = "development"
    db_path: str = "courtside.sqlite"
    api_prefix: str = "/api"
    jwt_secret: str = DEFAULT_JWT_SECRET
    token_ttl_hours: int = _TOKEN_TTL_DEFAULT
    cors_origins: Tuple[str, ...] = ("*",)
    port: int = _PORT_DEFAULT
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate(self) -> "Settings":
        if self.is_production and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ConfigurationError(f"{_JWT_SECRET_ENV} must be set in production")
        if not self.db_path:
            raise ConfigurationError(f"{_DB_PATH_ENV} must not be empty")
        return self


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env
    origins = tuple(
        origin.strip()
        for origin in _env_str(env, _CORS_ORIGINS_ENV, "*").split(",")
        if origin.strip()
    )
    return Settings(
        environment=_env_str(env, _ENV_ENV, "development"),
        db_path=_env_str(env, _DB_PATH_ENV, "courtside.sqlite"),
        api_prefix=normalize_prefix(_env_str(env, _API_PREFIX_ENV, "/api")),
        jwt_secret=_env_str(env, _JWT_SECRET_ENV, DEFAULT_JWT_SECRET),
        token_ttl_hours=_env_int(env, _TOKEN_TTL_ENV, _TOKEN_TTL_DEFAULT, min_value=1),
        cors_origins=origins or ("*",),
        port=_env_int(env, _PORT_ENV, _PORT_DEFAULT, min_value=1),
        log_level=_env_str(env, _LOG_LEVEL_ENV, "INFO").upper(),
    )

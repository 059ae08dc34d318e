"""REST API for player records and their performance series."""

from __future__ import annotations

import logging
import time
import traceback
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.exceptions import HTTPException as StarletteHTTPException

from courtside.api.schemas import Envelope, ErrorBody, ErrorEnvelope, LoginRequest, SignupRequest
from courtside.auth import Identity, IdentityProvider
from courtside.config import Settings, load_settings
from courtside.coordinator import PlayerCoordinator, TurfDirectory, utc_now
from courtside.coordinator.service import Clock
from courtside.errors import ApiError
from courtside.models import PlayerCreate, PlayerUpdate
from courtside.persistence import RecordStore, open_store
from courtside.series import series_update_from


logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}

ROUTE_INDEX = {
    "auth": ["POST /auth/signup", "POST /auth/login", "GET /me"],
    "players": [
        "GET /players",
        "POST /players",
        "GET /players/:id?days=30",
        "PUT /players/:id",
        "DELETE /players/:id",
    ],
    "turfs_readonly": ["GET /turfs", "GET /turfs/:id"],
    "docs": "/docs",
}


def ok(data: Any = None, message: str = "OK", status_code: int = 200) -> JSONResponse:
    body = Envelope(message=message, data=data)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def fail(status_code: int, code: str, message: str, details: Any = None) -> JSONResponse:
    body = ErrorEnvelope(error=ErrorBody(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


def _describe_validation_error(exc: RequestValidationError) -> tuple[str, str]:
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return "INVALID_JSON", "Request body is not valid JSON format"
    if not errors:
        return "VALIDATION", "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = str(first.get("msg", "Invalid request"))
    if loc:
        message = f"{'.'.join(loc)}: {message}"
    return "VALIDATION", message


def create_app(
    settings: Settings | None = None,
    *,
    store: RecordStore | None = None,
    clock: Clock = utc_now,
) -> FastAPI:
    settings = (settings or load_settings()).validate()
    prefix = "" if settings.api_prefix == "/" else settings.api_prefix
    store = store if store is not None else open_store(settings.db_path)
    players = PlayerCoordinator(store, clock=clock)
    turfs = TurfDirectory(store)
    identity = IdentityProvider(store, secret=settings.jwt_secret, token_ttl_hours=settings.token_ttl_hours)
    started = time.monotonic()

    app = FastAPI(
        title="courtside",
        description="Auth + Players (with nested performances) + Turfs (read-only)",
        docs_url=f"{prefix}/docs",
        openapi_url=f"{prefix}/openapi.json",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.identity = identity
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        max_age=86400,
    )

    @app.exception_handler(ApiError)
    async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
        return fail(exc.status_code, exc.code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        code, message = _describe_validation_error(exc)
        return fail(400, code, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return fail(404, "NOT_FOUND", f"Route {request.method} {request.url.path} not found")
        code = _HTTP_ERROR_CODES.get(exc.status_code, "SERVER_ERROR")
        return fail(exc.status_code, code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error: %s", exc)
        details = None if settings.is_production else "".join(traceback.format_exception(exc))
        return fail(500, "SERVER_ERROR", "Something went wrong", details)

    bearer = HTTPBearer(auto_error=False)

    def current_identity(credentials: HTTPAuthorizationCredentials | None = Depends(bearer)) -> Identity:
        return identity.verify_token(credentials.credentials if credentials else None)

    @app.get("/health", response_class=PlainTextResponse)
    async def bare_health() -> str:
        return "OK"

    router = APIRouter(prefix=prefix)

    @router.get("/health")
    async def health():
        return ok(
            {
                "status": "healthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "environment": settings.environment,
                "uptime": time.monotonic() - started,
            }
        )

    @router.get("/")
    async def index():
        return ok(ROUTE_INDEX, "courtside API")

    @router.post("/auth/signup")
    def signup(body: SignupRequest):
        token, user = identity.signup(body.email, body.password, body.name)
        return ok({"token": token, "user": user}, "Signup successful")

    @router.post("/auth/login")
    def login(body: LoginRequest):
        token, user = identity.login(body.email, body.password)
        return ok({"token": token, "user": user}, "Login successful")

    @router.get("/me")
    def me(caller: Identity = Depends(current_identity)):
        return ok(caller.to_dict(), "Me")

    @router.get("/players")
    def list_players(_caller: Identity = Depends(current_identity)):
        return ok([record.to_response() for record in players.list()], "Players fetched")

    @router.post("/players")
    def create_player(body: PlayerCreate, _caller: Identity = Depends(current_identity)):
        record = players.create(body)
        return ok(record.to_response(), "Player created", status_code=201)

    @router.get("/players/{player_id}")
    def get_player(
        player_id: str,
        days: int | None = Query(default=None, description="Trailing window in days, clamped to 1-365."),
        _caller: Identity = Depends(current_identity),
    ):
        record = players.get(player_id, window_days=days)
        return ok(record.to_response(), "Player fetched")

    @router.put("/players/{player_id}")
    def update_player(player_id: str, body: PlayerUpdate, _caller: Identity = Depends(current_identity)):
        series_update = series_update_from(body.performances_replace, body.performances_append)
        record = players.update(player_id, body.attribute_patch(), series_update)
        return ok(record.to_response(), "Player updated")

    @router.delete("/players/{player_id}")
    def delete_player(player_id: str, _caller: Identity = Depends(current_identity)):
        existed = players.delete(player_id)
        return ok({"deleted": existed}, "Player deleted")

    @router.get("/turfs")
    def list_turfs(_caller: Identity = Depends(current_identity)):
        return ok(turfs.list(), "Turfs fetched")

    @router.get("/turfs/{turf_id}")
    def get_turf(turf_id: str, _caller: Identity = Depends(current_identity)):
        return ok(turfs.get(turf_id), "Turf fetched")

    app.include_router(router)
    return app

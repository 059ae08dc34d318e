"""Command-line interface for running and administering the API service."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from courtside.auth import IdentityProvider
from courtside.config import load_settings
from courtside.persistence import open_store
from courtside.seed import SeedFile


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Player records API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    serve.add_argument("--port", type=int, default=None, help="Port (defaults to COURTSIDE_PORT)")
    serve.add_argument("--reload", action="store_true", help="Reload on source changes")

    token = subparsers.add_parser("issue-token", help="Print a bearer token for a subject")
    token.add_argument("subject", help="Subject id to embed in the token")
    token.add_argument("email", help="Email to embed in the token")

    seed = subparsers.add_parser("seed", help="Load players and turfs from a JSON seed file")
    seed.add_argument("path", type=Path, help="Path to seed JSON")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = load_settings().validate()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command == "serve":
        import uvicorn

        port = args.port or settings.port
        print(f"Server running on http://localhost:{port}{settings.api_prefix}")
        uvicorn.run(
            "courtside.api:create_app",
            factory=True,
            host=args.host,
            port=port,
            reload=args.reload,
            log_level=settings.log_level.lower(),
        )
        return

    store = open_store(settings.db_path)
    if args.command == "issue-token":
        identity = IdentityProvider(store, secret=settings.jwt_secret, token_ttl_hours=settings.token_ttl_hours)
        print(identity.issue_token(args.subject, args.email))
        return

    if args.command == "seed":
        counts = SeedFile.load(args.path).apply(store)
        print(f"Seeded {counts['players']} players and {counts['turfs']} turfs into {settings.db_path}")


if __name__ == "__main__":
    main()

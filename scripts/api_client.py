"""Lightweight REST client for the courtside API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_entries(path: Path | None) -> list[dict]:
    if path is None:
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid performances JSON: {exc}") from exc
    if not isinstance(data, list):
        raise SystemExit("performances file must contain a JSON array")
    return data


def _print(resp: httpx.Response) -> None:
    payload = resp.json()
    if not payload.get("success"):
        error = payload.get("error", {})
        raise SystemExit(f"{resp.status_code} {error.get('code')}: {error.get('message')}")
    print(json.dumps(payload["data"], indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the courtside REST API")
    parser.add_argument("base_url", help="Base URL including prefix, e.g. http://localhost:3000/api")
    parser.add_argument("--token", help="Bearer token; obtained via --login when omitted")
    parser.add_argument("--login", nargs=2, metavar=("EMAIL", "PASSWORD"), help="Log in and use the returned token")
    parser.add_argument("--list", action="store_true", help="List players and exit")
    parser.add_argument("--get", metavar="PLAYER_ID", help="Fetch a player")
    parser.add_argument("--days", type=int, help="Trailing window for --get")
    parser.add_argument("--append", metavar="PLAYER_ID", help="Append performances to a player")
    parser.add_argument("--replace", metavar="PLAYER_ID", help="Replace a player's performances")
    parser.add_argument("--performances", type=Path, help="JSON array of performance entries")
    parser.add_argument("--delete", metavar="PLAYER_ID", help="Delete a player")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url.rstrip("/")) as client:
        token = args.token
        if args.login:
            resp = client.post("/auth/login", json={"email": args.login[0], "password": args.login[1]})
            if resp.status_code != 200:
                raise SystemExit(f"login failed: {resp.json().get('error', {}).get('message')}")
            token = resp.json()["data"]["token"]
        if not token:
            raise SystemExit("a --token or --login is required")
        client.headers["Authorization"] = f"Bearer {token}"

        if args.list:
            _print(client.get("/players"))
        if args.get:
            params = {"days": args.days} if args.days is not None else None
            _print(client.get(f"/players/{args.get}", params=params))
        if args.append or args.replace:
            entries = load_entries(args.performances)
            if args.append:
                _print(client.put(f"/players/{args.append}", json={"performances_append": entries}))
            else:
                _print(client.put(f"/players/{args.replace}", json={"performances_replace": entries}))
        if args.delete:
            _print(client.delete(f"/players/{args.delete}"))


if __name__ == "__main__":
    main()

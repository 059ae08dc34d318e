"""SQLite-backed record store: one table per collection, body kept as JSON."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from courtside.errors import StoreFailure

from .base import TABLES, sort_records, utc_timestamp


logger = logging.getLogger(__name__)

_RESERVED = ("id", "created_at", "updated_at")


class SqliteRecordStore:
    """Simple SQLite-backed store for player documents."""

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        if isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path: Path | str = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(self.db_path)
            else:
                conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        except (OSError, sqlite3.Error) as exc:
            logger.error("Unable to open database %s: %s", self.db_path, exc)
            raise StoreFailure(str(exc)) from exc
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        for table in TABLES:
            self._execute(
                f"""
                CREATE TABLE IF NOT EXISTS {table} (
                    id TEXT PRIMARY KEY,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    body_json TEXT NOT NULL
                )
                """
            )

    def _execute(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        conn = self._connect()
        try:
            with conn:
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            logger.error("Store call failed: %s", exc)
            raise StoreFailure(str(exc)) from exc
        finally:
            conn.close()

    @staticmethod
    def _table(table: str) -> str:
        if table not in TABLES:
            raise StoreFailure(f"Unknown table: {table}")
        return table

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> Dict[str, Any]:
        record = json.loads(row["body_json"])
        record["id"] = row["id"]
        record["created_at"] = row["created_at"]
        record["updated_at"] = row["updated_at"]
        return record

    @staticmethod
    def _body(record: Dict[str, Any]) -> str:
        return json.dumps({key: value for key, value in record.items() if key not in _RESERVED})

    def find_by_id(self, table: str, record_id: str) -> Optional[Dict[str, Any]]:
        rows = self._execute(f"SELECT * FROM {self._table(table)} WHERE id = ?", (record_id,))
        if not rows:
            return None
        return self._row_to_record(rows[0])

    def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]:
        record_id = str(record.get("id") or uuid4().hex)
        created_at = record.get("created_at") or utc_timestamp()
        updated_at = record.get("updated_at") or created_at
        self._execute(
            f"INSERT INTO {self._table(table)} (id, created_at, updated_at, body_json) VALUES (?, ?, ?, ?)",
            (record_id, created_at, updated_at, self._body(record)),
        )
        stored = self.find_by_id(table, record_id)
        if stored is None:  # pragma: no cover
            raise StoreFailure(f"Record {record_id} not found after insert")
        return stored

    def update(self, table: str, record_id: str, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        existing = self.find_by_id(table, record_id)
        if existing is None:
            return None
        merged = {**existing, **patch}
        updated_at = patch.get("updated_at") or utc_timestamp()
        rows = self._execute(
            f"UPDATE {self._table(table)} SET updated_at = ?, body_json = ? WHERE id = ? RETURNING id",
            (updated_at, self._body(merged), record_id),
        )
        if not rows:
            return None
        return self.find_by_id(table, record_id)

    def delete(self, table: str, record_id: str) -> bool:
        rows = self._execute(f"DELETE FROM {self._table(table)} WHERE id = ? RETURNING id", (record_id,))
        return bool(rows)

    def list_all(self, table: str, order_by: str = "created_at", descending: bool = True) -> List[Dict[str, Any]]:
        rows = self._execute(f"SELECT * FROM {self._table(table)}")
        return sort_records([self._row_to_record(row) for row in rows], order_by, descending=descending)

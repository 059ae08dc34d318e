"""Process-local record store used for tests and ``:memory:`` deployments."""

from __future__ import annotations

import copy
import threading
from typing import Any, Dict, List, Optional
from uuid import uuid4

from courtside.errors import StoreFailure

from .base import sort_records, utc_timestamp


class InMemoryRecordStore:
    def __init__(self) -> None:
        self._tables: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def _rows(self, table: str) -> Dict[str, Dict[str, Any]]:
        return self._tables.setdefault(table, {})

    def find_by_id(self, table: str, record_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._rows(table).get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]:
        stored = copy.deepcopy(record)
        stored["id"] = str(record.get("id") or uuid4().hex)
        stored["created_at"] = record.get("created_at") or utc_timestamp()
        stored["updated_at"] = record.get("updated_at") or stored["created_at"]
        with self._lock:
            rows = self._rows(table)
            if stored["id"] in rows:
                raise StoreFailure(f"duplicate key value violates unique constraint on {table}.id")
            rows[stored["id"]] = stored
        return copy.deepcopy(stored)

    def update(self, table: str, record_id: str, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            rows = self._rows(table)
            existing = rows.get(record_id)
            if existing is None:
                return None
            merged = {**existing, **copy.deepcopy(patch)}
            merged["id"] = record_id
            merged["created_at"] = existing["created_at"]
            merged["updated_at"] = patch.get("updated_at") or utc_timestamp()
            rows[record_id] = merged
            return copy.deepcopy(merged)

    def delete(self, table: str, record_id: str) -> bool:
        with self._lock:
            return self._rows(table).pop(record_id, None) is not None

    def list_all(self, table: str, order_by: str = "created_at", descending: bool = True) -> List[Dict[str, Any]]:
        with self._lock:
            records = [copy.deepcopy(record) for record in self._rows(table).values()]
        return sort_records(records, order_by, descending=descending)

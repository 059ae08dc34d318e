"""Store protocol shared by the SQLite and in-memory implementations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol


TABLES = ("players", "turfs", "users")


class RecordStore(Protocol):
    """Capability set the coordinator and identity layers depend on.

    Stores assign ``id``, ``created_at`` and ``updated_at`` on insert and
    refresh ``updated_at`` on update unless the patch carries one.
    """

    def find_by_id(self, table: str, record_id: str) -> Optional[Dict[str, Any]]: ...

    def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]: ...

    def update(self, table: str, record_id: str, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...

    def delete(self, table: str, record_id: str) -> bool: ...

    def list_all(self, table: str, order_by: str = "created_at", descending: bool = True) -> List[Dict[str, Any]]: ...


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def sort_records(records: List[Dict[str, Any]], order_by: str, *, descending: bool) -> List[Dict[str, Any]]:
    # records without the key go last in either direction
    present = [record for record in records if record.get(order_by) is not None]
    missing = [record for record in records if record.get(order_by) is None]
    present.sort(key=lambda record: record[order_by], reverse=descending)
    return present + missing

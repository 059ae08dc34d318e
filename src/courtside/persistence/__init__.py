"""Persistence layer for player, turf and user records."""

from .base import TABLES, RecordStore, sort_records
from .memory import InMemoryRecordStore
from .sqlite import SqliteRecordStore


def open_store(db_path: str) -> RecordStore:
    if db_path == ":memory:":
        return InMemoryRecordStore()
    return SqliteRecordStore(db_path)


__all__ = [
    "InMemoryRecordStore",
    "RecordStore",
    "SqliteRecordStore",
    "TABLES",
    "open_store",
    "sort_records",
]

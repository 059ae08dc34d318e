"""Player record coordinator: sequences store access around the series engine."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from courtside.errors import NotFound, ValidationError
from courtside.models import PlayerCreate, PlayerRecord
from courtside.persistence import RecordStore
from courtside.series import NO_CHANGE, NoChange, SeriesUpdate, apply_series_update, windowed_view


logger = logging.getLogger(__name__)

PLAYERS_TABLE = "players"
TURFS_TABLE = "turfs"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PlayerCoordinator:
    """Create, read, update and delete players against an injected store."""

    def __init__(self, store: RecordStore, *, clock: Clock = utc_now):
        self._store = store
        self._clock = clock

    def create(self, payload: PlayerCreate) -> PlayerRecord:
        document = payload.attributes()
        document["performances"] = [entry.to_document() for entry in payload.performances]
        stored = self._store.insert(PLAYERS_TABLE, document)
        logger.info("Created player %s with %d performances", stored["id"], len(payload.performances))
        return PlayerRecord.from_document(stored)

    def list(self) -> List[PlayerRecord]:
        rows = self._store.list_all(PLAYERS_TABLE, "created_at")
        return [PlayerRecord.from_document(row) for row in rows]

    def get(self, player_id: str, window_days: Optional[int] = None) -> PlayerRecord:
        record = self._load(player_id)
        if window_days is None:
            return record
        view = windowed_view(record.performances, window_days, self._clock())
        return record.model_copy(update={"performances": view})

    def update(
        self,
        player_id: str,
        attribute_patch: Optional[Mapping[str, Any]] = None,
        series_update: SeriesUpdate = NO_CHANGE,
    ) -> PlayerRecord:
        """Apply an attribute patch and/or a series change.

        Last writer wins: the stored document is read, modified and written
        back without a version check.
        """
        if not attribute_patch and isinstance(series_update, NoChange):
            raise ValidationError("Update must include attributes, performances_replace or performances_append")

        existing = self._load(player_id)
        patch: Dict[str, Any] = dict(attribute_patch or {})
        if not isinstance(series_update, NoChange):
            series = apply_series_update(existing.performances, series_update)
            patch["performances"] = [entry.to_document() for entry in series]
        patch["updated_at"] = self._clock().isoformat()

        stored = self._store.update(PLAYERS_TABLE, player_id, patch)
        if stored is None:
            raise NotFound("Player was not found")
        logger.info("Updated player %s (%s)", player_id, type(series_update).__name__)
        return PlayerRecord.from_document(stored)

    def delete(self, player_id: str) -> bool:
        """Remove a player and its series; returns whether a record existed."""
        existed = self._store.delete(PLAYERS_TABLE, player_id)
        if existed:
            logger.info("Deleted player %s", player_id)
        else:
            logger.info("Delete requested for missing player %s", player_id)
        return existed

    def _load(self, player_id: str) -> PlayerRecord:
        document = self._store.find_by_id(PLAYERS_TABLE, player_id)
        if document is None:
            raise NotFound("Player not found")
        return PlayerRecord.from_document(document)


class TurfDirectory:
    """Read-only access to turf records."""

    def __init__(self, store: RecordStore):
        self._store = store

    def list(self) -> List[Dict[str, Any]]:
        return self._store.list_all(TURFS_TABLE, "created_at")

    def get(self, turf_id: str) -> Dict[str, Any]:
        record = self._store.find_by_id(TURFS_TABLE, turf_id)
        if record is None:
            raise NotFound("Turf not found")
        return record

"""Load and save JSON seed files of players and turfs."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from courtside.coordinator import TURFS_TABLE, PlayerCoordinator
from courtside.models import PlayerCreate
from courtside.persistence import RecordStore


logger = logging.getLogger(__name__)


@dataclass
class SeedFile:
    players: List[PlayerCreate] = field(default_factory=list)
    turfs: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> "SeedFile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            players=[PlayerCreate.model_validate(item) for item in data.get("players", [])],
            turfs=[dict(item) for item in data.get("turfs", [])],
        )

    def save(self, path: Path) -> None:
        payload = {
            "players": [player.model_dump(mode="json") for player in self.players],
            "turfs": self.turfs,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def apply(self, store: RecordStore) -> Dict[str, int]:
        coordinator = PlayerCoordinator(store)
        for player in self.players:
            coordinator.create(player)
        for turf in self.turfs:
            store.insert(TURFS_TABLE, turf)
        logger.info("Seeded %d players and %d turfs", len(self.players), len(self.turfs))
        return {"players": len(self.players), "turfs": len(self.turfs)}

"""Coordination of store access around the performance-series engine."""

from .service import PLAYERS_TABLE, TURFS_TABLE, PlayerCoordinator, TurfDirectory, utc_now

__all__ = ["PLAYERS_TABLE", "TURFS_TABLE", "PlayerCoordinator", "TurfDirectory", "utc_now"]

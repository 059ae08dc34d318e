"""Canonical models shared across the engine, coordinator and API layers."""

from .performance import COUNTING_FIELDS, DERIVED_FIELDS, PERCENTAGE_FIELDS, PerformanceEntry
from .player import ATTRIBUTE_FIELDS, PlayerCreate, PlayerRecord, PlayerUpdate

__all__ = [
    "ATTRIBUTE_FIELDS",
    "COUNTING_FIELDS",
    "DERIVED_FIELDS",
    "PERCENTAGE_FIELDS",
    "PerformanceEntry",
    "PlayerCreate",
    "PlayerRecord",
    "PlayerUpdate",
]

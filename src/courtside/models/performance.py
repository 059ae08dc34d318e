"""Performance entry model shared by the series engine and the API layer."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


COUNTING_FIELDS = (
    "points",
    "assists",
    "rebounds",
    "steals",
    "blocks",
    "turnovers",
    "fouls",
    "minutes_played",
)
PERCENTAGE_FIELDS = ("field_goal_pct", "three_point_pct", "free_throw_pct")
DERIVED_FIELDS = ("efficiency_rating", "overall_score")


class PerformanceEntry(BaseModel):
    """One observation for one calendar date.

    ``model_fields_set`` records which fields the caller actually supplied;
    merge-append relies on it to overwrite only those fields.
    """

    performance_date: date
    points: int = Field(default=0, ge=0, strict=True)
    assists: int = Field(default=0, ge=0, strict=True)
    rebounds: int = Field(default=0, ge=0, strict=True)
    steals: int = Field(default=0, ge=0, strict=True)
    blocks: int = Field(default=0, ge=0, strict=True)
    turnovers: int = Field(default=0, ge=0, strict=True)
    fouls: int = Field(default=0, ge=0, strict=True)
    minutes_played: int = Field(default=0, ge=0, strict=True)
    # strict floats still take ints but reject booleans and numeric strings
    field_goal_pct: float | None = Field(default=None, ge=0.0, le=100.0, strict=True)
    three_point_pct: float | None = Field(default=None, ge=0.0, le=100.0, strict=True)
    free_throw_pct: float | None = Field(default=None, ge=0.0, le=100.0, strict=True)
    efficiency_rating: float | None = Field(default=None, strict=True, allow_inf_nan=False)
    overall_score: float | None = Field(default=None, ge=0.0, le=10.0, strict=True)

    model_config = ConfigDict(frozen=True)

    @field_validator("performance_date", mode="before")
    @classmethod
    def _strict_iso_date(cls, value: object) -> object:
        if isinstance(value, str) and (len(value) != 10 or value[4] != "-" or value[7] != "-"):
            raise ValueError("performance_date must match YYYY-MM-DD")
        return value

    @field_validator("efficiency_rating", "overall_score")
    @classmethod
    def _two_decimals(cls, value: float | None) -> float | None:
        if value is None:
            return None
        return round(value, 2)

    def supplied_fields(self) -> dict[str, object]:
        """Fields the caller set explicitly, excluding the date key."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "performance_date"
        }

    def to_document(self) -> dict:
        return self.model_dump(mode="json")

"""Player request and record models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, field_validator, model_validator

from .performance import PerformanceEntry


ATTRIBUTE_FIELDS = (
    "name",
    "position",
    "age",
    "height_cm",
    "weight_kg",
    "nationality",
    "image_url",
    "is_active",
    "notes",
)

_URL_ADAPTER = TypeAdapter(AnyUrl)


class PlayerAttributes(BaseModel):
    position: str | None = Field(default=None, max_length=10)
    age: int | None = Field(default=None, ge=0)
    height_cm: int | None = Field(default=None, ge=0)
    weight_kg: int | None = Field(default=None, ge=0)
    nationality: str | None = Field(default=None, max_length=100)
    image_url: str | None = None
    notes: str | None = None

    @field_validator("image_url")
    @classmethod
    def _check_image_url(cls, value: str | None) -> str | None:
        if value in (None, ""):
            return value
        _URL_ADAPTER.validate_python(value)
        return value


class PlayerCreate(PlayerAttributes):
    name: str = Field(..., min_length=2, max_length=200)
    is_active: bool = True
    performances: List[PerformanceEntry] = Field(default_factory=list)

    def attributes(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", include=set(ATTRIBUTE_FIELDS))


class PlayerUpdate(PlayerAttributes):
    """Partial update body.

    Only fields present in the request body are applied. ``performances_replace``
    and ``performances_append`` are mutually exclusive.
    """

    name: str | None = Field(default=None, min_length=2, max_length=200)
    is_active: bool | None = None
    performances_replace: List[PerformanceEntry] | None = None
    performances_append: List[PerformanceEntry] | None = None

    @model_validator(mode="after")
    def _check_fields(self) -> "PlayerUpdate":
        if not self.model_fields_set:
            raise ValueError("at least one field must be provided")
        for name in ("name", "is_active"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        if self.performances_replace is not None and self.performances_append is not None:
            raise ValueError("performances_replace and performances_append cannot be combined")
        return self

    def attribute_patch(self) -> Dict[str, Any]:
        fields = set(ATTRIBUTE_FIELDS) & self.model_fields_set
        return self.model_dump(mode="json", include=fields)


class PlayerRecord(BaseModel):
    id: str
    name: str
    position: str | None = None
    age: int | None = None
    height_cm: int | None = None
    weight_kg: int | None = None
    nationality: str | None = None
    image_url: str | None = None
    is_active: bool = True
    notes: str | None = None
    performances: List[PerformanceEntry] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator("performances", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "PlayerRecord":
        return cls.model_validate(document)

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

from datetime import date

import pytest
from pydantic import ValidationError

from courtside.models import PerformanceEntry, PlayerCreate, PlayerRecord, PlayerUpdate


def test_performance_entry_is_frozen():
    entry = PerformanceEntry(performance_date="2025-01-01", points=20)

    assert entry.performance_date == date(2025, 1, 1)
    assert entry.assists == 0

    with pytest.raises((TypeError, ValidationError)):
        entry.points = 5  # type: ignore[misc]


def test_performance_entry_tracks_supplied_fields():
    entry = PerformanceEntry(performance_date="2025-01-01", assists=7, field_goal_pct=None)

    assert entry.supplied_fields() == {"assists": 7, "field_goal_pct": None}


@pytest.mark.parametrize(
    "fields",
    [
        {"performance_date": "2025/01/01"},
        {"performance_date": "2025-1-1"},
        {"performance_date": "2025-01-01", "points": -1},
        {"performance_date": "2025-01-01", "three_point_pct": 100.5},
        {"performance_date": "2025-01-01", "overall_score": 11},
        {"performance_date": "2025-01-01", "points": True},
        {"performance_date": "2025-01-01", "assists": "7"},
        {"performance_date": "2025-01-01", "field_goal_pct": False},
        {"performance_date": "2025-01-01", "efficiency_rating": float("nan")},
        {"performance_date": "2025-01-01", "efficiency_rating": float("inf")},
        {"points": 3},
    ],
)
def test_performance_entry_rejects_bad_shapes(fields):
    with pytest.raises(ValidationError):
        PerformanceEntry(**fields)


def test_performance_entry_rejects_json_booleans():
    with pytest.raises(ValidationError):
        PerformanceEntry.model_validate_json('{"performance_date": "2025-01-01", "points": true}')


def test_percentages_accept_whole_numbers():
    entry = PerformanceEntry(performance_date="2025-01-01", field_goal_pct=50, overall_score=7)

    assert entry.field_goal_pct == 50.0
    assert entry.overall_score == 7.0


def test_derived_fields_round_to_two_decimals():
    entry = PerformanceEntry(performance_date="2025-01-01", efficiency_rating=17.456, overall_score=8.123)

    assert entry.efficiency_rating == 17.46
    assert entry.overall_score == 8.12


def test_performance_document_uses_iso_date():
    doc = PerformanceEntry(performance_date="2025-01-01", points=20).to_document()

    assert doc["performance_date"] == "2025-01-01"
    assert doc["points"] == 20
    assert doc["field_goal_pct"] is None


def test_player_create_defaults():
    payload = PlayerCreate(name="Jalen Test")

    assert payload.is_active is True
    assert payload.performances == []
    assert payload.attributes()["name"] == "Jalen Test"
    assert "performances" not in payload.attributes()


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "J"},
        {"name": "Valid Name", "position": "POINT GUARD"},
        {"name": "Valid Name", "age": -3},
        {"name": "Valid Name", "image_url": "not a url"},
    ],
)
def test_player_create_validation(fields):
    with pytest.raises(ValidationError):
        PlayerCreate(**fields)


def test_player_create_allows_empty_optional_strings():
    payload = PlayerCreate(name="Valid Name", position="", image_url="", nationality=None)

    assert payload.image_url == ""


def test_player_update_requires_a_field():
    with pytest.raises(ValidationError):
        PlayerUpdate()


def test_player_update_rejects_both_series_modes():
    entry = {"performance_date": "2025-01-01"}
    with pytest.raises(ValidationError):
        PlayerUpdate(performances_replace=[entry], performances_append=[entry])


def test_player_update_rejects_null_name():
    with pytest.raises(ValidationError):
        PlayerUpdate(name=None)


def test_player_update_patch_only_contains_sent_fields():
    update = PlayerUpdate(notes=None, age=31, performances_append=[{"performance_date": "2025-01-01"}])

    assert update.attribute_patch() == {"notes": None, "age": 31}


def test_player_record_tolerates_missing_series():
    record = PlayerRecord.from_document(
        {
            "id": "abc",
            "name": "Stored Player",
            "performances": None,
            "created_at": "2025-01-01T00:00:00+00:00",
            "updated_at": "2025-01-01T00:00:00+00:00",
        }
    )

    assert record.performances == []
    assert record.to_response()["performances"] == []

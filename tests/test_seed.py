import json

import pytest
from pydantic import ValidationError

from courtside.coordinator import PlayerCoordinator
from courtside.seed import SeedFile


def test_seed_file_loads_and_applies(tmp_path, store):
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps(
            {
                "players": [
                    {
                        "name": "Seeded Guard",
                        "position": "SG",
                        "performances": [{"performance_date": "2025-03-01", "points": 31}],
                    }
                ],
                "turfs": [{"name": "Main Arena", "capacity": 18000}],
            }
        ),
        encoding="utf-8",
    )

    counts = SeedFile.load(path).apply(store)

    assert counts == {"players": 1, "turfs": 1}
    [player] = PlayerCoordinator(store).list()
    assert player.performances[0].points == 31
    assert store.list_all("turfs")[0]["capacity"] == 18000


def test_seed_file_validates_players(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"players": [{"name": "X"}]}), encoding="utf-8")

    with pytest.raises(ValidationError):
        SeedFile.load(path)


def test_seed_file_save_writes_json(tmp_path):
    path = tmp_path / "out.json"
    SeedFile(turfs=[{"name": "Annex"}]).save(path)

    assert json.loads(path.read_text(encoding="utf-8")) == {"players": [], "turfs": [{"name": "Annex"}]}

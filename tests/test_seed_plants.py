"""Tests for the catalog seeding script."""

import asyncio
import json

import pytest

from seed_plants import load_plants, seed


@pytest.fixture()
def plants_file(tmp_path):
    path = tmp_path / "plants.json"
    path.write_text(json.dumps([
        {"id": "P1", "name": "Monstera", "category": "Indoor", "price": 25, "quantity": 5},
        {"name": "Aloe Vera", "category": "Succulent", "price": 9.5, "quantity": 12},
    ]))
    return path


class TestLoadPlants:
    def test_loads_and_validates_records(self, plants_file):
        plants = load_plants(plants_file)

        assert [plant.name for plant in plants] == ["Monstera", "Aloe Vera"]
        assert plants[0].id == "P1"
        assert plants[1].id is None

    def test_rejects_non_array(self, tmp_path):
        path = tmp_path / "plants.json"
        path.write_text(json.dumps({"name": "Monstera"}))

        with pytest.raises(ValueError):
            load_plants(path)


class TestSeed:
    def test_seeded_plants_are_listed(self, client, plants_file):
        inserted = asyncio.run(seed(load_plants(plants_file)))

        assert inserted == 2
        names = sorted(plant["name"] for plant in client.get("/plants").json())
        assert names == ["Aloe Vera", "Monstera"]

    def test_skip_existing(self, client, plants_file):
        asyncio.run(seed(load_plants(plants_file)))

        inserted = asyncio.run(seed(load_plants(plants_file)[:1], skip_existing=True))

        assert inserted == 0
        assert client.get("/plant/P1").json()["quantity"] == 5

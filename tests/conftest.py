import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# Settings are read at import time, so configure the environment before any
# app module is imported
_db_dir = Path(tempfile.mkdtemp(prefix="plantnet-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_db_dir / 'plantnet.db'}"
os.environ["ACCESS_TOKEN_SECRET"] = "test-secret-0123456789abcdef0123456789abcdef"
os.environ["ENVIRONMENT"] = "test"

from fastapi.testclient import TestClient  # noqa: E402

CUSTOMER_EMAIL = "buyer@example.com"


@pytest.fixture()
def client():
    from app.core.database import drop_db
    from main import app

    with TestClient(app) as c:
        yield c

    asyncio.run(drop_db())


@pytest.fixture()
def auth_client(client):
    """A client carrying a valid session cookie."""
    response = client.post("/jwt", json={"email": CUSTOMER_EMAIL})
    assert response.status_code == 200
    return client


@pytest.fixture()
def add_plant(auth_client):
    def _add_plant(**fields):
        payload = {
            "name": "Monstera",
            "category": "Indoor",
            "image": "https://example.com/monstera.jpg",
            "price": 25.0,
            "quantity": 10,
            "seller": {"name": "Green Shop", "email": "seller@example.com"},
        }
        payload.update(fields)
        response = auth_client.post("/plants", json=payload)
        assert response.status_code == 200
        return response.json()["inserted_id"]

    return _add_plant


@pytest.fixture()
def add_order(auth_client):
    def _add_order(plant_id, email=CUSTOMER_EMAIL, **fields):
        payload = {
            "customer": {"name": "Buyer", "email": email},
            "plantId": plant_id,
            "price": 25.0,
            "quantity": 1,
            "seller": "seller@example.com",
            "address": "12 Fern Street",
        }
        payload.update(fields)
        response = auth_client.post("/order", json=payload)
        assert response.status_code == 200
        return response.json()["inserted_id"]

    return _add_order

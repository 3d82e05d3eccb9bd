import os

# Cheap hashing and quiet logs; must be set before app modules read settings.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin-password"

import pytest
from fastapi.testclient import TestClient

from app.db.mock_db import MemoryStore
from app.db.seed import seed_data
from app.main import create_app


@pytest.fixture
def store():
    store = MemoryStore()
    seed_data(store)
    return store


@pytest.fixture
def empty_store():
    return MemoryStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as client:
        yield client


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/login/json", json={"username": "admin", "password": "admin-password"})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def user_headers(client):
    resp = client.post("/api/register", json={"username": "visitor", "password": "visitor-pass"})
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']['access_token']}"}

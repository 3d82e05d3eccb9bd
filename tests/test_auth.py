import logging
from datetime import timedelta

from app.core import security
from app.core.config import Settings, settings
from app.db.seed import seed_data


def test_register_creates_regular_user(client):
    resp = client.post("/api/register", json={"username": "jamie", "password": "secret-pw"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["user"] == {"id": 2, "username": "jamie", "isAdmin": False}
    assert body["token"]["token_type"] == "bearer"


def test_register_cannot_claim_admin(client):
    resp = client.post("/api/register", json={
        "username": "sneaky", "password": "secret-pw", "isAdmin": True,
    })
    assert resp.status_code == 400


def test_register_duplicate_username(client):
    resp = client.post("/api/register", json={"username": "admin", "password": "whatever"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Username already exists"


def test_register_short_password(client):
    resp = client.post("/api/register", json={"username": "jamie", "password": "123"})
    assert resp.status_code == 400


def test_login_form_and_current_user(client):
    resp = client.post("/api/login", data={"username": "admin", "password": "admin-password"})
    assert resp.status_code == 200
    token = resp.json()["access_token"]

    resp = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "username": "admin", "isAdmin": True}


def test_login_wrong_password(client):
    resp = client.post("/api/login/json", json={"username": "admin", "password": "nope"})
    assert resp.status_code == 400
    resp = client.post("/api/login/json", json={"username": "ghost", "password": "nope"})
    assert resp.status_code == 400


def test_current_user_requires_token(client):
    assert client.get("/api/user").status_code == 401
    resp = client.get("/api/user", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_expired_token_rejected(client):
    token = security.create_access_token(1, expires_delta=timedelta(minutes=-1))
    resp = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_token_for_deleted_user_rejected(client, store):
    token = security.create_access_token(1)
    store.users.delete(1)
    resp = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_password_stored_hashed(store):
    admin = store.get_user_by_username("admin")
    assert admin["password"] != "admin-password"
    assert security.verify_password("admin-password", admin["password"])


def test_seed_warns_about_default_credentials(empty_store, monkeypatch, caplog):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", Settings.model_fields["ADMIN_PASSWORD"].default)
    monkeypatch.setattr(settings, "SECRET_KEY", Settings.model_fields["SECRET_KEY"].default)
    with caplog.at_level(logging.WARNING, logger="app.db.seed"):
        seed_data(empty_store, sample=False)
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("ADMIN_PASSWORD" in message for message in warnings)
    assert any("SECRET_KEY" in message for message in warnings)


def test_seed_is_quiet_with_configured_credentials(empty_store, monkeypatch, caplog):
    monkeypatch.setattr(settings, "SECRET_KEY", "a-key-from-the-environment")
    with caplog.at_level(logging.WARNING, logger="app.db.seed"):
        seed_data(empty_store, sample=False)
    assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []

"""Tests for registration, login and token handling."""

from redis.exceptions import RedisError
from sqlalchemy import select

from refmatch.config import settings
from refmatch.models.profile import Profile


# ---------------------------------------------------------------------------
# Model unit tests (via direct DB session)
# ---------------------------------------------------------------------------


async def test_create_profile_defaults(db):
    """Profile created with only credentials has expected initial state."""
    profile = Profile(email="a@example.com", password_hash="x")
    db.add(profile)
    await db.flush()

    assert len(profile.id) == 36
    assert profile.name == ""
    assert profile.relationship_status == "single"
    assert profile.photo is None
    assert profile.bio is None
    assert profile.age is None
    assert profile.created_at is not None


# ---------------------------------------------------------------------------
# Route integration tests (via HTTP client)
# ---------------------------------------------------------------------------


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True


async def test_register_returns_user_and_identity_token(client):
    resp = await client.post("/auth/register", json={
        "email": "Emma@Example.com",
        "password": "secret123",
        "name": "Emma",
        "relationshipStatus": "not-single",
    })
    assert resp.status_code == 201

    data = resp.json()
    user = data["user"]
    assert user["name"] == "Emma"
    assert user["relationshipStatus"] == "not-single"
    assert "email" not in user
    assert "passwordHash" not in user
    # Identity token mode: the token is the user id
    assert data["token"] == user["id"]


async def test_register_defaults(client):
    resp = await client.post("/auth/register", json={
        "email": "plain@example.com", "password": "secret123",
    })
    assert resp.status_code == 201
    user = resp.json()["user"]
    assert user["name"] == ""
    assert user["relationshipStatus"] == "single"


async def test_register_hashes_password(client, db):
    await client.post("/auth/register", json={
        "email": "hash@example.com", "password": "secret123",
    })

    result = await db.execute(select(Profile).where(Profile.email == "hash@example.com"))
    profile = result.scalar_one()
    assert profile.password_hash != "secret123"


async def test_register_duplicate_email_case_insensitive(client):
    await client.post("/auth/register", json={"email": "dup@example.com", "password": "secret123"})
    resp = await client.post("/auth/register", json={"email": "DUP@example.com", "password": "other123"})
    assert resp.status_code == 409
    assert resp.json()["error"] == "Email already exists"


async def test_register_validation(client):
    resp = await client.post("/auth/register", json={"email": "not-an-email", "password": "secret123"})
    assert resp.status_code == 400
    assert "email" in resp.json()["error"]["fieldErrors"]

    resp = await client.post("/auth/register", json={"email": "short@example.com", "password": "123"})
    assert resp.status_code == 400
    assert "password" in resp.json()["error"]["fieldErrors"]

    resp = await client.post("/auth/register", json={
        "email": "status@example.com", "password": "secret123", "relationshipStatus": "married",
    })
    assert resp.status_code == 400


async def test_login(client, register):
    created = await register("Lucas")
    email = "lucas1@example.com"

    resp = await client.post("/auth/login", json={"email": email, "password": "secret123"})
    assert resp.status_code == 200
    assert resp.json()["user"]["id"] == created["user"]["id"]
    assert resp.json()["token"] == created["user"]["id"]


async def test_login_invalid_credentials(client, register):
    await register("Lucas")

    resp = await client.post("/auth/login", json={"email": "lucas1@example.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "Invalid credentials"

    resp = await client.post("/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert resp.status_code == 401


async def test_me_with_identity_token(client, register):
    created = await register("Ava")
    resp = await client.get("/auth/me", headers={"Authorization": f"Bearer {created['token']}"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Ava"


async def test_me_requires_valid_token(client):
    resp = await client.get("/auth/me")
    assert resp.status_code == 401

    resp = await client.get("/auth/me", headers={"Authorization": "Bearer unknown-id"})
    assert resp.status_code == 401


async def test_session_token_mode(client, register, fake_redis, monkeypatch):
    """Opaque tokens are stored in Redis and can be revoked."""
    monkeypatch.setattr(settings, "TOKEN_MODE", "session")

    created = await register("James")
    token = created["token"]
    assert token != created["user"]["id"]
    assert fake_redis.data[f"session:{token}"] == created["user"]["id"]
    assert fake_redis.ttls[f"session:{token}"] == settings.SESSION_TTL

    headers = {"Authorization": f"Bearer {token}"}
    resp = await client.get("/auth/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == created["user"]["id"]

    # The raw user id is not accepted as a token in this mode
    resp = await client.get("/auth/me", headers={"Authorization": f"Bearer {created['user']['id']}"})
    assert resp.status_code == 401

    resp = await client.post("/auth/logout", headers=headers)
    assert resp.status_code == 204
    resp = await client.get("/auth/me", headers=headers)
    assert resp.status_code == 401


async def test_session_store_down_returns_503(client, register, fake_redis, monkeypatch):
    monkeypatch.setattr(settings, "TOKEN_MODE", "session")
    created = await register("Liam")

    async def broken_get(key):
        raise RedisError("connection refused")

    monkeypatch.setattr(fake_redis, "get", broken_get)

    resp = await client.get("/auth/me", headers={"Authorization": f"Bearer {created['token']}"})
    assert resp.status_code == 503
    assert "error" in resp.json()

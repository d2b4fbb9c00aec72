"""Tests for profile read/update routes."""


async def test_get_profile(client, register):
    created = await register("Sophie")
    user_id = created["user"]["id"]

    resp = await client.get(f"/profiles/{user_id}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Sophie"
    assert resp.json()["id"] == user_id


async def test_get_profile_not_found(client):
    resp = await client.get("/profiles/missing")
    assert resp.status_code == 404
    assert "not found" in resp.json()["error"].lower()


async def test_update_profile_partial(client, register):
    """PUT /profiles/{id} updates only provided fields."""
    created = await register("Original")
    user_id = created["user"]["id"]

    resp = await client.put(f"/profiles/{user_id}", json={"bio": "Bakes sourdough."})
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Original"  # unchanged
    assert data["bio"] == "Bakes sourdough."

    resp = await client.put(f"/profiles/{user_id}", json={
        "name": "NewName",
        "age": 30,
        "photo": "https://i.pravatar.cc/300?img=32",
        "relationshipStatus": "not-single",
    })
    data = resp.json()
    assert data["name"] == "NewName"
    assert data["age"] == 30
    assert data["photo"] == "https://i.pravatar.cc/300?img=32"
    assert data["relationshipStatus"] == "not-single"
    assert data["bio"] == "Bakes sourdough."  # still there


async def test_update_profile_keeps_photo_url_as_sent(client, register):
    created = await register("Photo")
    user_id = created["user"]["id"]

    resp = await client.put(f"/profiles/{user_id}", json={"photo": "https://example.com"})
    assert resp.status_code == 200
    assert resp.json()["photo"] == "https://example.com"

    resp = await client.get(f"/profiles/{user_id}")
    assert resp.json()["photo"] == "https://example.com"


async def test_update_profile_not_found(client):
    resp = await client.put("/profiles/missing", json={"name": "Nope"})
    assert resp.status_code == 404


async def test_update_profile_validation(client, register):
    created = await register("Valid")
    user_id = created["user"]["id"]

    for body in (
        {"age": 17},
        {"age": 121},
        {"bio": "x" * 501},
        {"name": ""},
        {"photo": "not a url"},
        {"relationshipStatus": "complicated"},
    ):
        resp = await client.put(f"/profiles/{user_id}", json=body)
        assert resp.status_code == 400, body
        assert "error" in resp.json()

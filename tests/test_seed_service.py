"""Tests for the demo seed data loader."""

import pytest

from refmatch.services.auth_service import verify_password
from refmatch.services.seed_service import SeedService, seed_service


def test_load_seed_users():
    users = seed_service.users()
    assert len(users) == 8
    emails = [u["email"] for u in users]
    assert "emma.test@refapp.com" in emails
    assert all(u["password"] == "password123" for u in users)


def test_relationship_statuses():
    by_name = {u["name"]: u for u in seed_service.users()}
    assert by_name["Emma"]["relationship_status"] == "not-single"
    assert by_name["Noah"]["relationship_status"] == "not-single"
    assert by_name["Sophie"]["relationship_status"] == "single"


def test_profile_documents_hash_password():
    docs = seed_service.profile_documents()
    assert docs[0]["password_hash"] != "password123"
    assert verify_password("password123", docs[0]["password_hash"])
    assert docs[0]["age"] == 29


def test_missing_seed_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SeedService(tmp_path / "nope.yaml").load()


def test_seed_cache():
    config1 = seed_service.load()
    config2 = seed_service.load()
    assert config1 is config2


async def test_seed_store_skips_existing(store):
    added = await seed_service.seed_store(store)
    assert added == 8

    sophie = await store.get_profile_by_email("sophie.test@refapp.com")
    assert sophie.photo == "https://i.pravatar.cc/300?img=32"
    assert sophie.age == 26

    assert await seed_service.seed_store(store) == 0

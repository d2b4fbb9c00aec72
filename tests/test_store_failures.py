"""Tests for how store outages surface: TransientStoreError, HTTP 503."""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from refmatch.config import settings
from refmatch.core.errors import TransientStoreError
from refmatch.db.sql_store import SqlStore


async def test_slow_sql_call_times_out(db, monkeypatch):
    monkeypatch.setattr(settings, "STORE_TIMEOUT_SECONDS", 0.01)

    async def slow_execute(*args, **kwargs):
        await asyncio.sleep(1)

    monkeypatch.setattr(db, "execute", slow_execute)

    with pytest.raises(TransientStoreError):
        await SqlStore(db).get_profile("anyone")


async def test_driver_failure_is_transient(db, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    monkeypatch.setattr(db, "execute", broken_execute)

    with pytest.raises(TransientStoreError):
        await SqlStore(db).list_profiles()


async def test_transient_error_renders_503(client, register, monkeypatch):
    created = await register("Mia")

    async def unavailable(self, user_id):
        raise TransientStoreError("Store unavailable, please retry")

    monkeypatch.setattr(SqlStore, "get_profile", unavailable)

    resp = await client.get(f"/profiles/{created['user']['id']}")
    assert resp.status_code == 503
    assert resp.json() == {"error": "Store unavailable, please retry"}

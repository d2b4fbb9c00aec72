"""Shared test fixtures - uses async SQLite for isolated testing."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from refmatch.db.database import Base, get_db
from refmatch.db.json_store import JsonFileStore
from refmatch.db.redis import get_redis
from refmatch.db.sql_store import SqlStore
from refmatch.services.auth_service import auth_service

# In-memory SQLite for tests (no Docker needed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///file::memory:?cache=shared&uri=true"

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
test_session_factory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


async def _override_get_db():
    async with test_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


class FakeRedis:
    """Just enough of redis.asyncio.Redis for session tokens."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def set(self, key, value, ex=None):
        self.data[key] = value
        if ex is not None:
            self.ttls[key] = ex
        return True

    async def get(self, key):
        return self.data.get(key)

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed


@pytest.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after."""
    # Import all models so Base.metadata knows about them
    import refmatch.models  # noqa: F401

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db():
    """Direct async DB session for service-level tests."""
    async with test_session_factory() as session:
        yield session
        await session.commit()


@pytest.fixture(params=["sql", "json"])
async def store(request, db, tmp_path):
    """Each service test runs against both store backends."""
    if request.param == "sql":
        return SqlStore(db)
    return JsonFileStore(tmp_path / "db.json")


@pytest.fixture
def make_profile(store):
    """Register a profile directly through the auth service."""
    counter = {"n": 0}

    async def _make(name: str = "User", relationship_status: str = "single"):
        counter["n"] += 1
        return await auth_service.register(
            store,
            email=f"{name.lower()}{counter['n']}@example.com",
            password="secret123",
            name=name,
            relationship_status=relationship_status,
        )

    return _make


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
async def client(fake_redis):
    """Async HTTP test client with test DB and fake Redis overrides."""
    from refmatch.main import app

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_redis] = lambda: fake_redis
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user over HTTP and return the response body."""
    counter = {"n": 0}

    async def _register(name: str = "User", relationship_status: str = "single", **extra):
        counter["n"] += 1
        body = {
            "email": f"{name.lower()}{counter['n']}@example.com",
            "password": "secret123",
            "name": name,
            "relationshipStatus": relationship_status,
            **extra,
        }
        resp = await client.post("/auth/register", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _register

"""Shared fixtures: app clients for each backend, and raw stores for repository tests."""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from musicare.config import settings
from musicare.main import app
from musicare.models import Base
from musicare.services.stores.mock_store import MockStore
from musicare.services.stores.sql_store import SqlFileStore, SqlPersonStore


def _sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def mock_client(monkeypatch):
    monkeypatch.setattr(settings, "STORE_MODE", "mock")
    monkeypatch.setattr(settings, "DATABASE_URL", "")
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db_client(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "STORE_MODE", "database")
    monkeypatch.setattr(settings, "DATABASE_URL", _sqlite_url(tmp_path))
    with TestClient(app) as client:
        yield client


@pytest.fixture(params=["mock", "db"])
def client(request):
    """Run an HTTP test once per backend; both must answer identically."""
    return request.getfixturevalue(f"{request.param}_client")


@pytest.fixture
def unconfigured_client(monkeypatch):
    monkeypatch.setattr(settings, "STORE_MODE", "database")
    monkeypatch.setattr(settings, "DATABASE_URL", "")
    with TestClient(app) as client:
        yield client


@pytest_asyncio.fixture
async def db_session(tmp_path):
    engine = create_async_engine(_sqlite_url(tmp_path))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture(params=["mock", "sql"])
async def file_store(request, db_session):
    if request.param == "mock":
        return MockStore()
    return SqlFileStore(db_session)


@pytest_asyncio.fixture(params=["mock", "sql"])
async def person_store(request, db_session):
    if request.param == "mock":
        return MockStore()
    return SqlPersonStore(db_session)

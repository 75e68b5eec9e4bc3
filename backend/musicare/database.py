"""Async SQLAlchemy engine and session factory.

The engine is built lazily from ``settings.DATABASE_URL`` because the app can
run without a database (mock mode). Usage:

    async with async_session() as db:
        result = await db.execute(select(FileRecord))
"""
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from musicare.config import settings
from musicare.errors import ConfigurationError

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Return the process-wide engine, creating it on first use."""
    global _engine, _session_factory
    if _engine is None:
        if not settings.DATABASE_URL:
            raise ConfigurationError(
                "Database not configured",
                details="DATABASE_URL environment variable is missing",
            )
        options = {"echo": False, "pool_pre_ping": True}
        if not settings.DATABASE_URL.startswith("sqlite"):
            options.update(pool_size=10, max_overflow=20)
        _engine = create_async_engine(settings.DATABASE_URL, **options)
        _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    return _engine


def async_session() -> AsyncSession:
    get_engine()
    return _session_factory()


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine (shutdown, tests)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


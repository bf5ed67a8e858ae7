"""Database engine, session factory and schema management.

A single async engine is configured per process. Contexts never create their
own engines; they receive the session factory from ``get_session_factory()``.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from shared.config import get_settings


class Base(DeclarativeBase):
    pass


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def configure_database(url: str | None = None, **engine_kwargs) -> async_sessionmaker[AsyncSession]:
    """Create the process-wide engine and session factory.

    Falls back to ``DATABASE_URL`` from settings when no URL is given.
    """
    global _engine, _session_factory
    _engine = create_async_engine(url or get_settings().database_url, **engine_kwargs)
    _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    return _session_factory


def get_engine() -> AsyncEngine:
    if _engine is None:
        configure_database()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the configured session factory, configuring from settings on first use."""
    if _session_factory is None:
        configure_database()
    return _session_factory


async def dispose_database() -> None:
    """Dispose the engine and forget the factory (used on shutdown and between tests)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def _register_models() -> None:
    # Importing the model modules registers their tables on Base.metadata.
    import catalogue.product.product  # noqa: F401
    import ordering.order.order  # noqa: F401


async def setup_db() -> None:
    """Create all tables."""
    _register_models()
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db() -> None:
    """Drop all tables."""
    _register_models()
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

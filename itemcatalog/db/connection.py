"""Database connection and session management for the item catalog.

Provides the async engine and session factory with connection pooling.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from itemcatalog.config import DBConfig, get_config
from itemcatalog.db.models import Base

# Global engine instance
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_engine_from_config(db_config: DBConfig) -> AsyncEngine:
    """Build an async engine, applying pool settings for non-SQLite URLs."""
    engine_kwargs: dict = {"echo": db_config.echo}

    # SQLite doesn't support connection pooling parameters
    if "sqlite" not in db_config.url.lower():
        engine_kwargs.update({
            "pool_size": db_config.pool_size,
            "max_overflow": db_config.pool_max_overflow,
            "pool_timeout": db_config.pool_timeout,
            "pool_pre_ping": True,  # Verify connections before using
            "pool_recycle": 3600,  # Recycle connections after 1 hour
        })

    return create_async_engine(db_config.url, **engine_kwargs)


def get_engine() -> AsyncEngine:
    """Get or create singleton async engine.

    Returns:
        AsyncEngine: SQLAlchemy async engine

    Raises:
        RuntimeError: If database URL is not configured
    """
    global _engine

    if _engine is None:
        config = get_config()
        if config.db is None:
            raise RuntimeError("DATABASE_URL is not configured")
        _engine = create_engine_from_config(config.db)

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create session factory.

    Returns:
        async_sessionmaker: Session factory for creating AsyncSession instances
    """
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,  # Don't expire objects after commit
        )

    return _session_factory


async def init_db(drop: bool = False) -> None:
    """Initialize database (create all tables).

    Raises:
        SQLAlchemyError: If table creation fails
    """
    engine = get_engine()

    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database engine and dispose connections.

    Call this on application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None

"""Database configuration and session management.

Provides async SQLAlchemy engine and session factory. One session is
handed out per request and forms that request's transaction boundary.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from giftshop.infrastructure.config import settings


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL.

    SQLite connections are not pooled so a database file can be shared
    across event loops.

    Args:
        database_url: SQLAlchemy database URL.
        echo: Whether to log emitted SQL.

    Returns:
        Configured async engine.
    """
    options: dict[str, Any] = {"echo": echo}
    if database_url.startswith("sqlite"):
        options["poolclass"] = NullPool
    else:
        options["pool_pre_ping"] = True
    return create_async_engine(database_url, **options)


# Create async engine
engine = build_engine(settings.database_url, echo=settings.debug)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for models
Base = declarative_base()


async def create_schema(bind: AsyncEngine = engine) -> None:
    """Create all tables known to the metadata if they don't exist."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema(bind: AsyncEngine = engine) -> None:
    """Drop all tables known to the metadata."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def ping(bind: AsyncEngine = engine) -> None:
    """Run a trivial query to verify connectivity."""
    async with bind.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    The session is committed when the caller finishes without error and
    rolled back when an exception escapes, so every write made while
    serving one request lands atomically.

    Yields:
        AsyncSession for database operations.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

"""
Database connection management
"""

import os
import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)

# Process-wide shared connection pool
_async_engine: AsyncEngine | None = None
_async_session_local: async_sessionmaker[AsyncSession] | None = None
_initialized = False
_init_lock = threading.Lock()  # Protect initialization from race conditions


def get_database_url() -> str:
    """Get database URL, checking the environment first so tests can override it."""
    return os.getenv("PROJECTHUB_DATABASE_URL") or settings.database_url


def to_async_url(db_url: str) -> str:
    """Map a plain PostgreSQL URL onto the asyncpg driver; other URLs pass through."""
    if db_url.startswith("postgresql://"):
        return db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return db_url


def reset_database() -> None:
    """Reset database connections (for tests)."""
    global _async_engine, _async_session_local, _initialized
    _async_engine = None
    _async_session_local = None
    _initialized = False


async def check_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return a helpful error message on failure.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _async_engine is None:
        return False, "Database engine not initialized"

    try:
        async with _async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        if "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        if "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        return False, f"Database connection error ({type(e).__name__}): {error_str}"


def init_database(database_url: str | None = None, force_reinit: bool = False) -> None:
    """Initialize the shared async engine and session factory.

    Thread-safe; repeated calls are no-ops unless a URL is given or
    ``force_reinit`` is set.
    """
    global _async_engine, _async_session_local, _initialized

    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        if _initialized and not force_reinit and database_url is None:
            return

        db_url = to_async_url(database_url or get_database_url())

        engine_kwargs: dict[str, Any] = {"echo": settings.sql_echo}
        if not db_url.startswith("sqlite"):
            engine_kwargs["pool_size"] = settings.database_pool_size
            engine_kwargs["max_overflow"] = settings.database_max_overflow

        _async_engine = create_async_engine(db_url, **engine_kwargs)
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

        _initialized = True
        logger.info("Database initialized", database_url=_async_engine.url.render_as_string())


def get_async_engine() -> AsyncEngine:
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    if _async_engine is None:
        raise RuntimeError("Database not initialized")
    return _async_engine


async def create_tables() -> None:
    """Create all tables known to the ORM metadata if they do not exist."""
    from ..dbmodels import Base

    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created", tables=sorted(Base.metadata.tables))


async def dispose_database() -> None:
    """Close pooled connections and forget the engine."""
    if _async_engine is not None:
        await _async_engine.dispose()
    reset_database()


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session from the shared pool.

    Commits when the block exits normally and rolls back on any exception.
    """
    if _async_session_local is None:
        init_database()

    if _async_session_local is None:
        raise RuntimeError("Database not initialized")

    async with _async_session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

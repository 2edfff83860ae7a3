"""
NexParcel Backend — Database Handle and Session Management
============================================================

What:  Async SQLAlchemy engine wrapper, declarative base, and FastAPI dependency.
How:   `Database` owns one engine and one session factory. The application
       factory constructs it and stores it on `app.state.database`; route
       handlers receive a session through the `get_db_session` dependency,
       which commits on success and rolls back on error.
Who:   Built by `create_app()`; consumed by every route touching storage.
When:  One handle per application; one session per request.

Connection Pooling Strategy:
    PostgreSQL (asyncpg): pool_size / max_overflow / pre_ping from settings,
    connections recycled hourly.
    SQLite (aiosqlite): a single shared connection (StaticPool) so an
    in-memory database survives across sessions. Used by the test suite.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from nexparcel.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations
    and the test suite uses to create tables.
    """
    pass


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine with pooling appropriate for the backend.

    SQLite URLs get a StaticPool (one shared connection); every other
    backend gets a sized queue pool from settings.
    """
    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(
        url,
        echo=echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )


class Database:
    """
    Explicitly constructed store handle.

    Attributes:
        engine:           The async engine (owns the connection pool)
        session_factory:  Produces AsyncSession instances bound to the engine

    Example:
        database = Database("sqlite+aiosqlite://")
        await database.create_all()
        async with database.session() as session:
            ...
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.database_url
        if echo is None:
            echo = settings.log_level == "DEBUG"
        self.engine: AsyncEngine = build_engine(self.url, echo=echo)
        # expire_on_commit=False: attributes stay readable after commit
        # without triggering a lazy load outside the greenlet context
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Unit-of-work scope: commit on success, roll back on any error.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every table registered on `Base.metadata` (tests, local dev)."""
        # Model modules register their tables on import
        import nexparcel.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run `SELECT 1`; True if the database answered."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections (application shutdown)."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Looks up the Database handle the app was built with
        2. Yields a session to the route handler
        3. Commits on success, rolls back on error (see Database.session)

    Example usage in a route:
        @router.get("/bookings")
        async def list_bookings(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session

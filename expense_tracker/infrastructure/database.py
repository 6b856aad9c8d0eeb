"""Database Session Manager - async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to PersistenceError (core/errors.py), never swallowed

Design Decisions:
    - One manager per app, created in the FastAPI lifespan and stored on app.state
      (no module-global handle)
    - expire_on_commit=False: returned ORM objects stay readable after the session closes
    - SQLite URLs skip pool sizing: the aiosqlite dialect picks its own pool class
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from expense_tracker.core.errors import PersistenceError
from expense_tracker.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        if database_url.startswith("sqlite"):
            engine = create_async_engine(database_url)
        else:
            engine = create_async_engine(
                database_url,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self._bind(engine)

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an already-configured engine (scripts, test fixtures)."""
        manager = cls.__new__(cls)
        manager._bind(engine)
        return manager

    def _bind(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise PersistenceError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise PersistenceError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise PersistenceError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise PersistenceError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables from the ORM metadata (startup auto-migration)."""
        import expense_tracker.models  # noqa: F401  registers tables on Base.metadata

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"Schema creation failed: {e}")
            raise PersistenceError("Schema creation failed", "migrate") from e
        logger.info("Database schema ready")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()

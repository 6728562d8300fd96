"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - The developers table is verified (or created) before the app serves requests

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Schema is owned by alembic; create_all only when explicitly enabled
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from devregistry.core.errors import DatabaseError
from devregistry.db.base import Base
from devregistry.models.developer import Developer, DEVELOPER_COLUMNS

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
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
            raise DatabaseError("Integrity constraint violated", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def ensure_schema(self, create: bool = False) -> None:
        """Verify the developers table and its columns exist.

        With create=True missing tables are created from Base.metadata first.
        Raises RuntimeError when the table or any column is missing, so a
        misconfigured deployment fails at startup rather than on first request.
        """
        async with self.engine.begin() as conn:
            if create:
                await conn.run_sync(Base.metadata.create_all)
                logger.info("Database schema created (if missing)")
            missing = await conn.run_sync(_missing_developer_columns)
        if missing:
            raise RuntimeError(
                f"Table '{Developer.__tablename__}' is missing columns: "
                f"{', '.join(missing)} (run `alembic upgrade head`)",
            )

    async def dispose(self) -> None:
        await self.engine.dispose()


def _missing_developer_columns(connection: Connection) -> list[str]:
    """Return expected developers columns absent from the live schema."""
    inspector = inspect(connection)
    if not inspector.has_table(Developer.__tablename__):
        return list(DEVELOPER_COLUMNS)
    present = {
        col["name"] for col in inspector.get_columns(Developer.__tablename__)
    }
    return [name for name in DEVELOPER_COLUMNS if name not in present]


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session

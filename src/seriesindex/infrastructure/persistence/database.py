"""Database engine and session management."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from seriesindex.config import DatabaseSettings, Settings

logger = logging.getLogger(__name__)


def engine_options(database: DatabaseSettings) -> dict[str, Any]:
    """Build create_async_engine keyword arguments for the configured backend.

    Pool sizing only means something for PostgreSQL. SQLite gets a lock
    timeout instead, since concurrent writers wait on the file lock.
    """
    options: dict[str, Any] = {
        "echo": database.echo,
        "pool_pre_ping": database.pool_pre_ping,
    }
    backend = make_url(database.url).get_backend_name()

    if backend == "postgresql":
        options.update(
            {
                "pool_size": database.pool_size,
                "max_overflow": database.max_overflow,
                "pool_timeout": database.pool_timeout,
                "pool_recycle": database.pool_recycle,
            }
        )
    elif backend == "sqlite":
        options["connect_args"] = {
            "check_same_thread": False,
            "timeout": 30,  # Wait up to 30s for lock
        }
    return options


class Database:
    """Database connection and session manager."""

    def __init__(self, settings: Settings) -> None:
        """Initialize database with settings."""
        self.settings = settings
        self._engine = create_async_engine(
            settings.database.url,
            **engine_options(settings.database),
        )
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.debug("Database engine created for dialect %s", self.dialect_name)

    # Hey future me, this is the DialectInfo the lookup layer asks "which SQL do you speak?".
    # SQLAlchemy already knows from the URL - "sqlite" for sqlite+aiosqlite, "postgresql" for
    # postgresql+asyncpg. No connection needed to answer this.
    @property
    def dialect_name(self) -> str:
        """Name of the active SQL dialect (e.g. "sqlite", "postgresql")."""
        return self._engine.dialect.name

    # Yo, EVERY store call goes through here - one short-lived session per operation. The
    # finally/close runs on every exit path, including when the caller raises inside the
    # block. Any exception rolls back, since the transaction is
    # suspect. The exception is re-raised unchanged, no retry here.
    @asynccontextmanager
    async def session_scope(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional scope for database operations."""
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    # Hey future me, every session_scope() exit must hand its connection back. This is how
    # you check - 0 means nothing is leaked. Pools without checkout tracking report 0.
    def checked_out_connections(self) -> int:
        """Number of pooled connections currently held by open sessions."""
        pool = self._engine.pool
        return getattr(pool, "checkedout", lambda: 0)()

    async def close(self) -> None:
        """Dispose the engine and all pooled connections."""
        await self._engine.dispose()

    async def create_tables(self) -> None:
        """Create all tables that don't exist yet."""
        from seriesindex.infrastructure.persistence.models import Base

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        """Drop all tables (for testing only)."""
        from seriesindex.infrastructure.persistence.models import Base

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

"""Shared fixtures for SeriesIndex tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio

from seriesindex.config import DatabaseSettings, Settings
from seriesindex.infrastructure.persistence import Database, SeriesRepository


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    # A file, not :memory: - every store call opens its own connection
    return Settings(
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'series.db'}")
    )


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    """Database with the schema created."""
    db = Database(settings)
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.close()


@pytest_asyncio.fixture
async def repository(database: Database) -> SeriesRepository:
    """Series repository on the test database."""
    return SeriesRepository(database)

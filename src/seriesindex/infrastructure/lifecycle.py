"""Startup and shutdown of the series index."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from seriesindex.config import Settings, get_settings
from seriesindex.infrastructure.observability import configure_logging
from seriesindex.infrastructure.persistence import Database, SeriesRepository

logger = logging.getLogger(__name__)


# Listen future me, this is the ONE place that turns Settings into a running index. Logging is
# configured first so engine creation and schema setup already log in the chosen format.
# Everything before `yield` is startup, everything after is shutdown. The finally disposes the
# engine even if create_tables() blows up, so a failed start doesn't leak pooled connections.
@asynccontextmanager
async def lifespan(settings: Settings | None = None) -> AsyncGenerator[SeriesRepository, None]:
    """Open the series index and close it again on exit.

    Args:
        settings: Settings to use, defaults to ``get_settings()``

    Yields:
        A SeriesRepository on a database with the schema created
    """
    if settings is None:
        settings = get_settings()

    configure_logging(
        log_level=settings.logging.level,
        json_format=settings.logging.json_format,
        app_name=settings.app_name,
    )
    logger.info("Starting %s", settings.app_name)

    database = Database(settings)
    try:
        await database.create_tables()
        logger.info("Series index ready (dialect: %s)", database.dialect_name)
        yield SeriesRepository(database)
    finally:
        await database.close()
        logger.info("Stopped %s", settings.app_name)

"""Infrastructure persistence layer."""

from .database import Database, engine_options
from .dialects import (
    ContainmentDialect,
    PostgresContainment,
    PythonContainment,
    SqliteContainment,
    containment_for,
)
from .models import Base, SeriesModel
from .repositories import SeriesRepository
from .store import SqlAlchemyStore

__all__ = [
    # Database
    "Database",
    "engine_options",
    "Base",
    # Models
    "SeriesModel",
    # Storage
    "SqlAlchemyStore",
    # Containment dialects
    "ContainmentDialect",
    "SqliteContainment",
    "PostgresContainment",
    "PythonContainment",
    "containment_for",
    # Repositories
    "SeriesRepository",
]

"""Domain ports (interfaces) for dependency inversion."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from seriesindex.domain.entities import SeriesRecord
from seriesindex.domain.value_objects import LookupResult

ModelT = TypeVar("ModelT")


# Hey future me, ISeriesStore is the GENERIC storage collaborator - CRUD by primary key plus
# "give me rows matching these predicates". It knows nothing about titles, ambiguity or
# dialects. The repository HOLDS one of these (composition) instead of inheriting from a base
# repository class. Predicates are SQLAlchemy column expressions, so this port is tied to
# SQLAlchemy, like the whole persistence layer.
class ISeriesStore(ABC, Generic[ModelT]):
    """Generic CRUD and predicate-query interface over one table."""

    @abstractmethod
    async def add(self, model: ModelT) -> ModelT:
        """Insert a row and return it with its primary key assigned."""
        pass

    @abstractmethod
    async def update(self, model: ModelT) -> ModelT:
        """Overwrite an existing row identified by its primary key."""
        pass

    @abstractmethod
    async def delete(self, model_id: int) -> None:
        """Delete a row by primary key."""
        pass

    @abstractmethod
    async def get_by_id(self, model_id: int) -> ModelT | None:
        """Get a row by primary key."""
        pass

    @abstractmethod
    async def query_where(
        self, *predicates: Any, limit: int | None = None
    ) -> list[ModelT]:
        """Get all rows matching every predicate."""
        pass

    @abstractmethod
    async def exists_where(self, *predicates: Any) -> bool:
        """Check whether any row matches every predicate."""
        pass

    @abstractmethod
    async def scalars(self, column: Any, *predicates: Any) -> list[Any]:
        """Get a single column of all matching rows."""
        pass

    @abstractmethod
    async def rows(self, columns: tuple[Any, ...], *predicates: Any) -> list[tuple[Any, ...]]:
        """Get several columns of all matching rows as tuples."""
        pass


# Yo, ISeriesRepository is what the import/matching pipeline talks to! Three flavors of
# single lookups: title-based ones are STRICT (raise on ambiguity, or use resolve_* to get a
# LookupResult), tvdb_id/path ones are LENIENT (first match wins - duplicates there are a data
# problem, not something a lookup can fix). Keep the two policies separate.
class ISeriesRepository(ABC):
    """Repository interface for series lookups."""

    @abstractmethod
    async def add(self, series: SeriesRecord) -> SeriesRecord:
        """Add a new series."""
        pass

    @abstractmethod
    async def update(self, series: SeriesRecord) -> SeriesRecord:
        """Update an existing series."""
        pass

    @abstractmethod
    async def delete(self, series_id: int) -> None:
        """Delete a series."""
        pass

    @abstractmethod
    async def get_by_id(self, series_id: int) -> SeriesRecord | None:
        """Get a series by ID."""
        pass

    @abstractmethod
    async def get_all(self) -> list[SeriesRecord]:
        """Get all series."""
        pass

    @abstractmethod
    async def series_path_exists(self, path: str) -> bool:
        """Check whether any series lives at exactly this path."""
        pass

    @abstractmethod
    async def resolve_by_title(self, clean_title: str) -> LookupResult:
        """Look up a series by clean title."""
        pass

    @abstractmethod
    async def resolve_by_title_and_year(self, clean_title: str, year: int) -> LookupResult:
        """Look up a series by clean title and year."""
        pass

    @abstractmethod
    async def resolve_by_title_slug(self, title_slug: str) -> LookupResult:
        """Look up a series by title slug."""
        pass

    @abstractmethod
    async def find_by_title(self, clean_title: str) -> SeriesRecord | None:
        """Find a series by clean title, raising on ambiguity."""
        pass

    @abstractmethod
    async def find_by_title_and_year(self, clean_title: str, year: int) -> SeriesRecord | None:
        """Find a series by clean title and year, raising on ambiguity."""
        pass

    @abstractmethod
    async def find_by_title_slug(self, title_slug: str) -> SeriesRecord | None:
        """Find a series by title slug, raising on ambiguity."""
        pass

    @abstractmethod
    async def find_by_title_inexact(self, clean_title: str) -> list[SeriesRecord]:
        """Find every series whose clean title occurs inside the given text."""
        pass

    @abstractmethod
    async def find_by_tvdb_id(self, tvdb_id: int) -> SeriesRecord | None:
        """Find a series by TVDB ID."""
        pass

    @abstractmethod
    async def find_by_path(self, path: str) -> SeriesRecord | None:
        """Find a series by path."""
        pass

    @abstractmethod
    async def all_tvdb_ids(self) -> list[int]:
        """Get the TVDB ID of every series."""
        pass

    @abstractmethod
    async def all_series_paths(self) -> dict[int, str]:
        """Get a series id -> path mapping."""
        pass

    @abstractmethod
    async def all_series_tags(self) -> dict[int, list[int]]:
        """Get a series id -> tags mapping for series that have tags."""
        pass


__all__ = ["ISeriesStore", "ISeriesRepository"]

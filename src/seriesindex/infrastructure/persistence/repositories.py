"""Repository implementations for domain entities."""

import logging

from seriesindex.domain.entities import SeriesRecord
from seriesindex.domain.ports import ISeriesRepository, ISeriesStore
from seriesindex.domain.value_objects import LookupResult, title_normalization

from .database import Database
from .dialects import ContainmentDialect, containment_for
from .models import SeriesModel
from .store import SqlAlchemyStore

logger = logging.getLogger(__name__)


class SeriesRepository(ISeriesRepository):
    """SQLAlchemy implementation of the Series lookup repository."""

    # Hey future me, the repository HOLDS a generic store and a containment strategy - no base
    # class. The strategy is picked ONCE here from the engine's dialect, so lookups never
    # branch on "am I on Postgres?" per call. Pass store/containment explicitly in tests if
    # you want to fake either one.
    def __init__(
        self,
        database: Database,
        store: ISeriesStore[SeriesModel] | None = None,
        containment: ContainmentDialect | None = None,
    ) -> None:
        """Initialize repository with database."""
        self.store = store if store is not None else SqlAlchemyStore(database, SeriesModel)
        self.containment = (
            containment if containment is not None else containment_for(database.dialect_name)
        )

    # =========================================================================
    # CRUD
    # =========================================================================

    # Yo, add() and update() fill in clean_title/title_slug from the display title if the
    # caller left them empty. An empty clean_title would be a substring of EVERY haystack in
    # find_by_title_inexact. Callers that normalize differently (custom slugs etc.) just pass
    # their own values.
    async def add(self, series: SeriesRecord) -> SeriesRecord:
        """Add a new series.

        The passed record is updated in place (``id`` plus any derived
        ``clean_title``/``title_slug``) and returned.
        """
        self._fill_derived_titles(series)
        model = await self.store.add(self._entity_to_model(series))
        series.id = model.id
        return series

    async def update(self, series: SeriesRecord) -> SeriesRecord:
        """Update an existing series and return the stored state.

        Empty ``clean_title``/``title_slug`` are re-derived from ``title``
        on the passed record, as in ``add``.
        """
        self._fill_derived_titles(series)
        model = await self.store.update(self._entity_to_model(series))
        return self._model_to_entity(model)

    async def delete(self, series_id: int) -> None:
        """Delete a series."""
        await self.store.delete(series_id)

    async def get_by_id(self, series_id: int) -> SeriesRecord | None:
        """Get a series by ID."""
        model = await self.store.get_by_id(series_id)
        return self._model_to_entity(model) if model else None

    async def get_all(self) -> list[SeriesRecord]:
        """Get all series ordered by id."""
        return [self._model_to_entity(model) for model in await self.store.query_where()]

    # =========================================================================
    # EXACT LOOKUPS
    # =========================================================================

    async def series_path_exists(self, path: str) -> bool:
        """Check whether any series lives at exactly this path (case-sensitive)."""
        return await self.store.exists_where(SeriesModel.path == path)

    # Listen up, the three resolve_* lookups are STRICT: several matches is a reportable
    # condition (AMBIGUOUS), never "just take the first". Remakes share clean titles, so the
    # import pipeline must see the ambiguity instead of silently matching the wrong show.
    # Only the input is lower-cased - stored clean titles/slugs are lower-case already.
    async def resolve_by_title(self, clean_title: str) -> LookupResult:
        """Look up a series by clean title (case-insensitive input)."""
        clean_title = clean_title.lower()
        models = await self.store.query_where(SeriesModel.clean_title == clean_title)
        return self._classify(models, clean_title=clean_title)

    async def resolve_by_title_and_year(self, clean_title: str, year: int) -> LookupResult:
        """Look up a series by clean title and release year."""
        clean_title = clean_title.lower()
        models = await self.store.query_where(
            SeriesModel.clean_title == clean_title,
            SeriesModel.year == year,
        )
        return self._classify(models, clean_title=clean_title, year=year)

    async def resolve_by_title_slug(self, title_slug: str) -> LookupResult:
        """Look up a series by title slug (case-insensitive input)."""
        title_slug = title_slug.lower()
        models = await self.store.query_where(SeriesModel.title_slug == title_slug)
        return self._classify(models, title_slug=title_slug)

    async def find_by_title(self, clean_title: str) -> SeriesRecord | None:
        """Find a series by clean title.

        Raises:
            AmbiguousMatchException: If more than one series has this clean title
        """
        return (await self.resolve_by_title(clean_title)).unwrap()

    async def find_by_title_and_year(self, clean_title: str, year: int) -> SeriesRecord | None:
        """Find a series by clean title and year.

        Raises:
            AmbiguousMatchException: If more than one series matches both
        """
        return (await self.resolve_by_title_and_year(clean_title, year)).unwrap()

    async def find_by_title_slug(self, title_slug: str) -> SeriesRecord | None:
        """Find a series by title slug.

        Raises:
            AmbiguousMatchException: If more than one series has this slug
        """
        return (await self.resolve_by_title_slug(title_slug)).unwrap()

    # Hey - tvdb_id and path lookups are LENIENT: TVDB ids are unique upstream and
    # two series in one folder is a misconfiguration. Duplicates there are a data-integrity
    # problem for someone else - we return the lowest id and move on, no ambiguity handling.
    async def find_by_tvdb_id(self, tvdb_id: int) -> SeriesRecord | None:
        """Find a series by TVDB ID (first match if duplicated)."""
        models = await self.store.query_where(SeriesModel.tvdb_id == tvdb_id, limit=1)
        return self._model_to_entity(models[0]) if models else None

    async def find_by_path(self, path: str) -> SeriesRecord | None:
        """Find a series by exact path (first match if duplicated)."""
        models = await self.store.query_where(SeriesModel.path == path, limit=1)
        return self._model_to_entity(models[0]) if models else None

    # =========================================================================
    # CONTAINMENT LOOKUP
    # =========================================================================

    async def find_by_title_inexact(self, clean_title: str) -> list[SeriesRecord]:
        """Find every series whose stored clean title occurs inside ``clean_title``.

        The stored value is the needle and the argument is the haystack, e.g.
        a parsed release name "The.Office.2005" finds the series "office".
        The haystack is lower-cased like every other title lookup input.
        Returns all matches ordered by id, possibly none.
        """
        clean_title = clean_title.lower()
        if self.containment.filter_in_python:
            models = [
                model
                for model in await self.store.query_where()
                if self.containment.matches(model.clean_title, clean_title)
            ]
        else:
            predicate = self.containment.containment_predicate(
                SeriesModel.clean_title, clean_title
            )
            models = await self.store.query_where(predicate)

        return [self._model_to_entity(model) for model in models]

    # =========================================================================
    # PROJECTIONS
    # =========================================================================

    async def all_tvdb_ids(self) -> list[int]:
        """Get the TVDB ID of every series, duplicates preserved."""
        return await self.store.scalars(SeriesModel.tvdb_id)

    async def all_series_paths(self) -> dict[int, str]:
        """Get a series id -> path mapping for every series."""
        rows = await self.store.rows((SeriesModel.id, SeriesModel.path))
        return {series_id: path for series_id, path in rows}

    async def all_series_tags(self) -> dict[int, list[int]]:
        """Get a series id -> tags mapping.

        Series whose tags are NULL are left out entirely. Series with an
        empty tag list are included with ``[]``.
        """
        rows = await self.store.rows(
            (SeriesModel.id, SeriesModel.tags), SeriesModel.tags.is_not(None)
        )
        return {series_id: list(tags) for series_id, tags in rows}

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _classify(self, models: list[SeriesModel], **criteria: object) -> LookupResult:
        result = LookupResult.from_matches([self._model_to_entity(m) for m in models])
        if result.is_ambiguous:
            logger.warning(
                "Ambiguous series lookup: %d series match %s",
                len(result.matches),
                criteria,
            )
        return result

    @staticmethod
    def _fill_derived_titles(series: SeriesRecord) -> None:
        if not series.clean_title:
            series.clean_title = title_normalization.clean_title(series.title)
        if not series.title_slug:
            series.title_slug = title_normalization.title_slug(series.title)

    @staticmethod
    def _entity_to_model(series: SeriesRecord) -> SeriesModel:
        return SeriesModel(
            id=series.id,
            title=series.title,
            clean_title=series.clean_title,
            title_slug=series.title_slug,
            tvdb_id=series.tvdb_id,
            year=series.year,
            path=series.path,
            tags=list(series.tags) if series.tags is not None else None,
        )

    @staticmethod
    def _model_to_entity(model: SeriesModel) -> SeriesRecord:
        return SeriesRecord(
            id=model.id,
            title=model.title,
            clean_title=model.clean_title,
            title_slug=model.title_slug,
            tvdb_id=model.tvdb_id,
            year=model.year,
            path=model.path,
            tags=list(model.tags) if model.tags is not None else None,
        )

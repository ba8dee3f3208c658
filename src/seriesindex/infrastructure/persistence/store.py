"""Generic SQLAlchemy storage client.

Hey future me - this is the "generic CRUD over one table" piece that repositories HOLD
(composition), instead of inheriting from a base repository. It knows the model class and
the Database, nothing about titles or ambiguity.

Every method opens its own short-lived session through Database.session_scope() and is
done with it before returning. Nothing is cached between calls, so one store instance
can be shared by any number of concurrent asyncio tasks.
"""

import logging
from typing import Any, TypeVar

from sqlalchemy import inspect, select

from seriesindex.domain.exceptions import EntityNotFoundException
from seriesindex.domain.ports import ISeriesStore

from .database import Database
from .models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyStore(ISeriesStore[ModelT]):
    """CRUD and predicate queries over a single ORM model."""

    def __init__(self, database: Database, model: type[ModelT]) -> None:
        """Initialize store for one model class."""
        self.database = database
        self.model = model
        self._primary_key = inspect(model).primary_key[0]

    @property
    def entity_type(self) -> str:
        return self.model.__name__.removesuffix("Model")

    async def add(self, model: ModelT) -> ModelT:
        """Insert a row; the returned instance carries the assigned primary key."""
        async with self.database.session_scope() as session:
            session.add(model)
            # flush so autoincrement ids are populated before the session closes
            await session.flush()
            return model

    async def update(self, model: ModelT) -> ModelT:
        """Overwrite an existing row identified by its primary key."""
        model_id = getattr(model, self._primary_key.key)
        async with self.database.session_scope() as session:
            if await session.get(self.model, model_id) is None:
                raise EntityNotFoundException(self.entity_type, model_id)
            return await session.merge(model)

    async def delete(self, model_id: int) -> None:
        """Delete a row by primary key."""
        async with self.database.session_scope() as session:
            model = await session.get(self.model, model_id)
            if model is None:
                raise EntityNotFoundException(self.entity_type, model_id)
            await session.delete(model)
        logger.debug("Deleted %s %s", self.entity_type, model_id)

    async def get_by_id(self, model_id: int) -> ModelT | None:
        """Get a row by primary key."""
        async with self.database.session_scope() as session:
            return await session.get(self.model, model_id)

    async def query_where(
        self, *predicates: Any, limit: int | None = None
    ) -> list[ModelT]:
        """Get all rows matching every predicate (no predicates = all rows).

        Args:
            *predicates: SQLAlchemy boolean expressions, combined with AND
            limit: Maximum number of rows

        Returns:
            Matching rows ordered by primary key
        """
        stmt = select(self.model).where(*predicates).order_by(self._primary_key)
        if limit is not None:
            stmt = stmt.limit(limit)

        async with self.database.session_scope() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def exists_where(self, *predicates: Any) -> bool:
        """Check whether any row matches every predicate."""
        stmt = select(select(self._primary_key).where(*predicates).exists())
        async with self.database.session_scope() as session:
            result = await session.execute(stmt)
            return bool(result.scalar())

    async def scalars(self, column: Any, *predicates: Any) -> list[Any]:
        """Get one column from every matching row, duplicates included."""
        stmt = select(column).where(*predicates).order_by(self._primary_key)
        async with self.database.session_scope() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def rows(self, columns: tuple[Any, ...], *predicates: Any) -> list[tuple[Any, ...]]:
        """Get several columns from every matching row as plain tuples."""
        stmt = select(*columns).where(*predicates).order_by(self._primary_key)
        async with self.database.session_scope() as session:
            result = await session.execute(stmt)
            return [tuple(row) for row in result.all()]

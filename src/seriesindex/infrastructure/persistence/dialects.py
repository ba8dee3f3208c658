"""Dialect-specific containment predicates for inexact title lookups.

Hey future me - find_by_title_inexact() asks "which stored clean titles occur INSIDE this
long string?" (e.g. a release name like "theoffice2005s01e01"). That's the reverse of a
LIKE '%x%' search: the COLUMN is the needle and the bound PARAMETER is the haystack, so no
LIKE pattern works. Every engine spells "position of needle in haystack" differently:

- SQLite:     instr(haystack, needle)   -> 1-based position, 0 if absent
- PostgreSQL: strpos(haystack, needle)  -> 1-based position, 0 if absent

Both are compared "> 0" so the semantics are identical. Anything else falls back to
loading all rows and testing with Python's ``in`` - correct, but a full scan.

The strategy is chosen ONCE when the repository is built (containment_for), not per call.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import ColumnElement, func, literal

logger = logging.getLogger(__name__)


class ContainmentDialect(ABC):
    """How to express "stored column value is a substring of a given string"."""

    name: str = ""

    # True means the store can't filter; the caller loads every row and calls matches()
    filter_in_python: bool = False

    @abstractmethod
    def containment_predicate(
        self, needle_column: Any, haystack_value: str
    ) -> ColumnElement[bool] | None:
        """Build a WHERE clause, or None when filtering happens in Python."""

    def matches(self, needle: str, haystack_value: str) -> bool:
        """Apply the containment test to one already-loaded value."""
        return needle in haystack_value


class SqliteContainment(ContainmentDialect):
    """SQLite: instr(haystack, needle) > 0."""

    name = "sqlite"

    def containment_predicate(
        self, needle_column: Any, haystack_value: str
    ) -> ColumnElement[bool]:
        return func.instr(literal(haystack_value), needle_column) > 0


class PostgresContainment(ContainmentDialect):
    """PostgreSQL: strpos(haystack, needle) > 0."""

    name = "postgresql"

    def containment_predicate(
        self, needle_column: Any, haystack_value: str
    ) -> ColumnElement[bool]:
        return func.strpos(literal(haystack_value), needle_column) > 0


class PythonContainment(ContainmentDialect):
    """Fallback for engines without a known position function."""

    name = "python"
    filter_in_python = True

    def containment_predicate(self, needle_column: Any, haystack_value: str) -> None:
        return None


_DIALECTS: dict[str, type[ContainmentDialect]] = {
    SqliteContainment.name: SqliteContainment,
    PostgresContainment.name: PostgresContainment,
}


def containment_for(dialect_name: str) -> ContainmentDialect:
    """Pick the containment strategy for a SQLAlchemy dialect name.

    Args:
        dialect_name: Dialect name as reported by the engine ("sqlite", "postgresql", ...)

    Returns:
        Matching strategy, or PythonContainment for unknown dialects
    """
    dialect_cls = _DIALECTS.get(dialect_name)
    if dialect_cls is None:
        logger.warning(
            "No containment function known for dialect '%s', "
            "inexact title lookups will scan all series",
            dialect_name,
        )
        return PythonContainment()
    logger.debug("Using %s containment for inexact title lookups", dialect_cls.name)
    return dialect_cls()

"""Domain exceptions."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from seriesindex.domain.entities import SeriesRecord


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    # Hey future me, we store message as an attribute so code can inspect it without parsing
    # str(exception). Don't raise this directly - use a subclass so callers can catch precisely.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""

    # Only for CRUD by primary key (update/delete of an id that isn't there). Lookups by
    # title/path/tvdb id return None instead - "not found" is normal for them, not exceptional.
    def __init__(self, entity_type: str, entity_id: Any) -> None:
        super().__init__(f"{entity_type} with id {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class AmbiguousMatchException(DomainException):
    """Raised when a lookup expecting at most one series matched several.

    The repository cannot decide which candidate is the right one, so the
    full candidate list travels with the exception and the caller picks
    (or asks the user).

    Example:
        try:
            series = await repo.find_by_title("battlestargalactica")
        except AmbiguousMatchException as e:
            for candidate in e.matches:
                ...
    """

    def __init__(self, matches: "list[SeriesRecord]") -> None:
        super().__init__(
            "Expected one series, but found {}. Matching series: {}".format(
                len(matches), ", ".join(str(match) for match in matches)
            )
        )
        self.matches = list(matches)

    @property
    def count(self) -> int:
        """Number of series that matched."""
        return len(self.matches)


# Old name kept so import code written against "multiple series found" keeps working
MultipleSeriesFoundException = AmbiguousMatchException


__all__ = [
    "DomainException",
    "EntityNotFoundException",
    "AmbiguousMatchException",
    "MultipleSeriesFoundException",
]

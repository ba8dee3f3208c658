"""Outcome of a single-series lookup.

Hey future me - title lookups have THREE outcomes, not two:
1. FOUND: exactly one series matched
2. NOT_FOUND: nothing matched (caller usually creates a new series)
3. AMBIGUOUS: several series matched and we can't pick one

Returning ``SeriesRecord | None`` hides case 3, and silently taking the first row
hands the import pipeline the wrong show. LookupResult makes callers look at all
three. If you just want "record or None, blow up on ambiguity", call unwrap().

Usage:
    result = await repo.resolve_by_title("theoffice")
    if result.is_ambiguous:
        ask_user(result.matches)
    elif result.found:
        use(result.series)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from seriesindex.domain.entities import SeriesRecord
from seriesindex.domain.exceptions import AmbiguousMatchException


class LookupStatus(str, Enum):
    """How many series a single-result lookup matched."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class LookupResult:
    """Result of a lookup that should resolve to at most one series."""

    status: LookupStatus
    matches: tuple[SeriesRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_matches(cls, matches: Sequence[SeriesRecord]) -> "LookupResult":
        """Classify a result set by its size."""
        if not matches:
            return cls(LookupStatus.NOT_FOUND)
        if len(matches) == 1:
            return cls(LookupStatus.FOUND, (matches[0],))
        return cls(LookupStatus.AMBIGUOUS, tuple(matches))

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_ambiguous(self) -> bool:
        return self.status is LookupStatus.AMBIGUOUS

    @property
    def series(self) -> SeriesRecord | None:
        """The matched series, only set when status is FOUND."""
        return self.matches[0] if self.found else None

    def unwrap(self) -> SeriesRecord | None:
        """Return the single match or None.

        Raises:
            AmbiguousMatchException: If more than one series matched
        """
        if self.is_ambiguous:
            raise AmbiguousMatchException(list(self.matches))
        return self.series

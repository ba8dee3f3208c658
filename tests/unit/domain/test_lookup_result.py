"""Tests for LookupResult and AmbiguousMatchException."""

import pytest

from seriesindex.domain.entities import SeriesRecord
from seriesindex.domain.exceptions import (
    AmbiguousMatchException,
    DomainException,
    MultipleSeriesFoundException,
)
from seriesindex.domain.value_objects import LookupResult, LookupStatus


def series(series_id: int, title: str = "Show") -> SeriesRecord:
    return SeriesRecord(
        id=series_id, title=title, clean_title="show", path=f"/tv/{series_id}", year=2000, tvdb_id=1
    )


class TestLookupResult:
    """Test classification of result sets."""

    def test_no_matches_is_not_found(self) -> None:
        result = LookupResult.from_matches([])

        assert result.status is LookupStatus.NOT_FOUND
        assert result.series is None
        assert result.unwrap() is None

    def test_single_match_is_found(self) -> None:
        record = series(1)
        result = LookupResult.from_matches([record])

        assert result.found is True
        assert result.series is record
        assert result.unwrap() is record

    def test_several_matches_are_ambiguous(self) -> None:
        result = LookupResult.from_matches([series(1), series(2)])

        assert result.is_ambiguous is True
        assert result.series is None
        with pytest.raises(AmbiguousMatchException) as exc_info:
            result.unwrap()
        assert [m.id for m in exc_info.value.matches] == [1, 2]


class TestAmbiguousMatchException:
    """Test the ambiguity error."""

    def test_message_lists_count_and_series(self) -> None:
        error = AmbiguousMatchException([series(1, "Show"), series(2, "Show (2005)")])

        assert error.count == 2
        assert error.message == (
            "Expected one series, but found 2. Matching series: [1] Show, [2] Show (2005)"
        )

    def test_is_domain_exception(self) -> None:
        assert isinstance(AmbiguousMatchException([]), DomainException)

    def test_legacy_alias(self) -> None:
        assert MultipleSeriesFoundException is AmbiguousMatchException

"""Tests for clean title and slug normalization."""

import pytest

from seriesindex.domain.value_objects import clean_title, title_slug


class TestCleanTitle:
    """Test clean title generation."""

    @pytest.mark.parametrize(
        "title, expected",
        [
            ("The Office (US)", "officeus"),
            ("Law & Order: SVU", "lawandordersvu"),
            ("Pokémon", "pokemon"),
            ("24", "24"),
            ("The", "the"),
            ("A Touch of Frost", "touchoffrost"),
            ("  Doctor Who  ", "doctorwho"),
        ],
    )
    def test_clean_title(self, title: str, expected: str) -> None:
        assert clean_title(title) == expected

    def test_article_only_removed_at_start(self) -> None:
        assert clean_title("Into the Badlands") == "intothebadlands"


class TestTitleSlug:
    """Test slug generation."""

    @pytest.mark.parametrize(
        "title, expected",
        [
            ("Grey's Anatomy", "greys-anatomy"),
            ("The Office (US)", "the-office-us"),
            ("Marvel's Agents of S.H.I.E.L.D.", "marvels-agents-of-s-h-i-e-l-d"),
            ("Café Society", "cafe-society"),
        ],
    )
    def test_title_slug(self, title: str, expected: str) -> None:
        assert title_slug(title) == expected

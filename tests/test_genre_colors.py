"""
Genre color resolver tests.
"""
import pytest

from app.services.genre_colors import (
    DEFAULT_GENRE_COLOR,
    GENRE_CATEGORIES,
    parse_genre_code,
    resolve_genre_category,
    resolve_genre_color,
)


def _color(key: str) -> str:
    return next(category.color for category in GENRE_CATEGORIES if category.key == key)


class TestNumericCodes:
    """Numeric DVB content codes"""

    def test_sport_code(self):
        """Code 67 falls in the sport range 64-79."""
        assert resolve_genre_color(67) == _color("sport")

    @pytest.mark.parametrize("code", [64, 79, "64", "0x4F", 70.0])
    def test_sport_range_edges_and_forms(self, code):
        assert resolve_genre_category(code).key == "sport"

    def test_movie_code(self):
        assert resolve_genre_category(0x10).key == "movie"

    def test_unowned_code_is_default(self):
        """Codes outside every range resolve to the default color."""
        assert resolve_genre_color(250) == DEFAULT_GENRE_COLOR
        assert resolve_genre_color(0) == DEFAULT_GENRE_COLOR

    def test_numeric_string_does_not_fall_back_to_keywords(self):
        assert resolve_genre_category("999") is None


class TestKeywords:
    """Free-text labels"""

    def test_case_insensitive(self):
        assert resolve_genre_category("SPORT").key == "sport"

    def test_substring_match(self):
        assert resolve_genre_category("Football / Soccer").key == "sport"

    def test_hungarian_labels(self):
        assert resolve_genre_category("Hírek").key == "news"
        assert resolve_genre_category("Rajzfilm").key == "children"
        assert resolve_genre_category("Dokumentumfilm").key == "education"

    def test_first_category_wins(self):
        """A label matching several categories resolves to the earliest one."""
        assert resolve_genre_category("sport news").key == "news"

    def test_unknown_label(self):
        assert resolve_genre_color("xyzzy") == DEFAULT_GENRE_COLOR


class TestSequences:
    """Multi-entry genre data"""

    def test_first_resolving_entry_wins(self):
        assert resolve_genre_category(["unknown", 0x40, 0x10]).key == "sport"

    def test_skips_unresolved_entries(self):
        assert resolve_genre_category([None, "", 250, "Movie"]).key == "movie"

    def test_all_unresolved(self):
        assert resolve_genre_color([250, "???"]) == DEFAULT_GENRE_COLOR

    def test_tuple_input(self):
        assert resolve_genre_category(("Music",)).key == "music"


class TestTotality:
    """Resolution never fails"""

    @pytest.mark.parametrize(
        "genre",
        [None, "", [], {}, True, object(), float("nan"), float("inf"), b"sport", "0xZZ", [[64]], 67.5],
    )
    def test_garbage_returns_a_color(self, genre):
        assert isinstance(resolve_genre_color(genre), str)

    def test_deterministic(self):
        assert resolve_genre_color(["x", 96]) == resolve_genre_color(["x", 96])


class TestParseGenreCode:
    """Tests for parse_genre_code"""

    @pytest.mark.parametrize(
        "value,expected",
        [(67, 67), ("67", 67), (" 67 ", 67), ("0x43", 67), (67.0, 67), ("67.0", 67)],
    )
    def test_numeric_forms(self, value, expected):
        assert parse_genre_code(value) == expected

    @pytest.mark.parametrize("value", [None, True, "sport", "", 67.5, "0xZZ"])
    def test_non_numeric(self, value):
        assert parse_genre_code(value) is None

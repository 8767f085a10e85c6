"""
Genre Color Resolver

Maps genre data (DVB content codes or free-text labels) to a display color using a
static, ordered category table. Lookups are pure and never raise.
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final


DEFAULT_GENRE_COLOR: Final = "#607d8b"


@dataclass(slots=True, frozen=True)
class GenreCategory:
    """One row of the classification table"""
    key: str
    color: str
    code_ranges: tuple[range, ...]
    keywords: tuple[str, ...]

    def owns_code(self, code: int) -> bool:
        return any(code in code_range for code_range in self.code_ranges)

    def matches_text(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


def _nibble(level1: int) -> range:
    """Full-byte DVB content codes sharing a level-1 nibble, e.g. 0x4 -> 0x40..0x4F"""
    return range(level1 << 4, (level1 << 4) + 0x10)


# Scan order matters for keywords: "rajzfilm" must hit children before movie,
# "dokumentumfilm" must hit education before movie.
GENRE_CATEGORIES: Final[tuple[GenreCategory, ...]] = (
    GenreCategory(
        key="news",
        color="#1e88e5",
        code_ranges=(_nibble(0x2),),
        keywords=("news", "hírek", "híradó", "weather", "időjárás", "current affairs"),
    ),
    GenreCategory(
        key="sport",
        color="#43a047",
        code_ranges=(_nibble(0x4),),
        keywords=(
            "sport", "football", "soccer", "foci", "labdarúgás", "tennis", "tenisz",
            "formula", "olympic", "olimpia", "kézilabda", "athletics",
        ),
    ),
    GenreCategory(
        key="children",
        color="#fdd835",
        code_ranges=(_nibble(0x5),),
        keywords=(
            "child", "kids", "gyerek", "cartoon", "animation", "animáció",
            "rajzfilm", "mese", "youth", "ifjúsági",
        ),
    ),
    GenreCategory(
        key="education",
        color="#00897b",
        code_ranges=(_nibble(0x9),),
        keywords=(
            "education", "oktat", "documentary", "dokumentum", "nature", "természet",
            "history", "történelem", "technolog", "tudomány", "ismeretterjesztő",
        ),
    ),
    GenreCategory(
        key="movie",
        color="#e53935",
        code_ranges=(_nibble(0x1),),
        keywords=(
            "movie", "film", "drama", "dráma", "thriller", "comedy", "vígjáték",
            "western", "horror", "sci-fi", "romance", "romantikus", "crime", "krimi",
            "adventure", "kaland", "action", "akció", "series", "sorozat", "soap",
        ),
    ),
    GenreCategory(
        key="show",
        color="#8e24aa",
        code_ranges=(_nibble(0x3),),
        keywords=(
            "show", "game", "quiz", "kvíz", "vetélkedő", "talk", "reality",
            "entertainment", "szórakoz",
        ),
    ),
    GenreCategory(
        key="music",
        color="#d81b60",
        code_ranges=(_nibble(0x6),),
        keywords=("music", "zene", "concert", "koncert", "ballet", "balett", "dance", "tánc", "opera"),
    ),
    GenreCategory(
        key="arts",
        color="#6d4c41",
        code_ranges=(_nibble(0x7),),
        keywords=(
            "arts", "culture", "kultúr", "kultur", "theatre", "theater", "színház",
            "religion", "vallás", "literature", "irodalom",
        ),
    ),
    GenreCategory(
        key="social",
        color="#546e7a",
        code_ranges=(_nibble(0x8),),
        keywords=(
            "social", "politi", "economic", "gazdaság", "magazine",
            "magazin", "report", "riport", "interview",
        ),
    ),
    GenreCategory(
        key="leisure",
        color="#fb8c00",
        code_ranges=(_nibble(0xA),),
        keywords=(
            "leisure", "hobby", "hobbi", "travel", "utazás", "cooking", "főzés",
            "gasztro", "fitness", "health", "egészség", "garden", "kert",
            "fashion", "divat", "shopping",
        ),
    ),
)


def parse_genre_code(value: Any) -> int | None:
    """
    Interpret a genre entry as a numeric content code.

    Accepts ints, integral floats, decimal strings and '0x'-prefixed hex strings.

    Returns:
        The integer code, or None when the entry is not numeric
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) and value.is_integer() else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text.lower().startswith("0x"):
        try:
            return int(text, 16)
        except ValueError:
            return None
    try:
        number = float(text)
    except ValueError:
        return None
    return int(number) if math.isfinite(number) and number.is_integer() else None


def _is_numeric_like(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("0x"):
            return True
        try:
            float(text)
        except ValueError:
            return False
        return True
    return False


def _resolve_entry(value: Any) -> GenreCategory | None:
    """Resolve a single genre entry to its category"""
    if _is_numeric_like(value):
        code = parse_genre_code(value)
        if code is None:
            return None
        for category in GENRE_CATEGORIES:
            if category.owns_code(code):
                return category
        return None

    if not isinstance(value, str):
        return None

    text = value.strip().lower()
    if not text:
        return None
    for category in GENRE_CATEGORIES:
        if category.matches_text(text):
            return category
    return None


def resolve_genre_category(genre: Any) -> GenreCategory | None:
    """
    Resolve genre data to a category.

    Args:
        genre: None, a single code/label, or a sequence of codes/labels

    Returns:
        The category of the first entry that resolves, or None
    """
    if genre is None:
        return None

    if isinstance(genre, Sequence) and not isinstance(genre, (str, bytes)):
        entries = genre
    else:
        entries = (genre,)

    for entry in entries:
        category = _resolve_entry(entry)
        if category is not None:
            return category
    return None


def resolve_genre_color(genre: Any) -> str:
    """Color for genre data, falling back to DEFAULT_GENRE_COLOR"""
    category = resolve_genre_category(genre)
    return category.color if category is not None else DEFAULT_GENRE_COLOR

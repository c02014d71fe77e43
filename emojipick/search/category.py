"""Emoji category classifier used for presentation order."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Presentation buckets, in display order."""
    SMILEYS = "smileys"
    PEOPLE = "people"
    ANIMALS = "animals"
    FOOD = "food"
    ACTIVITIES = "activities"
    TRAVEL = "travel"
    OBJECTS = "objects"
    SYMBOLS = "symbols"
    FLAGS = "flags"
    OTHER = "other"

    @property
    def rank(self) -> int:
        """Sort position; OTHER is always last."""
        return _CATEGORY_ORDER.index(self)

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


_CATEGORY_ORDER = tuple(Category)

CATEGORY_LABELS = {
    Category.SMILEYS: "Smileys",
    Category.PEOPLE: "People & Body",
    Category.ANIMALS: "Animals & Nature",
    Category.FOOD: "Food & Drink",
    Category.ACTIVITIES: "Activities",
    Category.TRAVEL: "Travel & Places",
    Category.OBJECTS: "Objects",
    Category.SYMBOLS: "Symbols",
    Category.FLAGS: "Flags",
    Category.OTHER: "Other",
}

# (first, last, category), inclusive, tested top to bottom
CATEGORY_RANGES: tuple[tuple[int, int, Category], ...] = (
    (0x1F600, 0x1F64F, Category.SMILEYS),
    (0x1F466, 0x1F487, Category.PEOPLE),
    (0x1F574, 0x1F5FF, Category.PEOPLE),
    (0x1F926, 0x1F937, Category.PEOPLE),
    (0x1F9D0, 0x1F9FF, Category.PEOPLE),
    (0x1F400, 0x1F43F, Category.ANIMALS),
    (0x1F980, 0x1F9CF, Category.ANIMALS),
    (0x1F32D, 0x1F37F, Category.FOOD),
    (0x1F950, 0x1F96F, Category.FOOD),
    (0x1F3A0, 0x1F3F0, Category.ACTIVITIES),
    (0x1F93A, 0x1F94F, Category.ACTIVITIES),
    (0x1F680, 0x1F6FF, Category.TRAVEL),
    (0x1F4A0, 0x1F4FF, Category.OBJECTS),
    (0x1F50A, 0x1F53D, Category.OBJECTS),
    (0x1F56F, 0x1F570, Category.OBJECTS),
    (0x1F300, 0x1F320, Category.SYMBOLS),
    (0x2600, 0x26FF, Category.SYMBOLS),
    (0x2700, 0x27BF, Category.SYMBOLS),
    (0x1F1E6, 0x1F1FF, Category.FLAGS),
)


def classify_codepoint(codepoint: int) -> Category:
    """Bucket for a single code point; first matching range wins."""
    for first, last, category in CATEGORY_RANGES:
        if first <= codepoint <= last:
            return category
    return Category.OTHER


def classify(glyph: str) -> Category:
    """Bucket for a glyph, decided by its leading code point."""
    if not glyph:
        return Category.OTHER
    return classify_codepoint(ord(glyph[0]))

"""Annotation data models: per-locale readings, fetch outcomes and index records."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

# Variation selectors only change presentation, never identity
VARIATION_SELECTORS = frozenset({0xFE0E, 0xFE0F})


def glyph_codepoints(glyph: str) -> list[str]:
    """Hex code points of a glyph, without variation selectors."""
    return [f"{ord(c):x}" for c in glyph if ord(c) not in VARIATION_SELECTORS]


class AnnotationEntry(BaseModel):
    """What one locale says about one glyph."""

    name: str | None = Field(default=None, description="Display name candidate (tts)")
    keywords: list[str] = Field(default_factory=list, description="Keyword candidates")


class LocaleReading(BaseModel):
    """All annotations a single locale contributed, keyed by glyph."""

    locale: str
    entries: dict[str, AnnotationEntry] = Field(default_factory=dict)

    def entry(self, glyph: str) -> AnnotationEntry:
        """Get or create the entry for a glyph."""
        if glyph not in self.entries:
            self.entries[glyph] = AnnotationEntry()
        return self.entries[glyph]

    def __len__(self) -> int:
        return len(self.entries)


class FailureReason(str, Enum):
    """Why a locale could not contribute to the index."""
    INVALID_LOCALE = "invalid_locale"
    HTTP_STATUS = "http_status"
    TIMEOUT = "timeout"
    TOO_LARGE = "too_large"
    MALFORMED = "malformed"
    NETWORK = "network"


class LocaleResult(BaseModel):
    """Outcome of reading one locale: either a reading or a tagged failure."""

    locale: str
    reading: LocaleReading | None = None
    failure: FailureReason | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.reading is not None

    @classmethod
    def success(cls, reading: LocaleReading) -> "LocaleResult":
        return cls(locale=reading.locale, reading=reading)

    @classmethod
    def failed(cls, locale: str, reason: FailureReason, message: str) -> "LocaleResult":
        return cls(locale=locale, failure=reason, message=message)


class EmojiRecord(BaseModel):
    """A single entry of the emoji index."""

    model_config = ConfigDict(frozen=True)

    glyph: str = Field(..., min_length=1, description="Exact code point sequence")
    name: str = Field(..., min_length=1, description="Display name")
    keywords: tuple[str, ...] = Field(default=(), description="Lowercase search terms")

    @field_validator("keywords")
    @classmethod
    def normalize_keywords(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Lowercase, deduplicate and sort, dropping blank terms."""
        return tuple(sorted({k.strip().lower() for k in v if k.strip()}))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def codepoints(self) -> str:
        """Dash separated hex code points, e.g. '1f468-1f3fb'."""
        return "-".join(glyph_codepoints(self.glyph))

    @property
    def image_filename(self) -> str:
        """Noto Emoji asset filename, e.g. 'emoji_u1f468_1f3fb.png'."""
        return "emoji_u" + "_".join(glyph_codepoints(self.glyph)) + ".png"

    def matches(self, needle: str) -> bool:
        """Check if a lowercase needle is a substring of any keyword."""
        return any(needle in keyword for keyword in self.keywords)

"""Models for the emitted emoji index artifact."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field

from emojipick.models.annotation import EmojiRecord

INDEX_VERSION = 1


class IndexEntry(BaseModel):
    """Artifact form of one record (the glyph is the mapping key)."""

    name: str
    keywords: list[str] = Field(default_factory=list)


class EmojiIndex(BaseModel):
    """The load-once index consumed by the lookup database."""

    version: int = INDEX_VERSION
    locales: list[str] = Field(default_factory=list, description="Locales that contributed")
    emojis: dict[str, IndexEntry] = Field(
        default_factory=dict, description="Map of glyph -> entry"
    )

    @classmethod
    def load(cls, path: Path) -> "EmojiIndex":
        """Load an index artifact from a JSON file."""
        if not path.exists():
            raise FileNotFoundError(f"Emoji index not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls.model_validate(data)

    @classmethod
    def from_records(cls, records: dict[str, EmojiRecord], locales: list[str]) -> "EmojiIndex":
        """Build the artifact model with glyphs and keywords in sorted order."""
        emojis = {
            glyph: IndexEntry(
                name=records[glyph].name,
                keywords=sorted(set(records[glyph].keywords)),
            )
            for glyph in sorted(records)
        }
        return cls(locales=list(locales), emojis=emojis)

    def to_records(self) -> list[EmojiRecord]:
        """Convert entries back into records."""
        return [
            EmojiRecord(glyph=glyph, name=entry.name or glyph, keywords=tuple(entry.keywords))
            for glyph, entry in self.emojis.items()
        ]

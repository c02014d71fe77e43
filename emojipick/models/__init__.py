"""Data models for emojipick."""

from emojipick.models.annotation import (
    AnnotationEntry,
    EmojiRecord,
    FailureReason,
    LocaleReading,
    LocaleResult,
    glyph_codepoints,
)
from emojipick.models.config import AggregatorConfig, EmojiPickConfig, InjectorConfig
from emojipick.models.index import EmojiIndex, IndexEntry

__all__ = [
    # Annotation models
    "AnnotationEntry",
    "LocaleReading",
    "LocaleResult",
    "FailureReason",
    "EmojiRecord",
    "glyph_codepoints",
    # Artifact models
    "EmojiIndex",
    "IndexEntry",
    # Configuration
    "AggregatorConfig",
    "InjectorConfig",
    "EmojiPickConfig",
]

"""Fold per-locale readings into one glyph -> record mapping."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from emojipick.aggregator.locales import BASELINE_LOCALE
from emojipick.models.annotation import EmojiRecord, LocaleReading, LocaleResult


@dataclass
class _MergedEntry:
    name: str = ""
    keywords: set[str] = field(default_factory=set)

    def add_keyword(self, phrase: str) -> None:
        keyword = phrase.strip().lower()
        if keyword:
            self.keywords.add(keyword)


class AnnotationMerger:
    """Merges locale readings with baseline-first precedence.

    Rules per glyph, applied in fold order:
    - the baseline name always wins; other locales only fill a missing name
    - every name and keyword from every locale becomes a lowercase keyword
    - glyphs that never received a name fall back to the glyph itself
    """

    def __init__(self, baseline_locale: str = BASELINE_LOCALE) -> None:
        self.baseline_locale = baseline_locale
        self._entries: dict[str, _MergedEntry] = {}
        self._locales: list[str] = []

    @property
    def locales(self) -> list[str]:
        """Locales folded so far, in fold order."""
        return list(self._locales)

    def add(self, reading: LocaleReading) -> None:
        """Fold one locale reading into the mapping."""
        if not self._locales and reading.locale != self.baseline_locale:
            raise ValueError(
                f"Baseline locale {self.baseline_locale!r} must be merged first, "
                f"got {reading.locale!r}"
            )

        is_baseline = reading.locale == self.baseline_locale
        for glyph, annotation in reading.entries.items():
            entry = self._entries.setdefault(glyph, _MergedEntry())

            if annotation.name:
                if not entry.name or is_baseline:
                    entry.name = annotation.name
                entry.add_keyword(annotation.name)

            for keyword in annotation.keywords:
                entry.add_keyword(keyword)

        self._locales.append(reading.locale)

    def merge(self, results: Iterable[LocaleResult]) -> dict[str, EmojiRecord]:
        """Fold all successful results in the given order and finalize."""
        for result in results:
            if result.reading is not None:
                self.add(result.reading)
        return self.records()

    def records(self) -> dict[str, EmojiRecord]:
        """Finalized records keyed by glyph."""
        return {
            glyph: EmojiRecord(
                glyph=glyph,
                name=entry.name or glyph,
                keywords=tuple(sorted(entry.keywords)),
            )
            for glyph, entry in self._entries.items()
        }

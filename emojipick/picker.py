"""Main EmojiPicker class - composition point for the lookup database and injector."""

from __future__ import annotations

from pathlib import Path

from emojipick.aggregator.runner import AggregationResult, AnnotationAggregator
from emojipick.injection.injector import TextInjector
from emojipick.models.annotation import EmojiRecord
from emojipick.models.config import EmojiPickConfig
from emojipick.search.database import EmojiDatabase


class EmojiPicker:
    """Owns the lookup database and hands it to whatever consumes it."""

    def __init__(
        self,
        config: EmojiPickConfig | None = None,
        *,
        database: EmojiDatabase | None = None,
        index_path: str | Path | None = None,
        injector: TextInjector | None = None,
    ) -> None:
        self.config = config or EmojiPickConfig()
        self.index_path = Path(index_path) if index_path else None
        self._database = database
        self._injector = injector

    @property
    def database(self) -> EmojiDatabase:
        if self._database is None:
            if self.index_path is not None:
                self._database = EmojiDatabase.load(self.index_path)
            else:
                self._database = EmojiDatabase.load_default()
        return self._database

    @property
    def injector(self) -> TextInjector:
        if self._injector is None:
            self._injector = TextInjector(self.config.injector)
        return self._injector

    def get_all(self) -> list[EmojiRecord]:
        return self.database.get_all()

    def search(self, query: str, max_results: int = 50) -> list[EmojiRecord]:
        return self.database.search(query, max_results)

    def get(self, glyph: str) -> EmojiRecord | None:
        return self.database.get(glyph)

    def type_emoji(self, glyph: str, window_id: str | None = None) -> str:
        """Paste a glyph into a window (the active one by default). Returns the window ID."""
        target = window_id or self.injector.active_window()
        self.injector.type_emoji(glyph, target)
        return target

    def aggregator(self) -> AnnotationAggregator:
        return AnnotationAggregator(self.config.aggregator)

    async def build_index(
        self,
        extra_locales: list[str] | None = None,
        output_path: Path | None = None,
    ) -> AggregationResult:
        """Rebuild the index artifact. The loaded database is left untouched."""
        aggregator = self.aggregator()
        locales = aggregator.candidate_locales(extra_locales or [])
        return await aggregator.build(locales, output_path=output_path)

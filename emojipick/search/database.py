"""In-process emoji lookup database."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from importlib import resources
from pathlib import Path
from types import MappingProxyType

from emojipick.models.annotation import EmojiRecord
from emojipick.models.index import EmojiIndex
from emojipick.search.category import Category, classify

DEFAULT_INDEX_RESOURCE = "emoji_index.json"


def presentation_key(record: EmojiRecord) -> tuple[int, int, str]:
    """Sort key: category rank, then leading code point, then name."""
    leading = ord(record.glyph[0]) if record.glyph else 0
    return (classify(record.glyph).rank, leading, record.name)


class EmojiDatabase:
    """Read-only glyph -> record lookup built once from the index artifact.

    Records are sorted into presentation order at construction and never
    mutated afterwards, so instances can be shared between concurrent readers.
    """

    def __init__(self, records: Iterable[EmojiRecord], locales: Iterable[str] = ()) -> None:
        ordered = sorted(records, key=lambda r: (presentation_key(r), r.glyph))
        self._records: tuple[EmojiRecord, ...] = tuple(ordered)
        self._by_glyph: Mapping[str, EmojiRecord] = MappingProxyType(
            {record.glyph: record for record in ordered}
        )
        self.locales: tuple[str, ...] = tuple(locales)

    @classmethod
    def from_index(cls, index: EmojiIndex) -> "EmojiDatabase":
        return cls(index.to_records(), index.locales)

    @classmethod
    def load(cls, path: Path) -> "EmojiDatabase":
        """Load from an index artifact on disk."""
        return cls.from_index(EmojiIndex.load(path))

    @classmethod
    def load_default(cls) -> "EmojiDatabase":
        """Load the artifact bundled with the package."""
        resource = resources.files("emojipick.data").joinpath(DEFAULT_INDEX_RESOURCE)
        with resources.as_file(resource) as path:
            return cls.load(path)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, glyph: object) -> bool:
        return glyph in self._by_glyph

    def __iter__(self) -> Iterator[EmojiRecord]:
        return iter(self._records)

    def get(self, glyph: str) -> EmojiRecord | None:
        """Get the record for an exact glyph."""
        return self._by_glyph.get(glyph)

    def get_all(self) -> list[EmojiRecord]:
        """Every record in presentation order."""
        return list(self._records)

    def search(self, query: str, max_results: int) -> list[EmojiRecord]:
        """Case-insensitive substring search over all keywords.

        An empty query returns the first ``max_results`` records. Matches are
        returned in presentation order and the scan stops once
        ``max_results`` records have been found.
        """
        if max_results <= 0:
            return []

        if not query:
            return list(self._records[:max_results])

        needle = query.lower()
        results: list[EmojiRecord] = []
        for record in self._records:
            if record.matches(needle):
                results.append(record)
                if len(results) >= max_results:
                    break
        return results

    def stats(self) -> dict[str, int]:
        """Record counts per category."""
        counts = {category.value: 0 for category in Category}
        for record in self._records:
            counts[classify(record.glyph).value] += 1
        counts["total"] = len(self._records)
        return counts

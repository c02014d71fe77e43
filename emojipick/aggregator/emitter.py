"""Index emitter: writes the merged records as a deterministic JSON artifact."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from emojipick.models.annotation import EmojiRecord
from emojipick.models.index import EmojiIndex

logger = logging.getLogger(__name__)


class IndexEmitter:
    """Serializes records into the artifact loaded by the lookup database.

    Output is byte-for-byte reproducible for identical input:
    glyphs sorted by code point, keywords deduplicated and sorted,
    no timestamps.

    Artifact structure:
        {
          "version": 1,
          "locales": ["en", "de"],
          "emojis": {"😀": {"name": "grinning face", "keywords": ["face", ...]}}
        }
    """

    def __init__(self, compact: bool = False) -> None:
        self.compact = compact

    def render(self, records: dict[str, EmojiRecord], locales: list[str]) -> str:
        """Render the artifact as text."""
        index = EmojiIndex.from_records(records, locales)
        data = index.model_dump(mode="json")
        if self.compact:
            content = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
        else:
            content = json.dumps(data, ensure_ascii=False, indent=2)
        return content + "\n"

    def write(self, path: Path, records: dict[str, EmojiRecord], locales: list[str]) -> int:
        """Write the artifact to disk. Returns the number of emoji written."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.render(records, locales).encode("utf-8"))
        logger.info(f"Wrote {len(records)} emoji for {len(locales)} locales to {path}")
        return len(records)

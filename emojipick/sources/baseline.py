"""Baseline source: the trusted, bundled English annotations."""

from __future__ import annotations

import logging
from pathlib import Path

from emojipick.errors import BaselineMissing, SourceUnavailable
from emojipick.models.annotation import LocaleReading
from emojipick.sources.base import AnnotationSource

logger = logging.getLogger(__name__)


class BaselineSource(AnnotationSource):
    """Reads the baseline locale from a local JSON or XML file.

    Any failure is fatal to the aggregation run.
    """

    def __init__(self, path: Path, locale: str = "en") -> None:
        self.path = path
        self.locale = locale

    async def read(self, locale: str | None = None) -> LocaleReading:
        return self.read_sync()

    def read_sync(self) -> LocaleReading:
        """Load and parse the baseline file."""
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise BaselineMissing(f"Cannot read baseline annotations {self.path}: {e}") from e

        try:
            reading = self.parse(data, self.locale, self.path.name)
        except SourceUnavailable as e:
            raise BaselineMissing(f"Cannot parse baseline annotations {self.path}: {e.message}") from e

        if not reading.entries:
            raise BaselineMissing(f"Baseline annotations {self.path} contain no emoji")

        logger.info(f"Loaded {len(reading)} baseline annotations for {self.locale} from {self.path}")
        return reading

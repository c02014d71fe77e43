"""Base annotation source interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePath

from emojipick.models.annotation import LocaleReading
from emojipick.sources.parser import parse_annotations_json, parse_annotations_xml


class AnnotationSource(ABC):
    """Abstract base class for annotation sources."""

    @abstractmethod
    async def read(self, locale: str) -> LocaleReading:
        """Read one locale's annotations."""
        ...

    @staticmethod
    def parse(data: bytes, locale: str, filename: str) -> LocaleReading:
        """Parse raw document bytes, choosing the format by file suffix."""
        if PurePath(filename).suffix.lower() == ".json":
            return parse_annotations_json(data, locale)
        return parse_annotations_xml(data, locale)

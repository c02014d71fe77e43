"""Annotation sources (bundled baseline and remote CLDR)."""

from emojipick.sources.base import AnnotationSource
from emojipick.sources.baseline import BaselineSource
from emojipick.sources.parser import (
    parse_annotations_json,
    parse_annotations_xml,
    validate_locale,
)
from emojipick.sources.remote import RemoteSource

__all__ = [
    "AnnotationSource",
    "BaselineSource",
    "RemoteSource",
    "parse_annotations_json",
    "parse_annotations_xml",
    "validate_locale",
]

"""Parsers for CLDR annotation documents (XML and JSON)."""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from typing import Any

from emojipick.errors import InvalidLocale, MalformedDocument
from emojipick.models.annotation import LocaleReading

LOCALE_PATTERN = re.compile(r"[a-z_-]+")

# CLDR marks the display name with type="tts"
NAME_TYPES = frozenset({"tts", "name"})

KEYWORD_SEPARATOR = "|"


def validate_locale(locale: str) -> str:
    """Return the locale unchanged if it is safe to embed in a URL."""
    if not LOCALE_PATTERN.fullmatch(locale):
        raise InvalidLocale(locale)
    return locale


def split_keywords(text: str) -> list[str]:
    """Split a '|' separated keyword list, trimming and dropping empty phrases."""
    phrases = (phrase.strip() for phrase in text.split(KEYWORD_SEPARATOR))
    return [phrase for phrase in phrases if phrase]


def parse_annotations_xml(data: bytes | str, locale: str) -> LocaleReading:
    """Parse a CLDR LDML annotations document.

    Handles:
    - <annotation cp="😀" type="tts">grinning face</annotation>  (name)
    - <annotation cp="😀">face | grin</annotation>              (keywords)
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedDocument(locale, f"invalid XML: {e}") from e

    reading = LocaleReading(locale=locale)
    for node in root.iterfind("./annotations/annotation"):
        glyph = node.get("cp", "")
        if not glyph:
            continue

        text = node.text or ""
        entry = reading.entry(glyph)
        if node.get("type") in NAME_TYPES:
            name = text.strip()
            if name and entry.name is None:
                entry.name = name
        else:
            entry.keywords.extend(split_keywords(text))

    return reading


def _as_list(value: Any) -> list[str]:
    if isinstance(value, list):
        return [str(v) for v in value]
    if value:
        return [str(value)]
    return []


def parse_annotations_json(data: bytes | str, locale: str) -> LocaleReading:
    """Parse JSON annotations.

    Two shapes are accepted:
    - compact: {"😀": ["grinning face", "face", "grin"]} (element 0 is the name)
    - CLDR-JSON: {"annotations": {"annotations": {"😀": {"tts": [...], "default": [...]}}}}
    """
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedDocument(locale, f"invalid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise MalformedDocument(locale, "expected a JSON object")

    reading = LocaleReading(locale=locale)

    if isinstance(raw.get("annotations"), dict):
        annotations = raw["annotations"].get("annotations", {})
        for glyph, payload in annotations.items():
            if not glyph or not isinstance(payload, dict):
                continue
            names = [n.strip() for n in _as_list(payload.get("tts")) if n.strip()]
            keywords = [k.strip() for k in _as_list(payload.get("default")) if k.strip()]
            entry = reading.entry(glyph)
            if names:
                entry.name = names[0]
            entry.keywords.extend(keywords)
        return reading

    for glyph, values in raw.items():
        if not glyph or not isinstance(values, list) or not values:
            continue
        phrases = [str(v).strip() for v in values]
        entry = reading.entry(glyph)
        if phrases[0]:
            entry.name = phrases[0]
        entry.keywords.extend(p for p in phrases[1:] if p)

    return reading

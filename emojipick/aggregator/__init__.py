"""Multilingual emoji annotation aggregator."""

from emojipick.aggregator.emitter import IndexEmitter
from emojipick.aggregator.locales import discover_locales, extract_language, host_locale_tokens
from emojipick.aggregator.merger import AnnotationMerger
from emojipick.aggregator.runner import AggregationResult, AnnotationAggregator

__all__ = [
    "AnnotationAggregator",
    "AggregationResult",
    "AnnotationMerger",
    "IndexEmitter",
    "discover_locales",
    "extract_language",
    "host_locale_tokens",
]

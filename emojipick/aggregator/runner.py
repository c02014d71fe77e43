"""Aggregation run: discover locales, read sources, merge and emit."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from emojipick.aggregator.emitter import IndexEmitter
from emojipick.aggregator.locales import discover_locales, host_locale_tokens
from emojipick.aggregator.merger import AnnotationMerger
from emojipick.models.annotation import EmojiRecord, LocaleResult
from emojipick.models.config import AggregatorConfig
from emojipick.sources.baseline import BaselineSource
from emojipick.sources.remote import RemoteSource

logger = logging.getLogger(__name__)


@dataclass
class AggregationResult:
    """Merged records plus the outcome of every locale that was attempted."""

    records: dict[str, EmojiRecord]
    results: list[LocaleResult] = field(default_factory=list)
    output_path: Path | None = None

    @property
    def loaded_locales(self) -> list[str]:
        return [r.locale for r in self.results if r.ok]

    @property
    def failed(self) -> list[LocaleResult]:
        return [r for r in self.results if not r.ok]


class AnnotationAggregator:
    """Builds the emoji index from the baseline and best-effort remote locales.

    Only a missing baseline aborts a run (``BaselineMissing`` propagates);
    every remote failure drops that locale and is reported in the result.
    """

    def __init__(
        self,
        config: AggregatorConfig | None = None,
        *,
        baseline: BaselineSource | None = None,
        remote: RemoteSource | None = None,
        emitter: IndexEmitter | None = None,
    ) -> None:
        self.config = config or AggregatorConfig()
        self.baseline = baseline or BaselineSource(
            self.config.baseline_path, locale=self.config.baseline_locale
        )
        self._owns_remote = remote is None
        self.remote = remote or RemoteSource(
            self.config.remote_base_url,
            timeout=self.config.timeout,
            max_bytes=self.config.max_response_bytes,
        )
        self.emitter = emitter or IndexEmitter()

    def candidate_locales(self, extra: Iterable[str] = ()) -> list[str]:
        """Locales to attempt, baseline first."""
        tokens = [*self.config.extra_locales, *extra]
        if self.config.detect_host_locales:
            tokens.extend(host_locale_tokens())
        return discover_locales(tokens, baseline=self.config.baseline_locale)

    async def _fetch_remote(self, locales: list[str]) -> list[LocaleResult]:
        semaphore = asyncio.Semaphore(self.config.max_concurrency)

        async def fetch_one(locale: str) -> LocaleResult:
            async with semaphore:
                return await self.remote.fetch(locale)

        # gather keeps input order, so merge order never depends on completion order
        return list(await asyncio.gather(*(fetch_one(locale) for locale in locales)))

    async def run(self, locales: list[str] | None = None) -> AggregationResult:
        """Read every locale and merge. Nothing is written."""
        if locales is None:
            locales = self.candidate_locales()

        baseline_locale = self.config.baseline_locale
        results = [LocaleResult.success(self.baseline.read_sync())]

        remote_locales = [locale for locale in locales if locale != baseline_locale]
        try:
            results.extend(await self._fetch_remote(remote_locales))
        finally:
            if self._owns_remote:
                await self.remote.close()

        records = AnnotationMerger(baseline_locale).merge(results)
        loaded = sum(1 for r in results if r.ok)
        logger.info(f"Merged {len(records)} emoji from {loaded}/{len(results)} locales")
        return AggregationResult(records=records, results=results)

    async def build(
        self,
        locales: list[str] | None = None,
        output_path: Path | None = None,
    ) -> AggregationResult:
        """Run the aggregation and write the index artifact."""
        result = await self.run(locales)
        path = output_path or self.config.output_path
        self.emitter.write(path, result.records, result.loaded_locales)
        result.output_path = path
        return result

"""Remote source: CLDR annotation XML fetched over HTTP.

Each read is bounded by a request timeout and a response size ceiling.
Locale identifiers are validated before they are placed in the URL, so no
request is ever made for an identifier outside ``[a-z_-]``.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from emojipick.errors import (
    InvalidLocale,
    MalformedDocument,
    ResponseTooLarge,
    SourceHTTPError,
    SourceTimeout,
    SourceUnavailable,
)
from emojipick.models.annotation import FailureReason, LocaleReading, LocaleResult
from emojipick.models.config import CLDR_ANNOTATIONS_URL
from emojipick.sources.base import AnnotationSource
from emojipick.sources.parser import parse_annotations_xml, validate_locale

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MiB


class RemoteSource(AnnotationSource):
    """Fetches per-locale annotations from the CLDR repository."""

    def __init__(
        self,
        base_url: str = CLDR_ANNOTATIONS_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_bytes: int = DEFAULT_MAX_BYTES,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_bytes = max_bytes
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def url_for(self, locale: str) -> str:
        """Build the document URL for a validated locale."""
        return f"{self.base_url}/{validate_locale(locale)}.xml"

    async def read(self, locale: str) -> LocaleReading:
        url = self.url_for(locale)
        # httpx timeouts apply per network operation; this bounds the whole request
        try:
            data = await asyncio.wait_for(self._download(locale, url), self.timeout)
        except asyncio.TimeoutError as e:
            raise SourceTimeout(locale, f"timed out after {self.timeout}s") from e
        return parse_annotations_xml(data, locale)

    async def _download(self, locale: str, url: str) -> bytes:
        """Download a document, enforcing the size ceiling while streaming."""
        try:
            async with self.client.stream("GET", url, timeout=self.timeout) as response:
                if response.status_code != 200:
                    raise SourceHTTPError(locale, response.status_code)

                declared = response.headers.get("Content-Length", "")
                if declared.isdigit() and int(declared) > self.max_bytes:
                    raise ResponseTooLarge(
                        locale, f"declared size {declared} exceeds {self.max_bytes} bytes"
                    )

                body = bytearray()
                async for chunk in response.aiter_bytes():
                    body.extend(chunk)
                    if len(body) > self.max_bytes:
                        raise ResponseTooLarge(
                            locale, f"response exceeds {self.max_bytes} bytes"
                        )
        except httpx.TimeoutException as e:
            raise SourceTimeout(locale, f"timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise SourceUnavailable(locale, str(e) or type(e).__name__) from e

        return bytes(body)

    async def fetch(self, locale: str) -> LocaleResult:
        """Read a locale and report the outcome instead of raising."""
        try:
            reading = await self.read(locale)
        except InvalidLocale as e:
            return self._failed(locale, FailureReason.INVALID_LOCALE, str(e))
        except SourceHTTPError as e:
            return self._failed(locale, FailureReason.HTTP_STATUS, e.message)
        except SourceTimeout as e:
            return self._failed(locale, FailureReason.TIMEOUT, e.message)
        except ResponseTooLarge as e:
            return self._failed(locale, FailureReason.TOO_LARGE, e.message)
        except MalformedDocument as e:
            return self._failed(locale, FailureReason.MALFORMED, e.message)
        except SourceUnavailable as e:
            return self._failed(locale, FailureReason.NETWORK, e.message)

        logger.info(f"Loaded {len(reading)} annotations for {locale} from CLDR")
        return LocaleResult.success(reading)

    @staticmethod
    def _failed(locale: str, reason: FailureReason, message: str) -> LocaleResult:
        logger.warning(f"Skipping locale {locale!r} ({reason.value}): {message}")
        return LocaleResult.failed(locale, reason, message)

"""Exception hierarchy for emojipick."""

from __future__ import annotations


class EmojiPickError(Exception):
    """Base class for all emojipick errors."""


class SourceUnavailable(EmojiPickError):
    """A locale's annotation source could not be read or parsed.

    Recoverable: the locale is dropped and aggregation continues.
    """

    def __init__(self, locale: str, message: str) -> None:
        super().__init__(f"{locale}: {message}")
        self.locale = locale
        self.message = message


class SourceHTTPError(SourceUnavailable):
    """The remote source answered with a non-success status."""

    def __init__(self, locale: str, status_code: int) -> None:
        super().__init__(locale, f"HTTP {status_code}")
        self.status_code = status_code


class SourceTimeout(SourceUnavailable):
    """The remote source did not answer within the request timeout."""


class ResponseTooLarge(SourceUnavailable):
    """The remote response exceeded the configured size ceiling."""


class MalformedDocument(SourceUnavailable):
    """The annotation document could not be parsed."""


class InvalidLocale(EmojiPickError):
    """A locale identifier contains characters outside ``[a-z_-]``."""

    def __init__(self, locale: str) -> None:
        super().__init__(f"Invalid locale identifier: {locale!r}")
        self.locale = locale


class BaselineMissing(EmojiPickError):
    """The bundled baseline annotations could not be loaded.

    Fatal: no index can be produced without the baseline locale.
    """


class InjectionError(EmojiPickError):
    """Copying or pasting a glyph into the target window failed."""

"""Discover which locales to fetch annotations for."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

BASELINE_LOCALE = "en"

PSEUDO_LOCALES = frozenset({"C", "POSIX"})

# Checked in this order; LANGUAGE holds a colon separated priority list
LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def extract_language(token: str) -> str | None:
    """Extract the language code from a raw locale token.

    Examples:
        kk_KZ.UTF-8 -> kk
        sah_RU      -> sah (the region is never used as a language)
        sr_RS@latin -> sr
        C.UTF-8     -> None
    """
    token = token.strip().split(".", 1)[0].split("@", 1)[0]
    language = token.split("_", 1)[0]
    if not language or language in PSEUDO_LOCALES:
        return None
    return language


def discover_locales(
    tokens: Iterable[str],
    baseline: str = BASELINE_LOCALE,
) -> list[str]:
    """Ordered, duplicate free language list, always starting with the baseline."""
    languages = [baseline]
    seen = {baseline}
    for token in tokens:
        language = extract_language(token)
        if language and language not in seen:
            languages.append(language)
            seen.add(language)
    return languages


def environment_locale_tokens(environ: Mapping[str, str] | None = None) -> list[str]:
    """Locale tokens from the standard environment variables."""
    environ = os.environ if environ is None else environ
    tokens: list[str] = []
    for var in LOCALE_ENV_VARS:
        value = environ.get(var, "")
        tokens.extend(part for part in value.split(":") if part)
    return tokens


def installed_locale_tokens() -> list[str]:
    """Locale tokens reported by ``locale -a``."""
    try:
        result = subprocess.run(
            ["locale", "-a"],
            capture_output=True,
            text=True,
            check=True,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning(f"Failed to run 'locale -a': {e}")
        return []
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def host_locale_tokens(environ: Mapping[str, str] | None = None) -> list[str]:
    """All locale tokens the host exposes, environment first."""
    return environment_locale_tokens(environ) + installed_locale_tokens()

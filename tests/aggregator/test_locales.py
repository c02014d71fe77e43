"""Tests for locale discovery."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from emojipick.aggregator.locales import (
    discover_locales,
    environment_locale_tokens,
    extract_language,
    host_locale_tokens,
    installed_locale_tokens,
)


class TestExtractLanguage:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("kk_KZ", "kk"),
            ("kk_KZ.utf8", "kk"),
            ("de_DE.UTF-8", "de"),
            ("sah_RU", "sah"),
            ("ru", "ru"),
            ("sr_RS@latin", "sr"),
            ("en_US.UTF-8@euro", "en"),
        ],
    )
    def test_language_segment(self, token: str, expected: str) -> None:
        assert extract_language(token) == expected

    @pytest.mark.parametrize("token", ["C", "POSIX", "C.UTF-8", "C.utf8", "", "_US", ".utf8"])
    def test_pseudo_and_empty(self, token: str) -> None:
        assert extract_language(token) is None


class TestDiscoverLocales:
    def test_baseline_always_first(self) -> None:
        assert discover_locales(["de_DE.UTF-8", "en_US.UTF-8", "kk_KZ"]) == ["en", "de", "kk"]

    def test_no_host_information(self) -> None:
        assert discover_locales([]) == ["en"]

    def test_deduplicates_keeping_first_position(self) -> None:
        tokens = ["fr_FR", "de_DE", "fr_CA", "C", "POSIX", "de_AT.utf8"]
        assert discover_locales(tokens) == ["en", "fr", "de"]

    def test_region_is_not_a_language(self) -> None:
        assert discover_locales(["sah_RU"]) == ["en", "sah"]

    def test_custom_baseline(self) -> None:
        assert discover_locales(["en_GB"], baseline="de") == ["de", "en"]


class TestHostTokens:
    def test_environment_order_and_language_list(self) -> None:
        environ = {
            "LANG": "de_DE.UTF-8",
            "LANGUAGE": "kk:ru",
            "LC_ALL": "",
            "LC_MESSAGES": "fr_FR.UTF-8",
        }
        assert environment_locale_tokens(environ) == ["kk", "ru", "fr_FR.UTF-8", "de_DE.UTF-8"]

    def test_installed_locales(self) -> None:
        completed = MagicMock(stdout="C\nC.utf8\nPOSIX\nde_DE.utf8\n\nkk_KZ.utf8\n")
        with patch("emojipick.aggregator.locales.subprocess.run", return_value=completed) as run:
            tokens = installed_locale_tokens()

        assert run.call_args.args[0] == ["locale", "-a"]
        assert tokens == ["C", "C.utf8", "POSIX", "de_DE.utf8", "kk_KZ.utf8"]

    def test_missing_locale_binary(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch(
            "emojipick.aggregator.locales.subprocess.run",
            side_effect=FileNotFoundError("locale"),
        ):
            assert installed_locale_tokens() == []
        assert "locale -a" in caplog.text

    def test_failing_locale_binary(self) -> None:
        with patch(
            "emojipick.aggregator.locales.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, ["locale", "-a"]),
        ):
            assert installed_locale_tokens() == []

    def test_host_tokens_environment_first(self) -> None:
        completed = MagicMock(stdout="ja_JP.utf8\n")
        with patch("emojipick.aggregator.locales.subprocess.run", return_value=completed):
            tokens = host_locale_tokens({"LANG": "es_ES.UTF-8"})

        assert tokens == ["es_ES.UTF-8", "ja_JP.utf8"]
        assert discover_locales(tokens) == ["en", "es", "ja"]

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Callable, Generator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from emojipick.models.annotation import EmojiRecord
from emojipick.models.config import AggregatorConfig
from emojipick.picker import EmojiPicker
from emojipick.search.database import EmojiDatabase
from emojipick.sources.remote import RemoteSource

TEST_BASE_URL = "https://cldr.test/annotations"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def baseline_data() -> dict[str, list[str]]:
    """Compact baseline annotations: glyph -> [name, keywords...]."""
    return {
        "😀": ["grinning face", "face", "grin"],
        "🐱": ["cat face", "cat", "face", "pet"],
        "🐈": ["cat", "pet"],
        "🍕": ["pizza", "cheese", "slice"],
        "🇩🇪": ["flag: Germany", "flag"],
    }


@pytest.fixture
def baseline_path(temp_dir: Path, baseline_data: dict[str, list[str]]) -> Path:
    """Baseline annotations written to disk."""
    path = temp_dir / "cldr" / "en.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(baseline_data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def spanish_xml() -> bytes:
    """CLDR annotations document for Spanish."""
    return """<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE ldml SYSTEM "../../common/dtd/ldml.dtd">
<ldml>
    <identity>
        <version number="$Revision$"/>
        <language type="es"/>
    </identity>
    <annotations>
        <annotation cp="😀">cara | cara sonriente | feliz | sonrisa</annotation>
        <annotation cp="😀" type="tts">cara sonriente</annotation>
        <annotation cp="🐈">felino | gato</annotation>
        <annotation cp="🐈" type="tts">gato</annotation>
        <annotation cp="🦊">zorro | cara</annotation>
        <annotation cp="🦊" type="tts">zorro</annotation>
    </annotations>
</ldml>
""".encode("utf-8")


@pytest.fixture
def german_xml() -> bytes:
    """CLDR annotations document for German."""
    return """<?xml version="1.0" encoding="UTF-8" ?>
<ldml>
    <annotations>
        <annotation cp="🐈">Katze | Haustier</annotation>
        <annotation cp="🐈" type="tts">Katze</annotation>
        <annotation cp="🦊" type="tts">Fuchs</annotation>
    </annotations>
</ldml>
""".encode("utf-8")


@pytest.fixture
def requested_urls() -> list[str]:
    """URLs requested through the mock transport."""
    return []


@pytest.fixture
def cldr_handler(
    spanish_xml: bytes,
    german_xml: bytes,
    requested_urls: list[str],
) -> Callable[[httpx.Request], httpx.Response]:
    """Mock CLDR server.

    es, de: valid documents; fr: HTTP 500; it: timeout;
    ja: oversized body; ko: malformed XML; anything else: 404.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        requested_urls.append(str(request.url))
        name = request.url.path.rsplit("/", 1)[-1]
        if name == "es.xml":
            return httpx.Response(200, content=spanish_xml)
        if name == "de.xml":
            return httpx.Response(200, content=german_xml)
        if name == "fr.xml":
            return httpx.Response(500, content=b"Internal Server Error")
        if name == "it.xml":
            raise httpx.ReadTimeout("timed out", request=request)
        if name == "ja.xml":
            return httpx.Response(200, content=b"<ldml>" + b" " * 4096 + b"</ldml>")
        if name == "ko.xml":
            return httpx.Response(200, content=b"<ldml><annotations><annotation")
        return httpx.Response(404)

    return handler


@pytest.fixture
def remote_source(cldr_handler) -> RemoteSource:
    """Remote source backed by the mock CLDR server (1 KiB size ceiling)."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(cldr_handler))
    return RemoteSource(TEST_BASE_URL, timeout=5.0, max_bytes=1024, client=client)


@pytest.fixture
def aggregator_config(baseline_path: Path, temp_dir: Path) -> AggregatorConfig:
    """Aggregator config pointing at the temp baseline, no host detection."""
    return AggregatorConfig(
        baseline_path=baseline_path,
        remote_base_url=TEST_BASE_URL,
        output_path=temp_dir / "out" / "emoji_index.json",
        detect_host_locales=False,
        max_response_bytes=1024,
    )


@pytest.fixture
def sample_records() -> list[EmojiRecord]:
    """Records spanning several categories."""
    return [
        EmojiRecord(glyph="🇩🇪", name="flag: Germany", keywords=("flag", "flag: germany")),
        EmojiRecord(glyph="🍕", name="pizza", keywords=("cheese", "pizza", "slice")),
        EmojiRecord(glyph="🐱", name="cat face", keywords=("cat", "cat face", "face", "pet")),
        EmojiRecord(glyph="🐈", name="cat", keywords=("cat", "feline", "gato", "pet")),
        EmojiRecord(glyph="😂", name="face with tears of joy", keywords=("face", "joy", "laugh")),
        EmojiRecord(glyph="😀", name="grinning face", keywords=("face", "feliz", "grin", "grinning face")),
        EmojiRecord(glyph="🤔", name="thinking face", keywords=("face", "thinking", "thinking face")),
        EmojiRecord(glyph="☀", name="sun", keywords=("bright", "sun", "sunny")),
    ]


@pytest.fixture
def database(sample_records: list[EmojiRecord]) -> EmojiDatabase:
    """Lookup database over the sample records."""
    return EmojiDatabase(sample_records, locales=["en", "es"])


@pytest.fixture
def picker(database: EmojiDatabase) -> EmojiPicker:
    """Picker wired to the sample database."""
    return EmojiPicker(database=database)


@pytest.fixture
def fastapi_app(picker: EmojiPicker) -> FastAPI:
    """Create a FastAPI app with emoji routes for testing."""
    from emojipick.api import create_router

    app = FastAPI()
    app.include_router(create_router(picker))
    return app


@pytest.fixture
def api_client(fastapi_app: FastAPI) -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(fastapi_app)


# Markers for test categories
def pytest_configure(config):
    config.addinivalue_line("markers", "mock: tests using mocked HTTP responses")
    config.addinivalue_line("markers", "integration: tests requiring network access")

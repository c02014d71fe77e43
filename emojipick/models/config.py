"""Configuration models for the aggregator and the text injector."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

CLDR_ANNOTATIONS_URL = (
    "https://raw.githubusercontent.com/unicode-org/cldr/main/common/annotations"
)


class AggregatorConfig(BaseModel):
    """Settings for one aggregation run."""

    baseline_locale: str = Field(default="en", description="Trusted, bundled locale")
    baseline_path: Path = Field(
        default=PACKAGE_DATA_DIR / "cldr" / "en.json",
        description="Local baseline annotations (.json or .xml)",
    )
    remote_base_url: str = Field(default=CLDR_ANNOTATIONS_URL)
    timeout: float = Field(default=30.0, gt=0, description="Per request timeout in seconds")
    max_response_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    max_concurrency: int = Field(default=8, ge=1, description="Parallel remote reads")
    output_path: Path = Field(default=PACKAGE_DATA_DIR / "emoji_index.json")
    detect_host_locales: bool = Field(default=True)
    extra_locales: list[str] = Field(default_factory=list)


class InjectorConfig(BaseModel):
    """How glyphs are pasted into the previously focused window."""

    backend: str = Field(default="xdotool", pattern="^(xdotool|kdotool)$")
    clipboard_command: list[str] = Field(default_factory=lambda: ["wl-copy"])


class EmojiPickConfig(BaseModel):
    """Top-level configuration file."""

    aggregator: AggregatorConfig = Field(default_factory=AggregatorConfig)
    injector: InjectorConfig = Field(default_factory=InjectorConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "EmojiPickConfig":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    @classmethod
    def load(cls, path: Path | None = None) -> "EmojiPickConfig":
        """Load from a file if given and present, else use defaults."""
        if path is not None and path.exists():
            return cls.from_yaml(path)
        return cls()

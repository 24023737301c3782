"""Configuration management using environment variables."""

import os
from functools import lru_cache
from pathlib import Path

from attrs import define


@define
class Settings:
    """Application settings."""

    tmdb_api_key: str | None = None
    language: str = "en"
    region: str = "US"
    log_level: str = "INFO"
    data_dir: Path = Path.home() / ".yodd_watch"


@lru_cache
def get_settings() -> Settings:
    """Load settings from environment."""
    data_dir = os.environ.get("YODD_WATCH_DATA_DIR")
    return Settings(
        tmdb_api_key=os.environ.get("TMDB_API_KEY"),
        language=os.environ.get("YODD_WATCH_LANGUAGE", "en"),
        region=os.environ.get("YODD_WATCH_REGION", "US"),
        log_level=os.environ.get("YODD_WATCH_LOG_LEVEL", "INFO"),
        data_dir=Path(data_dir) if data_dir else Path.home() / ".yodd_watch",
    )

"""Tests for settings and logging setup."""

from pathlib import Path

import pytest
from loguru import logger

from yodd_watch.config import get_settings
from yodd_watch.logging_config import configure_logging


@pytest.fixture(autouse=True)
def clean_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults apply when nothing is set."""
        for name in (
            "TMDB_API_KEY",
            "YODD_WATCH_LANGUAGE",
            "YODD_WATCH_REGION",
            "YODD_WATCH_DATA_DIR",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.tmdb_api_key is None
        assert settings.language == "en"
        assert settings.region == "US"
        assert settings.data_dir == Path.home() / ".yodd_watch"

    def test_from_environment(self, monkeypatch, tmp_path):
        """Test values are read from the environment."""
        monkeypatch.setenv("TMDB_API_KEY", "abc")
        monkeypatch.setenv("YODD_WATCH_LANGUAGE", "it")
        monkeypatch.setenv("YODD_WATCH_DATA_DIR", str(tmp_path))

        settings = get_settings()

        assert settings.tmdb_api_key == "abc"
        assert settings.language == "it"
        assert settings.data_dir == tmp_path


class TestLogging:
    """Tests for logging configuration."""

    def test_configure_logging_writes_file(self, tmp_path):
        """Test the JSON file handler receives records."""
        log_file = tmp_path / "logs" / "yodd.log"
        configure_logging("WARNING", log_file=log_file)
        try:
            logger.warning("cache check")
            logger.complete()
            assert log_file.exists()
            assert "cache check" in log_file.read_text()
        finally:
            logger.remove()

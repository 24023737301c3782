"""Tests for the persistent preference store."""

import pytest

from yodd_watch.config import get_settings
from yodd_watch.services.preferences import UserPreferences


class DictStorage:
    """Minimal in-memory backend."""

    def __init__(self):
        self.data = {}

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        return True


@pytest.fixture
def prefs(tmp_path):
    store = UserPreferences.open(tmp_path / "prefs")
    yield store
    store.close()


class TestLanguage:
    """Tests for the preferred language setting."""

    def test_default_language(self):
        """Test the configured default is used until a value is stored."""
        store = UserPreferences(DictStorage(), default_language="en")
        assert store.preferred_language == "en"

    def test_unsupported_configured_default(self, monkeypatch):
        """Test an unsupported configured language falls back to English."""
        monkeypatch.setenv("YODD_WATCH_LANGUAGE", "fr")
        get_settings.cache_clear()
        try:
            store = UserPreferences(DictStorage())
            assert store.preferred_language == "en"
        finally:
            get_settings.cache_clear()

    def test_accepts_supported_language(self, prefs):
        """Test a supported language is persisted."""
        prefs.preferred_language = "it"
        assert prefs.preferred_language == "it"

    def test_ignores_unsupported_language(self):
        """Test an unsupported language is silently ignored."""
        store = UserPreferences(DictStorage(), default_language="en")
        store.preferred_language = "it"
        store.preferred_language = "fr"
        assert store.preferred_language == "it"


class TestFavoritesAndWatched:
    """Tests for favorites and watched ids."""

    def test_add_favorite_once(self, prefs):
        """Test adding the same favorite twice stores it once."""
        prefs.add_favorite(7)
        prefs.add_favorite(7)
        assert prefs.favorites == [7]
        assert prefs.is_favorite(7)

    def test_remove_favorite(self, prefs):
        """Test removing a favorite keeps the others in order."""
        prefs.favorites = [1, 2, 3]
        prefs.remove_favorite(2)
        assert prefs.favorites == [1, 3]

    def test_mark_watched(self, prefs):
        """Test watched ids are deduplicated and removable."""
        prefs.mark_watched(5)
        prefs.mark_watched(5)
        prefs.mark_watched(6)
        prefs.unmark_watched(5)
        assert prefs.watched == [6]

    def test_persisted_across_instances(self, tmp_path):
        """Test values survive reopening the store."""
        first = UserPreferences.open(tmp_path / "prefs")
        first.add_favorite(42)
        first.close()

        second = UserPreferences.open(tmp_path / "prefs")
        try:
            assert second.favorites == [42]
        finally:
            second.close()


class TestLists:
    """Tests for named custom lists."""

    def test_add_list(self, prefs):
        """Test creating a list does not clobber an existing one."""
        prefs.add_to_list(1, "watchlist")
        prefs.add_list("watchlist")
        assert prefs.lists == {"watchlist": [1]}

    def test_add_to_list_creates_list(self, prefs):
        """Test adding to an unknown list creates it."""
        prefs.add_to_list(7, "watchlist")
        prefs.add_to_list(7, "watchlist")
        assert prefs.lists["watchlist"] == [7]

    def test_remove_from_list(self, prefs):
        """Test removal from a list, and from an unknown list."""
        prefs.add_to_list(1, "a")
        prefs.add_to_list(2, "a")
        prefs.remove_from_list(1, "a")
        prefs.remove_from_list(1, "missing")
        assert prefs.lists == {"a": [2]}

    def test_remove_list(self, prefs):
        """Test deleting a whole list."""
        prefs.add_list("a")
        prefs.add_list("b")
        prefs.remove_list("a")
        assert list(prefs.lists) == ["b"]


class TestProgress:
    """Tests for watch progress."""

    def test_progress_round_trip(self, prefs):
        """Test progress survives the string-keyed persisted form."""
        prefs.set_progress(7, 42.5)
        assert prefs.progress_for(7) == 42.5
        assert prefs.progress == {7: 42.5}

    def test_progress_missing(self, prefs):
        """Test unknown ids have no progress."""
        assert prefs.progress_for(99) is None

    def test_progress_stored_with_string_keys(self):
        """Test ids are stored as strings and bad keys are skipped on read."""
        storage = DictStorage()
        store = UserPreferences(storage, default_language="en")
        store.set_progress(3, 10)

        assert storage.data["progress"] == {"3": 10.0}

        storage.data["progress"]["not-an-id"] = 5.0
        assert store.progress == {3: 10.0}

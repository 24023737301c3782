"""Persistent viewing preferences: favorites, watched titles, lists, progress."""

from pathlib import Path
from typing import Any, Protocol

from diskcache import Cache
from loguru import logger

from ..config import get_settings

SUPPORTED_LANGUAGES = frozenset({"en", "it"})

FAVORITES = "favorites"
WATCHED = "watched"
PREFERRED_LANGUAGE = "preferredLanguage"
LISTS = "lists"
PROGRESS = "progress"


class PreferenceStorage(Protocol):
    """Key-value backend; ``diskcache.Cache`` satisfies it."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> Any: ...


class UserPreferences:
    """User preferences stored in a key-value backend.

    Each mutation is a read-modify-write of a single key with no locking,
    so concurrent updates to the same key keep the last write.
    """

    def __init__(
        self, storage: PreferenceStorage, default_language: str | None = None
    ) -> None:
        self._storage = storage
        default = default_language or get_settings().language
        self._default_language = default if default in SUPPORTED_LANGUAGES else "en"

    @classmethod
    def open(cls, directory: Path | str | None = None) -> "UserPreferences":
        """Open preferences persisted on disk under ``directory``."""
        if directory is None:
            directory = get_settings().data_dir / "preferences"
        logger.debug("Opening preferences at {}", directory)
        return cls(Cache(str(directory)))

    def close(self) -> None:
        close = getattr(self._storage, "close", None)
        if close is not None:
            close()

    @property
    def preferred_language(self) -> str:
        return self._storage.get(PREFERRED_LANGUAGE) or self._default_language

    @preferred_language.setter
    def preferred_language(self, value: str) -> None:
        if value not in SUPPORTED_LANGUAGES:
            logger.debug("Ignoring unsupported language {!r}", value)
            return
        self._storage.set(PREFERRED_LANGUAGE, value)

    @property
    def favorites(self) -> list[int]:
        return list(self._storage.get(FAVORITES) or [])

    @favorites.setter
    def favorites(self, ids: list[int]) -> None:
        self._storage.set(FAVORITES, list(ids))

    @property
    def watched(self) -> list[int]:
        return list(self._storage.get(WATCHED) or [])

    @watched.setter
    def watched(self, ids: list[int]) -> None:
        self._storage.set(WATCHED, list(ids))

    @property
    def lists(self) -> dict[str, list[int]]:
        stored = self._storage.get(LISTS) or {}
        return {name: list(ids) for name, ids in stored.items()}

    @lists.setter
    def lists(self, value: dict[str, list[int]]) -> None:
        self._storage.set(LISTS, {name: list(ids) for name, ids in value.items()})

    @property
    def progress(self) -> dict[int, float]:
        """Watch progress in minutes, keyed by TMDb id.

        Persisted with string keys; entries whose key is not an integer are
        skipped.
        """
        stored = self._storage.get(PROGRESS) or {}
        result = {}
        for key, minutes in stored.items():
            try:
                result[int(key)] = float(minutes)
            except (TypeError, ValueError):
                continue
        return result

    @progress.setter
    def progress(self, value: dict[int, float]) -> None:
        self._storage.set(
            PROGRESS, {str(media_id): float(m) for media_id, m in value.items()}
        )

    # Favorites / watched

    def add_favorite(self, media_id: int) -> None:
        current = self.favorites
        if media_id not in current:
            current.append(media_id)
            self.favorites = current

    def remove_favorite(self, media_id: int) -> None:
        self.favorites = [i for i in self.favorites if i != media_id]

    def is_favorite(self, media_id: int) -> bool:
        return media_id in self.favorites

    def mark_watched(self, media_id: int) -> None:
        current = self.watched
        if media_id not in current:
            current.append(media_id)
            self.watched = current

    def unmark_watched(self, media_id: int) -> None:
        self.watched = [i for i in self.watched if i != media_id]

    # Lists

    def add_list(self, name: str) -> None:
        """Create an empty list unless one with that name exists."""
        all_lists = self.lists
        if name not in all_lists:
            all_lists[name] = []
            self.lists = all_lists

    def remove_list(self, name: str) -> None:
        all_lists = self.lists
        if all_lists.pop(name, None) is not None:
            self.lists = all_lists

    def add_to_list(self, media_id: int, name: str) -> None:
        """Append ``media_id`` to the named list, creating the list if needed."""
        all_lists = self.lists
        ids = all_lists.setdefault(name, [])
        if media_id not in ids:
            ids.append(media_id)
        self.lists = all_lists

    def remove_from_list(self, media_id: int, name: str) -> None:
        all_lists = self.lists
        if name not in all_lists:
            return
        all_lists[name] = [i for i in all_lists[name] if i != media_id]
        self.lists = all_lists

    # Progress

    def set_progress(self, media_id: int, minutes: float) -> None:
        current = self.progress
        current[media_id] = minutes
        self.progress = current

    def progress_for(self, media_id: int) -> float | None:
        return self.progress.get(media_id)

"""In-memory response cache keyed by full request URL."""

import threading


class ResponseCache:
    """Raw response bodies keyed by the exact URL that produced them.

    Entries never expire and are never evicted; the cache lives as long as
    its owner. Access is serialized by a lock so the cache can be shared
    between threads as well as tasks.
    """

    def __init__(self) -> None:
        self._entries: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, url: str) -> bytes | None:
        with self._lock:
            return self._entries.get(url)

    def set(self, url: str, body: bytes) -> None:
        with self._lock:
            self._entries[url] = body

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

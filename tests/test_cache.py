"""Tests for the in-memory response cache."""

import threading

from yodd_watch.services.cache import ResponseCache


class TestResponseCache:
    """Tests for ResponseCache."""

    def test_miss_returns_none(self):
        """Test an unknown URL is a miss."""
        cache = ResponseCache()
        assert cache.get("https://example.org/a") is None
        assert "https://example.org/a" not in cache

    def test_set_then_get(self):
        """Test stored bodies come back byte for byte."""
        cache = ResponseCache()
        cache.set("https://example.org/a?page=1", b'{"results": []}')
        assert cache.get("https://example.org/a?page=1") == b'{"results": []}'
        assert len(cache) == 1

    def test_key_is_exact_url(self):
        """Test URLs differing only in query are separate entries."""
        cache = ResponseCache()
        cache.set("https://example.org/a?page=1", b"1")
        assert cache.get("https://example.org/a?page=2") is None

    def test_last_write_wins(self):
        """Test a second write to the same URL replaces the body."""
        cache = ResponseCache()
        cache.set("u", b"first")
        cache.set("u", b"second")
        assert cache.get("u") == b"second"
        assert len(cache) == 1

    def test_concurrent_writers(self):
        """Test writes from many threads are all retained."""
        cache = ResponseCache()

        def write(n: int) -> None:
            for i in range(100):
                cache.set(f"u{n}-{i}", str(i).encode())

        threads = [threading.Thread(target=write, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 800

import threading

from tailcall.cache import Cache


def test_missing_key_returns_none():
    cache: Cache[str, int] = Cache()
    assert cache.get("missing") is None
    assert len(cache) == 0


def test_insert_then_get():
    cache: Cache[str, str] = Cache()
    cache.insert("a", "b")
    assert cache.get("a") == "b"
    assert "a" in cache


def test_insert_overwrites():
    cache: Cache[str, int] = Cache()
    cache.insert("k", 1)
    cache.insert("k", 2)
    assert cache.get("k") == 2
    assert len(cache) == 1


def test_concurrent_inserts_are_all_kept():
    cache: Cache[int, int] = Cache()

    def worker(offset: int) -> None:
        for i in range(100):
            cache.insert(offset * 100 + i, i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 800
    assert cache.get(799) == 99
from lldkit.strategy import (
    Cache,
    EvictionAlgo,
    FIFOEvictionAlgo,
    LFUEvictionAlgo,
    LRUEvictionAlgo,
)


def test_no_eviction_until_full(capsys):
    cache = Cache(FIFOEvictionAlgo())
    cache.add("a", "1")
    cache.add("b", "2")
    assert capsys.readouterr().out == ""
    assert cache.size == cache.capacity
    assert cache.storage == {"a": "1", "b": "2"}


def test_switching_algorithms(capsys):
    cache = Cache(FIFOEvictionAlgo())
    cache.add("a", "1")
    cache.add("b", "2")
    cache.add("c", "3")
    cache.set_eviction_algo(LRUEvictionAlgo())
    cache.add("d", "4")
    cache.set_eviction_algo(LFUEvictionAlgo())
    cache.add("e", "5")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Evicting by FIFO strategy.",
        "Evicting by LRU strategy.",
        "Evicting by LFU strategy.",
    ]
    assert cache.size == cache.capacity


def test_algorithm_receives_cache():
    calls = []

    class _Recording(EvictionAlgo):
        def evict(self, cache):
            calls.append(cache)

    cache = Cache(_Recording(), capacity=1)
    cache.add("x", "1")
    cache.add("y", "2")
    assert calls == [cache]
    assert cache.storage["y"] == "2"


def test_set_eviction_algo_replaces_strategy():
    cache = Cache(FIFOEvictionAlgo())
    lru = LRUEvictionAlgo()
    cache.set_eviction_algo(lru)
    assert cache.eviction_algo is lru
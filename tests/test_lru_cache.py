import pytest

from algopad.lru_cache import LRUCache


def test_missing_key_returns_minus_one():
    cache = LRUCache(2)
    assert cache.get(7) == -1


def test_put_then_get_returns_value():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    assert cache.get(1) == 10
    assert cache.get(2) == 20


def test_evicts_least_recently_used():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(3, 30)
    assert cache.get(1) == -1
    assert cache.get(2) == 20
    assert cache.get(3) == 30


def test_get_refreshes_entry():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    assert cache.get(1) == 10
    cache.put(3, 30)
    assert cache.get(2) == -1
    assert cache.get(1) == 10
    assert cache.get(3) == 30


def test_update_existing_key_does_not_evict_and_refreshes():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    assert len(cache) == 2
    cache.put(3, 30)
    assert cache.get(1) == 11
    assert cache.get(2) == -1


def test_capacity_zero_stores_nothing():
    cache = LRUCache(0)
    cache.put(1, 10)
    assert len(cache) == 0
    assert cache.get(1) == -1


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(20):
        cache.put(key, key * 2)
        assert len(cache) <= 3
    assert 19 in cache
    assert 0 not in cache


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LRUCache(-1)
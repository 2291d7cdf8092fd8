"""
Tests for the LRU list cache.
"""

from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from shopping_api.cache import ListCache
from shopping_api.entities import ShoppingListEntity
from shopping_api.exceptions import StoreError


def make_list(name: str = "list") -> ShoppingListEntity:
    now = datetime.now(timezone.utc)
    return ShoppingListEntity(id=uuid4(), name=name, items=(), created_at=now, updated_at=now)


def test_default_capacity_is_128():
    assert ListCache().capacity == 128


def test_put_and_get(sample_list):
    cache = ListCache(capacity=4)
    cache.put(sample_list.id, sample_list)
    assert cache.get(sample_list.id) is sample_list
    assert sample_list.id in cache


def test_evicts_least_recently_used():
    cache = ListCache(capacity=2)
    a, b, c = make_list("a"), make_list("b"), make_list("c")
    cache.put(a.id, a)
    cache.put(b.id, b)

    # Touch `a` so `b` becomes least recently used.
    assert cache.get(a.id) is a
    cache.put(c.id, c)

    assert a.id in cache
    assert b.id not in cache
    assert c.id in cache
    assert len(cache) == 2


def test_invalidate(sample_list):
    cache = ListCache(capacity=4)
    cache.put(sample_list.id, sample_list)

    assert cache.invalidate(sample_list.id) is True
    assert cache.get(sample_list.id) is None
    assert cache.invalidate(sample_list.id) is False


def test_get_or_load_loads_once(sample_list):
    cache = ListCache(capacity=4)
    calls = []

    def loader(list_id):
        calls.append(list_id)
        return sample_list

    assert cache.get_or_load(sample_list.id, loader) is sample_list
    assert cache.get_or_load(sample_list.id, loader) is sample_list
    assert calls == [sample_list.id]

    stats = cache.get_stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["size"] == 1


def test_get_or_load_skips_insert_when_invalidated_during_load(sample_list):
    cache = ListCache(capacity=4)

    def loader(list_id):
        # A concurrent write evicts the id while the read is in flight.
        cache.invalidate(list_id)
        return sample_list

    assert cache.get_or_load(sample_list.id, loader) is sample_list
    assert sample_list.id not in cache


def test_get_or_load_does_not_cache_failures(sample_list):
    cache = ListCache(capacity=4)

    def failing_loader(list_id):
        raise StoreError("timeout")

    with pytest.raises(StoreError):
        cache.get_or_load(sample_list.id, failing_loader)
    assert sample_list.id not in cache


def test_replaced_snapshot_is_returned(sample_list):
    cache = ListCache(capacity=4)
    cache.put(sample_list.id, sample_list)
    renamed = replace(sample_list, name="Hardware")
    cache.put(sample_list.id, renamed)
    assert cache.get(sample_list.id).name == "Hardware"


def test_clear(sample_list):
    cache = ListCache(capacity=4)
    cache.put(sample_list.id, sample_list)
    cache.clear()
    assert len(cache) == 0

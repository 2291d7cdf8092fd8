import logging
import threading
from collections.abc import Callable
from uuid import UUID

from cachetools import LRUCache

from shopping_api.config import settings
from shopping_api.entities import ShoppingListEntity

logger = logging.getLogger(__name__)


class ListCache:
    """Thread-safe LRU cache of shopping list snapshots keyed by list id.

    Entries never expire on their own; they leave the cache either by LRU
    eviction when capacity is reached or by an explicit `invalidate`.

    Every invalidation bumps an epoch counter. A read-through load started
    before an invalidation is not inserted once it finishes, so a snapshot
    read from the store just before a write can never repopulate the
    cache after that write's eviction.
    """

    def __init__(self, capacity: int | None = None) -> None:
        """
        Initialize the list cache.

        Args:
            capacity: Maximum number of cached lists. Defaults to settings.
        """
        self._capacity = capacity or settings.list_cache_capacity
        self._entries: LRUCache = LRUCache(maxsize=self._capacity)
        self._lock = threading.Lock()
        self._epoch = 0
        self._hits = 0
        self._misses = 0

    def get(self, list_id: UUID) -> ShoppingListEntity | None:
        """Return the cached snapshot, marking it most recently used."""
        with self._lock:
            entry = self._entries.get(list_id)
            if entry is None:
                self._misses += 1
            else:
                self._hits += 1
            return entry

    def put(self, list_id: UUID, entry: ShoppingListEntity) -> None:
        """Insert or replace a snapshot, evicting the LRU entry if full."""
        with self._lock:
            self._entries[list_id] = entry

    def get_or_load(
        self,
        list_id: UUID,
        loader: Callable[[UUID], ShoppingListEntity],
    ) -> ShoppingListEntity:
        """Return the cached snapshot, or load it and cache the result.

        The loader runs outside the lock so a slow store read does not
        block other cache users. Loader exceptions propagate and nothing
        is cached.
        """
        with self._lock:
            entry = self._entries.get(list_id)
            if entry is not None:
                self._hits += 1
                return entry
            self._misses += 1
            epoch = self._epoch

        entry = loader(list_id)

        with self._lock:
            if epoch == self._epoch:
                self._entries[list_id] = entry
            else:
                logger.debug("Skipped caching list %s: invalidated during load", list_id)
        return entry

    def invalidate(self, list_id: UUID) -> bool:
        """Remove a list from the cache.

        Returns:
            True if an entry was removed, False if it was not cached
        """
        with self._lock:
            self._epoch += 1
            removed = self._entries.pop(list_id, None) is not None
        if removed:
            logger.debug("Evicted list %s from cache", list_id)
        return removed

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._epoch += 1
            self._entries.clear()

    def __contains__(self, list_id: object) -> bool:
        with self._lock:
            return list_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def capacity(self) -> int:
        """Maximum number of cached lists."""
        return self._capacity

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with size, capacity, hits and misses
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "capacity": self._capacity,
                "hits": self._hits,
                "misses": self._misses,
            }

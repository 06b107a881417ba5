"""
Memory Cache Backend Module

This module implements an in-process cache backend on a plain dictionary.
Expired entries are never served: ``get`` checks the expiry of the entry it
reads, and every ``set`` first sweeps all expired entries out of the map.
There is no background cleanup task.
"""

import logging
import time
from datetime import timedelta
from typing import Any, Callable, Dict, Optional

from qna.common.exceptions import NotFoundError
from qna.common.locks import AsyncRWLock
from .base import CacheBackend
from .entry import CacheEntry

# Setup logging
logger = logging.getLogger(__name__)


class MemoryCacheBackend(CacheBackend):
    """
    In-memory cache backend implementation.

    Reads share the lock and writes take it exclusively. The clock is
    injectable so expiry can be tested without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, name: str = "memory"):
        """
        Initialize the memory cache backend.

        Args:
            clock: Monotonic clock returning seconds (default: time.monotonic)
            name: Name for this cache backend (default: "memory")
        """
        self._cache: Dict[str, CacheEntry] = {}
        self._lock = AsyncRWLock()
        self._clock = clock
        self._name = name

        # Statistics
        self._hits = 0
        self._misses = 0
        self._expirations = 0

    @property
    def name(self) -> str:
        """Get the name of this cache backend."""
        return self._name

    async def get(self, key: str) -> str:
        async with self._lock.read():
            entry = self._cache.get(key)
            now = self._clock()

        if entry is None or entry.is_expired(now):
            self._misses += 1
            raise NotFoundError("Cache key", key)

        self._hits += 1
        return entry.value

    async def set(self, key: str, value: str, expiration: Optional[timedelta] = None) -> None:
        async with self._lock.write():
            now = self._clock()
            self._sweep(now)
            self._cache[key] = CacheEntry.create(value, now, expiration)

    async def delete(self, key: str) -> None:
        async with self._lock.write():
            if self._cache.pop(key, None) is None:
                raise NotFoundError("Cache key", key)

    def _sweep(self, now: float) -> None:
        """Drop every expired entry. The write lock must be held."""
        expired = [key for key, entry in self._cache.items() if entry.is_expired(now)]
        for key in expired:
            del self._cache[key]
        if expired:
            self._expirations += len(expired)
            logger.debug(f"Swept {len(expired)} expired cache entries")

    def __len__(self) -> int:
        """Number of stored entries, including expired ones not yet swept."""
        return len(self._cache)

    async def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with hit, miss and expiration counters
        """
        async with self._lock.read():
            size = len(self._cache)
        total = self._hits + self._misses
        return {
            "name": self.name,
            "size": size,
            "hits": self._hits,
            "misses": self._misses,
            "expirations": self._expirations,
            "hit_ratio": self._hits / total if total else 0.0,
        }

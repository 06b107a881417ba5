"""
Base Cache Module

This module defines the interface shared by the cache backends. Keys and
values are strings. A missing or expired key is reported as NotFoundError
and every backend failure as InternalError.
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional


class CacheBackend(ABC):
    """
    Abstract base class for cache backends.

    This interface defines the operations that all cache backends must support.
    Concrete implementations handle the specifics of the store (process
    memory or Redis).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of this cache backend."""
        pass

    @abstractmethod
    async def get(self, key: str) -> str:
        """
        Retrieve a value from the cache.

        Args:
            key: The cache key

        Returns:
            The cached value

        Raises:
            NotFoundError: If the key is absent or its entry has expired
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str, expiration: Optional[timedelta] = None) -> None:
        """
        Store a value in the cache, replacing any previous value.

        Args:
            key: The cache key
            value: The value to cache
            expiration: How long the entry stays readable; None keeps it
                until it is deleted
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Remove a key from the cache.

        Args:
            key: The cache key

        Raises:
            NotFoundError: If the key was already absent
        """
        pass

    async def close(self) -> None:
        """Release connections held by the backend."""
        return None

"""
Cache Entry Module

This module provides the CacheEntry class, which pairs a cached value with
the instant after which it must no longer be served.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional


@dataclass(frozen=True)
class CacheEntry:
    """
    Represents a cached value with its expiry.

    Attributes:
        value: The cached value
        expires_at: Clock reading at which the entry expires, or None for
            no expiration
    """
    value: str
    expires_at: Optional[float] = None

    @classmethod
    def create(cls, value: str, now: float, expiration: Optional[timedelta] = None) -> 'CacheEntry':
        """
        Create an entry whose expiry is fixed at insertion time.

        Args:
            value: The value to cache
            now: Current clock reading
            expiration: Time-to-live, or None for no expiration

        Returns:
            A new CacheEntry
        """
        if expiration is None:
            return cls(value)
        return cls(value, now + expiration.total_seconds())

    def is_expired(self, now: float) -> bool:
        """
        Check if the entry has expired.

        Args:
            now: Current clock reading

        Returns:
            True if the entry has expired, False otherwise
        """
        if self.expires_at is None:
            return False
        return now >= self.expires_at


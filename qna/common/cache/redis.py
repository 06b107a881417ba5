"""
Redis Cache Backend Module

This module implements a Redis cache backend. Expiry is delegated to the
server by passing the time-to-live with SET, so there is no client-side
sweep.
"""

import logging
from datetime import timedelta
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from qna.common.exceptions import InternalError, NotFoundError
from qna.config import RedisCacheConfig
from .base import CacheBackend

# Setup logging
logger = logging.getLogger(__name__)


class RedisCacheBackend(CacheBackend):
    """
    Redis cache backend implementation.

    Values are stored as UTF-8 bytes and decoded on read; invalid byte
    sequences written by other clients are replaced rather than rejected.
    """

    def __init__(
        self,
        redis_client: Optional[redis.Redis] = None,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        key_prefix: str = "qna:",
        connection_timeout: Optional[float] = None,
        name: str = "redis"
    ):
        """
        Initialize the Redis cache backend.

        Args:
            redis_client: Optional existing Redis client to use
            host: Redis server hostname (default: "localhost")
            port: Redis server port (default: 6379)
            db: Redis database number (default: 0)
            password: Redis password (optional)
            key_prefix: Prefix for all Redis keys (default: "qna:")
            connection_timeout: Socket connect timeout in seconds (optional)
            name: Name for this cache backend (default: "redis")
        """
        self._key_prefix = key_prefix
        self._name = name

        if redis_client is not None:
            self._redis = redis_client
        else:
            self._redis = redis.Redis(
                host=host,
                port=port,
                db=db,
                password=password,
                socket_connect_timeout=connection_timeout,
                decode_responses=False  # We handle decoding ourselves
            )

    @classmethod
    def from_config(cls, config: RedisCacheConfig) -> 'RedisCacheBackend':
        return cls(
            host=config.host,
            port=config.port,
            db=config.db,
            password=config.password,
            key_prefix=config.key_prefix,
            connection_timeout=config.connection_timeout,
        )

    @property
    def name(self) -> str:
        """Get the name of this cache backend."""
        return self._name

    def _build_key(self, key: str) -> str:
        """
        Build a Redis key with the configured prefix.

        Args:
            key: The original cache key

        Returns:
            The prefixed Redis key
        """
        return f"{self._key_prefix}{key}"

    def _internal_error(self, operation: str, error: Exception) -> InternalError:
        logger.error(f"Redis error in {operation}: {error}")
        return InternalError(f"redis {operation} failed: {error}", error)

    async def get(self, key: str) -> str:
        try:
            data = await self._redis.get(self._build_key(key))
        except (RedisError, OSError) as e:
            raise self._internal_error("get", e) from e

        if data is None:
            raise NotFoundError("Cache key", key)
        if isinstance(data, bytes):
            return data.decode("utf-8", errors="replace")
        return str(data)

    async def set(self, key: str, value: str, expiration: Optional[timedelta] = None) -> None:
        # Millisecond precision; a positive duration never rounds down to 0
        px = None
        if expiration is not None:
            px = max(1, int(expiration.total_seconds() * 1000))
        try:
            await self._redis.set(self._build_key(key), value.encode("utf-8"), px=px)
        except (RedisError, OSError) as e:
            raise self._internal_error("set", e) from e

    async def delete(self, key: str) -> None:
        try:
            removed = await self._redis.delete(self._build_key(key))
        except (RedisError, OSError) as e:
            raise self._internal_error("delete", e) from e

        if removed == 0:
            raise NotFoundError("Cache key", key)

    async def ping(self) -> bool:
        """
        Check that the server answers.

        Returns:
            True if the server responded, False otherwise
        """
        try:
            return bool(await self._redis.ping())
        except (RedisError, OSError) as e:
            logger.warning(f"Redis connection test failed: {e}")
            return False

    async def close(self) -> None:
        await self._redis.aclose()

"""
Caching System

This package provides the string key-value cache used in front of slow
downstream calls, with an in-process backend and a Redis backend.
"""

import logging
from typing import Union

from qna.common.cache.base import CacheBackend
from qna.common.cache.entry import CacheEntry
from qna.common.cache.memory import MemoryCacheBackend
from qna.common.cache.redis import RedisCacheBackend
from qna.config import InProcessCacheConfig, RedisCacheConfig

# Set up logging
logger = logging.getLogger(__name__)


def create_cache(config: Union[InProcessCacheConfig, RedisCacheConfig]) -> CacheBackend:
    """
    Build the cache backend selected by the configuration.

    Args:
        config: The ``cache`` section of the application config

    Returns:
        A cache backend
    """
    if isinstance(config, RedisCacheConfig):
        logger.info(f"Using Redis cache at {config.host}:{config.port}/{config.db}")
        return RedisCacheBackend.from_config(config)
    logger.info("Using in-process cache")
    return MemoryCacheBackend()


__all__ = [
    'CacheBackend',
    'CacheEntry',
    'MemoryCacheBackend',
    'RedisCacheBackend',
    'create_cache',
]

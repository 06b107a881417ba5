"""
Database Engine Construction

This module turns the relational backend configuration into an async
SQLAlchemy engine with a bounded connection pool.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from qna.common.logger import app_logger
from qna.config import PostgresDatabaseConfig

# Module logger
logger = app_logger.getChild("db.connection")

# Seconds after which pooled connections are replaced
POOL_RECYCLE_SECONDS = 300


def normalize_database_url(url: str) -> str:
    """
    Select the async driver for a database URL.

    ``postgres://`` and ``postgresql://`` URLs get the asyncpg driver and
    plain ``sqlite://`` URLs get aiosqlite. URLs that already name a driver
    are returned unchanged.

    Args:
        url: Database connection URL

    Returns:
        URL usable with ``create_async_engine``
    """
    if url.startswith("postgres://"):
        return "postgresql+asyncpg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+asyncpg://" + url[len("postgresql://"):]
    if url.startswith("sqlite://"):
        return "sqlite+aiosqlite://" + url[len("sqlite://"):]
    return url


def get_engine_kwargs(url: str, max_size: int, pool_timeout: float, echo: bool = False) -> Dict[str, Any]:
    """
    Get engine keyword arguments based on database type.

    The PostgreSQL pool never grows past ``max_size`` connections and a
    request that cannot check one out within ``pool_timeout`` seconds fails
    instead of queueing indefinitely.
    """
    kwargs: Dict[str, Any] = {"echo": echo}

    if url.startswith("postgresql"):
        kwargs.update({
            "pool_size": max_size,
            "max_overflow": 0,
            "pool_timeout": pool_timeout,
            "pool_pre_ping": True,
            "pool_recycle": POOL_RECYCLE_SECONDS,
        })
    # SQLite and other databases use default settings

    return kwargs


def create_database_engine(config: PostgresDatabaseConfig) -> AsyncEngine:
    """
    Create the async engine for the relational backend.

    Args:
        config: Relational backend configuration

    Returns:
        AsyncEngine instance
    """
    url = normalize_database_url(config.url)
    logger.info(f"Creating database engine for {url.split('://', 1)[0]} with pool size {config.max_size}")
    return create_async_engine(
        url,
        **get_engine_kwargs(url, config.max_size, config.pool_timeout, config.echo)
    )

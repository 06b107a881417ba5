"""
Database initialization and connection management.

This module provides functions for:
1. Creating and checking the async engine
2. Applying the alembic migrations
3. Disposing of the connection pool
"""

import asyncio
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from qna.common.db.connection import create_database_engine, normalize_database_url
from qna.common.logger import app_logger
from qna.config import PostgresDatabaseConfig

# Setup module logger
logger = app_logger.getChild("database.init_db")

# Directory holding env.py and the versions/ folder
MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "alembic"

# Global engine instance
_engine: Optional[AsyncEngine] = None


def get_engine() -> AsyncEngine:
    """Get the global async engine instance."""
    if _engine is None:
        raise RuntimeError("Database engine not initialized. Call initialize_database() first.")
    return _engine


def get_alembic_config(database_url: str) -> Config:
    """
    Build an alembic configuration without an ini file.

    Args:
        database_url: Database connection URL

    Returns:
        Alembic Config pointing at the bundled migrations
    """
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation treats '%' as special
    alembic_cfg.set_main_option(
        "sqlalchemy.url", normalize_database_url(database_url).replace("%", "%%")
    )
    return alembic_cfg


def run_migrations(database_url: str, revision: str = "head") -> None:
    """
    Upgrade the schema to ``revision``.

    Already applied revisions are skipped, so this is safe to run on every
    start. It drives its own event loop and must not be called from a
    running one; use ``migrate_database`` there.

    Args:
        database_url: Database connection URL
        revision: Target revision
    """
    logger.info(f"Applying database migrations up to {revision}")
    command.upgrade(get_alembic_config(database_url), revision)


def downgrade_migrations(database_url: str, revision: str) -> None:
    """Downgrade the schema to ``revision``."""
    logger.info(f"Reverting database migrations down to {revision}")
    command.downgrade(get_alembic_config(database_url), revision)


async def migrate_database(database_url: str, revision: str = "head") -> None:
    """Apply migrations from async code by running them in a worker thread."""
    await asyncio.to_thread(run_migrations, database_url, revision)


async def initialize_database(config: PostgresDatabaseConfig) -> AsyncEngine:
    """
    Initialize the async database engine.

    Args:
        config: Relational backend configuration

    Returns:
        AsyncEngine instance
    """
    global _engine

    try:
        if config.run_migrations:
            await migrate_database(config.url)

        _engine = create_database_engine(config)

        # Test connection
        async with _engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

        logger.info("Database engine initialized successfully")
        return _engine

    except Exception as e:
        logger.error(f"Failed to initialize async database: {str(e)}")
        if _engine is not None:
            await _engine.dispose()
            _engine = None
        raise


async def close_database() -> None:
    """Close the database engine and all connections."""
    global _engine

    if _engine:
        await _engine.dispose()
        _engine = None
        logger.info("Database engine closed successfully")

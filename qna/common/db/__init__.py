"""
Database Connection Package

Engine construction for the relational backend.
"""

from qna.common.db.connection import (
    create_database_engine,
    get_engine_kwargs,
    normalize_database_url,
)

__all__ = [
    'create_database_engine',
    'get_engine_kwargs',
    'normalize_database_url',
]

"""
Common Components

Infrastructure shared across the service: the error taxonomy, logging,
locking, caching and database engine construction.
"""

from qna.common.logger import app_logger

__all__ = ['app_logger']

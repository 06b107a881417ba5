"""
Database Module

This module provides the database models and schema management for the
relational question store.
"""

from qna.database.base import Base, ModelBase, metadata
from qna.database.models import QuestionModel

__all__ = ['Base', 'ModelBase', 'metadata', 'QuestionModel']

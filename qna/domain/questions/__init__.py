"""
Question domain module.

This module contains the domain model, the repository interface and its
in-memory and relational implementations.
"""

from .filters import Pagination, QuestionFilter
from .memory_repository import MemoryQuestionRepository
from .model import Question, QuestionId
from .repository import QuestionRepository

__all__ = [
    'Pagination',
    'Question',
    'QuestionFilter',
    'QuestionId',
    'QuestionRepository',
    'MemoryQuestionRepository',
]

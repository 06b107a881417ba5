"""
Question Repository Module

This module defines the repository interface for accessing and storing
Question entities. Every backend raises the errors from
``qna.common.exceptions`` and nothing backend-specific.
"""

import abc
from typing import List

from .filters import QuestionFilter
from .model import Question, QuestionId


class QuestionRepository(abc.ABC):
    """
    Abstract base class for question repositories.

    This interface defines the contract for accessing and storing Question
    entities. Mutations are visible to the next call on the same repository.
    """

    @abc.abstractmethod
    async def add(self, question: Question) -> Question:
        """
        Add a question.

        Whether the supplied identifier is kept depends on the backend:
        the in-memory store keys by it, the relational store generates
        its own key and returns it in the result.

        Args:
            question: The Question entity to add

        Returns:
            The stored Question entity
        """
        pass

    @abc.abstractmethod
    async def update(self, question: Question) -> Question:
        """
        Replace a stored question with a new version.

        Args:
            question: The full new state of the question

        Returns:
            The stored Question entity

        Raises:
            NotFoundError: If no question has this identifier
        """
        pass

    @abc.abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """
        Delete a question by its ID.

        Args:
            question_id: The ID of the question to delete

        Raises:
            NotFoundError: If no question has this identifier
        """
        pass

    @abc.abstractmethod
    async def get(self, question_id: QuestionId) -> Question:
        """
        Get a question by its ID.

        Args:
            question_id: The ID of the question to retrieve

        Returns:
            The Question entity

        Raises:
            NotFoundError: If no question has this identifier
        """
        pass

    @abc.abstractmethod
    async def list(self, question_filter: QuestionFilter) -> List[Question]:
        """
        List questions inside the filter's pagination window.

        An empty or out-of-range window returns an empty list.

        Args:
            question_filter: Pagination and sort criteria

        Returns:
            List of Question entities in the backend's stable order
        """
        pass

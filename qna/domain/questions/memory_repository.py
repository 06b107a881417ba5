"""
Memory Question Repository Module

This module provides an in-memory implementation of the QuestionRepository
interface. It is a full backend, safe for concurrent coroutines, and is the
default when no database is configured.
"""

import logging
from typing import Dict, List, Optional

from qna.common.exceptions import NotFoundError
from qna.common.locks import AsyncRWLock
from .filters import QuestionFilter
from .model import Question, QuestionId
from .repository import QuestionRepository

# Setup logging
logger = logging.getLogger(__name__)


class _QuestionStore:
    """The mapping shared by every handle of one in-memory repository."""

    def __init__(self):
        self.questions: Dict[QuestionId, Question] = {}
        self.lock = AsyncRWLock()


class MemoryQuestionRepository(QuestionRepository):
    """
    In-memory implementation of the QuestionRepository.

    The supplied identifier is authoritative: ``add`` stores the question
    under ``question.id`` and silently replaces any question already stored
    there. The relational backend behaves differently (it generates keys),
    and callers that need portable behaviour should not rely on either.

    Handles created with ``clone`` share one store, so a write through one
    handle is visible through all of them.
    """

    def __init__(self, initial_data: Optional[List[Question]] = None):
        """
        Initialize the repository with optional initial data.

        Args:
            initial_data: Optional list of Question entities to initialize with
        """
        self._store = _QuestionStore()

        if initial_data:
            for question in initial_data:
                self._store.questions[question.id] = question.copy()

    @classmethod
    def _from_store(cls, store: _QuestionStore) -> 'MemoryQuestionRepository':
        repository = cls.__new__(cls)
        repository._store = store
        return repository

    def clone(self) -> 'MemoryQuestionRepository':
        """Return another handle onto the same underlying store."""
        return self._from_store(self._store)

    def shares_store_with(self, other: 'MemoryQuestionRepository') -> bool:
        return self._store is other._store

    async def add(self, question: Question) -> Question:
        stored = question.copy()
        async with self._store.lock.write():
            if stored.id in self._store.questions:
                logger.debug(f"Overwriting question {stored.id}")
            self._store.questions[stored.id] = stored
        return stored.copy()

    async def update(self, question: Question) -> Question:
        stored = question.copy()
        async with self._store.lock.write():
            if stored.id not in self._store.questions:
                raise NotFoundError("Question", stored.id)
            self._store.questions[stored.id] = stored
        return stored.copy()

    async def delete(self, question_id: QuestionId) -> None:
        async with self._store.lock.write():
            if self._store.questions.pop(question_id, None) is None:
                raise NotFoundError("Question", question_id)

    async def get(self, question_id: QuestionId) -> Question:
        async with self._store.lock.read():
            question = self._store.questions.get(question_id)
        if question is None:
            raise NotFoundError("Question", question_id)
        return question.copy()

    async def list(self, question_filter: QuestionFilter) -> List[Question]:
        """
        List questions in insertion order.

        The values are snapshotted under the read lock before the window is
        applied, so writers that run afterwards cannot shift the slice.
        """
        pagination = question_filter.pagination
        if pagination.is_empty:
            return []
        async with self._store.lock.read():
            snapshot = list(self._store.questions.values())
        return [q.copy() for q in snapshot[pagination.start:pagination.end]]

    async def count(self) -> int:
        async with self._store.lock.read():
            return len(self._store.questions)

    async def clear(self) -> None:
        """
        Remove every question.

        This method is specific to the memory implementation and not part of
        the QuestionRepository interface.
        """
        async with self._store.lock.write():
            self._store.questions.clear()

"""
Answer Service Module

Serves answers to stored questions, keeping generated answers in the cache
so the slow generator is called once per question until the entry expires.
"""

import logging
from datetime import timedelta
from typing import Optional

from qna.common.cache import CacheBackend
from qna.common.exceptions import InternalError, NotFoundError
from qna.domain.questions import QuestionId, QuestionRepository
from .port import AnswerPort

# Setup logging
logger = logging.getLogger(__name__)


class AnswerService:
    """
    Read-through cache in front of an answer generator.

    A cache that fails is logged and bypassed: the answer is still
    generated, just not reused. Cache entries are not invalidated
    automatically when a question changes; callers use ``invalidate``.
    """

    def __init__(
        self,
        repository: QuestionRepository,
        cache: CacheBackend,
        answers: AnswerPort,
        ttl: Optional[timedelta] = timedelta(hours=1)
    ):
        """
        Initialize the service.

        Args:
            repository: Where questions are read from
            cache: Where generated answers are kept
            answers: The answer generator
            ttl: How long a generated answer is reused (None: until invalidated)
        """
        self._repository = repository
        self._cache = cache
        self._answers = answers
        self._ttl = ttl

    @staticmethod
    def cache_key(question_id: QuestionId) -> str:
        return f"answer:{question_id}"

    async def answer_for(self, question_id: QuestionId) -> str:
        """
        Get the answer to a stored question.

        Args:
            question_id: ID of the question

        Returns:
            The answer text

        Raises:
            NotFoundError: If the question does not exist
            ParseError: If the ID is malformed for the repository
            InternalError: If the generator fails
        """
        question = await self._repository.get(question_id)
        key = self.cache_key(question.id)

        try:
            answer = await self._cache.get(key)
            logger.debug(f"Answer for question {question.id} served from cache")
            return answer
        except NotFoundError:
            pass
        except InternalError as e:
            logger.warning(f"Answer cache read failed for question {question.id}: {e}")

        answer = await self._answers.get_answer(question.content)

        try:
            await self._cache.set(key, answer, self._ttl)
        except InternalError as e:
            logger.warning(f"Answer cache write failed for question {question.id}: {e}")
        return answer

    async def invalidate(self, question_id: QuestionId) -> bool:
        """
        Drop the cached answer of a question.

        Returns:
            True if an entry was removed, False if none was cached or the
            cache could not be reached
        """
        try:
            await self._cache.delete(self.cache_key(question_id))
        except NotFoundError:
            return False
        except InternalError as e:
            logger.error(f"Could not invalidate cached answer for question {question_id}: {e}")
            return False
        return True

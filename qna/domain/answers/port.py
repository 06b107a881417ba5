"""
Answer Port Module

Interface of the downstream service that writes answers to questions.
"""

import abc


class AnswerPort(abc.ABC):
    """Abstract base class for answer generators."""

    @abc.abstractmethod
    async def get_answer(self, question: str) -> str:
        """
        Generate an answer to a question.

        Args:
            question: The question text

        Returns:
            The answer text

        Raises:
            InternalError: If the generator cannot be reached or fails
        """
        pass

    async def close(self) -> None:
        """Release any connections held by the generator."""
        return None

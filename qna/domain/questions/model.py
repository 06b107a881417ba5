"""
Question Domain Model Module

This module defines the core domain entities for the question subsystem.
"""

import re
import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from qna.common.exceptions import ParseError

# Bounds of the relational primary key (signed 32-bit integer)
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class QuestionId:
    """
    Opaque identifier of a question.

    The in-memory backend uses the string as-is. The relational backend
    requires it to be the decimal form of a 32-bit integer key.
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ParseError("question id must be a string", self.value)
        if self.value == "":
            raise ParseError("question id cannot be empty", self.value)

    def __str__(self) -> str:
        return self.value

    def to_int(self) -> int:
        """
        Parse the identifier as a relational primary key.

        Returns:
            The integer key

        Raises:
            ParseError: If the identifier is not a 32-bit integer
        """
        if not _INTEGER_PATTERN.fullmatch(self.value):
            raise ParseError(f"question id {self.value!r} is not an integer", self.value)
        key = int(self.value)
        if not INT32_MIN <= key <= INT32_MAX:
            raise ParseError(f"question id {self.value!r} is out of range", self.value)
        return key

    @classmethod
    def from_int(cls, key: int) -> 'QuestionId':
        return cls(str(key))

    @classmethod
    def of(cls, value: Union['QuestionId', str, int]) -> 'QuestionId':
        """Coerce a raw string or integer into a QuestionId."""
        if isinstance(value, QuestionId):
            return value
        if isinstance(value, int):
            return cls.from_int(value)
        return cls(value)


@dataclass(frozen=True)
class Question:
    """
    Represents a question.

    Instances are immutable. The repositories hand out copies, so a caller
    holding a Question never shares state with the stored record.

    Attributes:
        id: Identifier of the question
        title: Short title
        content: Full question text
        tags: Optional ordered list of tags
    """
    id: QuestionId
    title: str
    content: str
    tags: Optional[List[str]] = None

    # Compared by value but never hashed: tags is a mutable list
    __hash__ = None

    def with_id(self, question_id: Union[QuestionId, str]) -> 'Question':
        """
        Return a copy of the question carrying a different identifier.

        Args:
            question_id: The identifier to use

        Returns:
            A new Question instance
        """
        return dataclasses.replace(self.copy(), id=QuestionId.of(question_id))

    def copy(self) -> 'Question':
        """Return a copy that does not share the tags list."""
        return dataclasses.replace(
            self, tags=list(self.tags) if self.tags is not None else None
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the question to a dictionary.

        Returns:
            Dictionary representation of the question
        """
        return {
            'id': str(self.id),
            'title': self.title,
            'content': self.content,
            'tags': list(self.tags) if self.tags is not None else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Question':
        """
        Create a Question from a dictionary.

        Args:
            data: Dictionary containing question data

        Returns:
            A Question instance
        """
        tags = data.get('tags')
        return cls(
            id=QuestionId.of(data['id']),
            title=data['title'],
            content=data['content'],
            tags=list(tags) if tags is not None else None
        )

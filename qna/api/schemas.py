"""
API Schemas

Request and response bodies of the question endpoints.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from qna.domain.questions import Question, QuestionId


class QuestionCreate(BaseModel):
    """Body of POST /questions."""
    id: Union[str, int]
    title: str = Field(max_length=255)
    content: str
    tags: Optional[List[str]] = None

    def to_question(self) -> Question:
        return Question(
            id=QuestionId.of(self.id),
            title=self.title,
            content=self.content,
            tags=self.tags,
        )


class QuestionUpdate(BaseModel):
    """
    Body of PUT /questions/{id}.

    The identifier in the path wins over ``id`` in the body, which may be
    left out.
    """
    id: Optional[Union[str, int]] = None
    title: str = Field(max_length=255)
    content: str
    tags: Optional[List[str]] = None

    def to_question(self, question_id: QuestionId) -> Question:
        return Question(
            id=question_id,
            title=self.title,
            content=self.content,
            tags=self.tags,
        )


class QuestionResponse(BaseModel):
    """A question as returned by the API."""
    id: str
    title: str
    content: str
    tags: Optional[List[str]] = None

    @classmethod
    def from_question(cls, question: Question) -> 'QuestionResponse':
        return cls(**question.to_dict())


class AnswerResponse(BaseModel):
    question_id: str
    answer: str


class MessageResponse(BaseModel):
    message: str

"""
API Dependencies

FastAPI dependencies that hand route functions the backends built at
startup. Routes only ever see the port interfaces.
"""

from fastapi import Request

from qna.domain.answers import AnswerService
from qna.domain.questions import QuestionRepository


def get_repository(request: Request) -> QuestionRepository:
    return request.app.state.repository


def get_answer_service(request: Request) -> AnswerService:
    return request.app.state.answer_service

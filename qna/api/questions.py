"""
Question Routes

CRUD endpoints for questions and the answer endpoint.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from qna.domain.answers import AnswerService
from qna.domain.questions import QuestionFilter, QuestionId, QuestionRepository
from .dependencies import get_answer_service, get_repository
from .schemas import (
    AnswerResponse,
    MessageResponse,
    QuestionCreate,
    QuestionResponse,
    QuestionUpdate,
)

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("", response_model=List[QuestionResponse])
async def list_questions(
    request: Request,
    repository: QuestionRepository = Depends(get_repository)
):
    """
    List questions.

    Query parameters ``start`` and ``end`` select the half-open window
    ``[start, end)`` (defaults 0 and 10).
    """
    question_filter = QuestionFilter.from_query(dict(request.query_params))
    questions = await repository.list(question_filter)
    return [QuestionResponse.from_question(q) for q in questions]


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: str,
    repository: QuestionRepository = Depends(get_repository)
):
    question = await repository.get(QuestionId(question_id))
    return QuestionResponse.from_question(question)


@router.post("", response_model=QuestionResponse)
async def add_question(
    payload: QuestionCreate,
    repository: QuestionRepository = Depends(get_repository)
):
    question = await repository.add(payload.to_question())
    logger.info(f"Question {question.id} added")
    return QuestionResponse.from_question(question)


@router.put("/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: str,
    payload: QuestionUpdate,
    repository: QuestionRepository = Depends(get_repository),
    answer_service: AnswerService = Depends(get_answer_service)
):
    """Replace a question. The path identifier overrides any ``id`` in the body."""
    target = QuestionId(question_id)
    question = await repository.update(payload.to_question(target))
    await answer_service.invalidate(question.id)
    logger.info(f"Question {question.id} updated")
    return QuestionResponse.from_question(question)


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: str,
    repository: QuestionRepository = Depends(get_repository),
    answer_service: AnswerService = Depends(get_answer_service)
):
    target = QuestionId(question_id)
    await repository.delete(target)
    await answer_service.invalidate(target)
    logger.info(f"Question {target} deleted")
    return MessageResponse(message="Question deleted")


@router.get("/{question_id}/answer", response_model=AnswerResponse)
async def get_answer(
    question_id: str,
    answer_service: AnswerService = Depends(get_answer_service)
):
    """Answer a stored question, reusing a cached answer when there is one."""
    target = QuestionId(question_id)
    answer = await answer_service.answer_for(target)
    return AnswerResponse(question_id=str(target), answer=answer)

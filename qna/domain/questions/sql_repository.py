"""
SQL Question Repository Module

This module provides the relational implementation of the QuestionRepository
interface on top of an async SQLAlchemy engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from qna.common.exceptions import InternalError, NotFoundError
from qna.database.models import QuestionModel
from .filters import QuestionFilter
from .model import Question, QuestionId
from .repository import QuestionRepository

# Setup logging
logger = logging.getLogger(__name__)

questions = QuestionModel.__table__

_COLUMNS = (questions.c.id, questions.c.title, questions.c.content, questions.c.tags)

# OFFSET and LIMIT are bound as signed 64-bit integers
_MAX_SQL_INT = 2 ** 63 - 1


def question_to_row(question: Question) -> Dict[str, Any]:
    """Map an entity to insertable column values, without the key."""
    return {
        "title": question.title,
        "content": question.content,
        "tags": list(question.tags) if question.tags is not None else None,
    }


def row_to_question(row: Row) -> Question:
    """
    Map a row to an entity.

    NULL elements of the tags array are dropped.
    """
    tags: Optional[List[str]] = None
    if row.tags is not None:
        tags = [tag for tag in row.tags if tag is not None]
    return Question(
        id=QuestionId.from_int(row.id),
        title=row.title,
        content=row.content,
        tags=tags,
    )


class SqlQuestionRepository(QuestionRepository):
    """
    Relational implementation of the QuestionRepository.

    The database generates primary keys: ``add`` ignores the supplied
    identifier and returns the question under its new key. Every other
    operation needs an identifier that parses as a 32-bit integer and
    raises ParseError otherwise.

    Each call checks out one pooled connection and runs one statement.
    """

    def __init__(self, engine: AsyncEngine):
        """
        Initialize the repository.

        Args:
            engine: Async engine whose pool the repository draws from
        """
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def _connection(self, operation: str) -> AsyncIterator[AsyncConnection]:
        try:
            async with self._engine.begin() as conn:
                yield conn
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database error in {operation}: {e}")
            raise InternalError(f"question {operation} failed: {e}", e) from e

    async def add(self, question: Question) -> Question:
        statement = insert(questions).values(**question_to_row(question)).returning(*_COLUMNS)
        async with self._connection("add") as conn:
            row = (await conn.execute(statement)).one()
        return row_to_question(row)

    async def update(self, question: Question) -> Question:
        key = question.id.to_int()
        statement = (
            update(questions)
            .where(questions.c.id == key)
            .values(**question_to_row(question))
            .returning(*_COLUMNS)
        )
        async with self._connection("update") as conn:
            row = (await conn.execute(statement)).one_or_none()
        if row is None:
            raise NotFoundError("Question", question.id)
        return row_to_question(row)

    async def delete(self, question_id: QuestionId) -> None:
        statement = delete(questions).where(questions.c.id == question_id.to_int())
        async with self._connection("delete") as conn:
            deleted = (await conn.execute(statement)).rowcount
        if deleted == 0:
            raise NotFoundError("Question", question_id)

    async def get(self, question_id: QuestionId) -> Question:
        statement = select(*_COLUMNS).where(questions.c.id == question_id.to_int())
        async with self._connection("get") as conn:
            row = (await conn.execute(statement)).one_or_none()
        if row is None:
            raise NotFoundError("Question", question_id)
        return row_to_question(row)

    async def list(self, question_filter: QuestionFilter) -> List[Question]:
        """
        List questions ordered by key.

        The pagination window maps to OFFSET/LIMIT. Bounds beyond the
        range of a 64-bit integer are clamped. ``sort`` is ignored.
        """
        pagination = question_filter.pagination
        if pagination.is_empty or pagination.start > _MAX_SQL_INT:
            return []
        statement = (
            select(*_COLUMNS)
            .order_by(questions.c.id)
            .offset(pagination.start)
            .limit(min(pagination.limit, _MAX_SQL_INT))
        )
        async with self._connection("list") as conn:
            rows = (await conn.execute(statement)).all()
        return [row_to_question(row) for row in rows]

"""
Shared fixtures for the question service tests.

The relational repository runs against an in-memory SQLite database
through aiosqlite, created from the same table metadata as the migrations.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from qna.database import metadata
from qna.domain.questions import MemoryQuestionRepository, Question, QuestionId
from qna.domain.questions.sql_repository import SqlQuestionRepository

SQLITE_MEMORY_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def sqlite_engine():
    """Create an engine on a fresh in-memory database with the schema applied."""
    engine = create_async_engine(
        SQLITE_MEMORY_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def memory_repository():
    return MemoryQuestionRepository()


@pytest.fixture
def sql_repository(sqlite_engine):
    return SqlQuestionRepository(sqlite_engine)


@pytest.fixture(params=["memory", "sql"])
def repository(request, sqlite_engine):
    """Each repository backend in turn."""
    if request.param == "memory":
        return MemoryQuestionRepository()
    return SqlQuestionRepository(sqlite_engine)


@pytest.fixture
def make_question():
    """Build a question with defaults for the fields a test does not care about."""
    def _make(question_id="1", title="T", content="C", tags=None):
        return Question(id=QuestionId(question_id), title=title, content=content, tags=tags)
    return _make

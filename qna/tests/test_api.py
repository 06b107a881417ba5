"""
API Tests for the question service

Exercises the HTTP surface end to end through FastAPI's TestClient, with
the in-memory repository and cache and a mocked answer generator:
1. Normal operation scenarios with valid inputs
2. Error mapping for malformed input and missing questions
3. Answer caching behaviour
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from qna.common.cache import MemoryCacheBackend
from qna.common.exceptions import InternalError
from qna.config import AppConfig
from qna.domain.answers import AnswerPort
from qna.domain.questions import MemoryQuestionRepository
from qna.domain.questions.sql_repository import SqlQuestionRepository
from qna.main import create_app


@pytest.fixture
def answers():
    mock = AsyncMock(spec=AnswerPort)
    mock.get_answer.return_value = "42"
    return mock


@pytest.fixture
def client(answers):
    app = create_app(
        AppConfig(),
        repository=MemoryQuestionRepository(),
        cache=MemoryCacheBackend(),
        answers=answers,
    )
    with TestClient(app) as client:
        yield client


def question_payload(question_id="1", title="T", content="C", tags=None):
    return {"id": question_id, "title": title, "content": content, "tags": tags}


class TestNormalOperation:
    """Tests for normal API operation"""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "qna"

    def test_question_lifecycle(self, client):
        """Add, read, update, list and delete one question"""
        # Add
        response = client.post("/questions", json=question_payload(tags=["a", "b"]))
        assert response.status_code == 200
        assert response.json() == {"id": "1", "title": "T", "content": "C", "tags": ["a", "b"]}

        # Read
        response = client.get("/questions/1")
        assert response.status_code == 200
        assert response.json()["title"] == "T"

        # Update
        response = client.put("/questions/1", json=question_payload(title="T2", tags=["a", "b"]))
        assert response.status_code == 200
        assert response.json()["title"] == "T2"

        # List
        response = client.get("/questions")
        assert response.status_code == 200
        assert [q["title"] for q in response.json()] == ["T2"]

        # Delete
        response = client.delete("/questions/1")
        assert response.status_code == 200
        assert response.json() == {"message": "Question deleted"}

        assert client.get("/questions/1").status_code == 404

    def test_numeric_id_is_accepted(self, client):
        response = client.post("/questions", json=question_payload(question_id=12))

        assert response.status_code == 200
        assert response.json()["id"] == "12"

    def test_list_pagination(self, client):
        # Arrange
        for i in range(15):
            client.post("/questions", json=question_payload(question_id=str(i), title=f"T{i}"))

        # Act
        default_page = client.get("/questions").json()
        window = client.get("/questions", params={"start": 3, "end": 6}).json()
        inverted = client.get("/questions", params={"start": 6, "end": 3}).json()

        # Assert
        assert len(default_page) == 10
        assert [q["title"] for q in window] == ["T3", "T4", "T5"]
        assert inverted == []

    def test_path_id_wins_over_body_id(self, client):
        client.post("/questions", json=question_payload(question_id="1"))

        response = client.put("/questions/1", json=question_payload(question_id="999", title="T2"))

        assert response.status_code == 200
        assert response.json()["id"] == "1"
        assert client.get("/questions/999").status_code == 404

    def test_update_body_without_id(self, client):
        client.post("/questions", json=question_payload(question_id="1"))

        response = client.put("/questions/1", json={"title": "T2", "content": "C2"})

        assert response.status_code == 200
        assert response.json() == {"id": "1", "title": "T2", "content": "C2", "tags": None}


class TestEdgeCases:
    """Tests for error mapping"""

    def test_get_missing_question(self, client):
        response = client.get("/questions/404")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not found"}

    def test_update_missing_question(self, client):
        response = client.put("/questions/404", json=question_payload(question_id="404"))

        assert response.status_code == 404

    def test_delete_missing_question(self, client):
        response = client.delete("/questions/404")

        assert response.status_code == 404

    @pytest.mark.parametrize("params", [
        {"start": "abs", "end": "10"},
        {"start": "-1"},
        {"end": "ten"},
    ])
    def test_malformed_pagination(self, client, params):
        response = client.get("/questions", params=params)

        assert response.status_code == 400
        assert "detail" in response.json()

    def test_missing_required_fields(self, client):
        response = client.post("/questions", json={"id": "1", "content": "C"})

        assert response.status_code == 422

    def test_title_too_long(self, client):
        response = client.post("/questions", json=question_payload(title="x" * 256))

        assert response.status_code == 422

    def test_malformed_json(self, client):
        response = client.post(
            "/questions",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422

    def test_backend_failure_is_internal_server_error(self, answers):
        engine = MagicMock()
        engine.begin.side_effect = OperationalError("SELECT 1", {}, Exception("down"))
        app = create_app(
            AppConfig(),
            repository=SqlQuestionRepository(engine),
            cache=MemoryCacheBackend(),
            answers=answers,
        )

        with TestClient(app) as client:
            response = client.get("/questions/1")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_unparseable_id_on_relational_backend(self, answers):
        engine = MagicMock()
        app = create_app(
            AppConfig(),
            repository=SqlQuestionRepository(engine),
            cache=MemoryCacheBackend(),
            answers=answers,
        )

        with TestClient(app) as client:
            response = client.get("/questions/abc")

        assert response.status_code == 400
        engine.begin.assert_not_called()


class TestAnswers:
    """Tests for the answer endpoint"""

    def test_answer_is_cached(self, client, answers):
        # Arrange
        client.post("/questions", json=question_payload(content="What is six times seven?"))

        # Act
        first = client.get("/questions/1/answer")
        second = client.get("/questions/1/answer")

        # Assert
        assert first.status_code == 200
        assert first.json() == {"question_id": "1", "answer": "42"}
        assert second.json() == first.json()
        answers.get_answer.assert_awaited_once_with("What is six times seven?")

    def test_update_invalidates_cached_answer(self, client, answers):
        client.post("/questions", json=question_payload())
        client.get("/questions/1/answer")

        client.put("/questions/1", json=question_payload(content="New content"))
        client.get("/questions/1/answer")

        assert answers.get_answer.await_count == 2
        answers.get_answer.assert_awaited_with("New content")

    def test_answer_for_missing_question(self, client, answers):
        response = client.get("/questions/404/answer")

        assert response.status_code == 404
        answers.get_answer.assert_not_awaited()

    def test_generator_failure(self, client, answers):
        answers.get_answer.side_effect = InternalError("generator down")
        client.post("/questions", json=question_payload())

        response = client.get("/questions/1/answer")

        assert response.status_code == 500


class TestLifespan:
    """Tests for startup and shutdown"""

    def test_failed_startup_releases_database(self, answers, monkeypatch):
        # Arrange
        close_database = AsyncMock()
        monkeypatch.setattr("qna.main.close_database", close_database)
        monkeypatch.setattr("qna.main.create_cache", MagicMock(side_effect=RuntimeError("cache config")))
        app = create_app(AppConfig(), repository=MemoryQuestionRepository(), answers=answers)

        # Act
        # Depending on the anyio version the error may arrive in an ExceptionGroup
        with pytest.raises(Exception):
            with TestClient(app):
                pass

        # Assert
        close_database.assert_awaited_once()
        answers.close.assert_not_awaited()

    def test_shutdown_closes_backends(self, answers):
        cache = MemoryCacheBackend()
        cache.close = AsyncMock()
        app = create_app(AppConfig(), repository=MemoryQuestionRepository(), cache=cache, answers=answers)

        with TestClient(app):
            pass

        cache.close.assert_awaited_once()
        answers.close.assert_awaited_once()

"""
Main application entry point for the question service.

This module assembles the FastAPI application: it picks the repository and
cache backends named by the configuration once at startup and exposes them
to the routes through ``app.state``.

Usage:
    - Direct: python -m qna.main
    - ASGI server: uvicorn --factory qna.main:create_app
"""

from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qna import __version__
from qna.api import questions_router, register_exception_handlers
from qna.common.cache import CacheBackend, RedisCacheBackend, create_cache
from qna.common.logger import app_logger, configure_logger
from qna.config import AppConfig, LoggingConfig, PostgresDatabaseConfig, get_config
from qna.database.init_db import close_database, initialize_database
from qna.domain.answers import AnswerPort, AnswerService, HttpAnswerClient
from qna.domain.questions import MemoryQuestionRepository, QuestionRepository
from qna.domain.questions.sql_repository import SqlQuestionRepository

# Setup module logger
logger = app_logger.getChild("main")


def setup_logging(config: LoggingConfig) -> None:
    """Apply the logging section of the configuration to the app logger."""
    configure_logger(
        level=config.level,
        use_json=config.use_json,
        log_file=config.file_path,
    )


async def create_repository(config: AppConfig) -> QuestionRepository:
    """
    Build the question repository selected by ``config.db``.

    For PostgreSQL this applies pending migrations and opens the pool.
    """
    if isinstance(config.db, PostgresDatabaseConfig):
        engine = await initialize_database(config.db)
        logger.info("Using PostgreSQL question repository")
        return SqlQuestionRepository(engine)
    logger.info("Using in-memory question repository")
    return MemoryQuestionRepository()


def create_app(
    config: Optional[AppConfig] = None,
    *,
    repository: Optional[QuestionRepository] = None,
    cache: Optional[CacheBackend] = None,
    answers: Optional[AnswerPort] = None
) -> FastAPI:
    """
    Create the FastAPI application.

    Backends passed in explicitly are used instead of building them from
    the configuration.

    Args:
        config: Application configuration (default: ``get_config()``)
        repository: Question repository to use
        cache: Cache backend to use
        answers: Answer generator to use

    Returns:
        The application
    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config.log)

        app.state.repository = (
            repository if repository is not None else await create_repository(config)
        )
        app_cache: Optional[CacheBackend] = None
        answer_port: Optional[AnswerPort] = None
        try:
            app_cache = cache if cache is not None else create_cache(config.cache)
            if isinstance(app_cache, RedisCacheBackend):
                await app_cache.ping()
            answer_port = answers if answers is not None else HttpAnswerClient.from_config(config.answer)

            ttl = config.answer.cache_ttl_seconds
            app.state.cache = app_cache
            app.state.answer_service = AnswerService(
                app.state.repository,
                app_cache,
                answer_port,
                ttl=timedelta(seconds=ttl) if ttl is not None else None,
            )
            logger.info(f"{config.service_name} startup complete")

            yield
        finally:
            if answer_port is not None:
                await answer_port.close()
            if app_cache is not None:
                await app_cache.close()
            await close_database()
            logger.info(f"{config.service_name} shutdown complete")

    app = FastAPI(
        title="Question Service API",
        description="Questions CRUD and cached answer generation",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(questions_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"service": config.service_name, "version": __version__}

    return app


# Entry point for running the application directly
if __name__ == "__main__":
    from qna.scripts.run_server import main

    main()

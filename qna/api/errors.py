"""
API Error Handlers

Maps the service error taxonomy onto HTTP responses. Request body
validation keeps FastAPI's default 422 response.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from qna.common.exceptions import (
    InternalError,
    MissingParametersError,
    NotFoundError,
    ParseError,
)

# Configure logging
logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, "Not found")


async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def missing_parameters_handler(request: Request, exc: MissingParametersError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
    """
    Report a backend failure without leaking its details to the client.

    Args:
        request: The incoming request
        exc: The internal error

    Returns:
        A 500 JSON response
    """
    logger.error(
        f"{request.method} {request.url.path} failed: {exc.message}",
        exc_info=exc.original_exception,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ParseError, parse_error_handler)
    app.add_exception_handler(MissingParametersError, missing_parameters_handler)
    app.add_exception_handler(InternalError, internal_error_handler)

"""
HTTP API

FastAPI routes and error handlers of the service.
"""

from .errors import register_exception_handlers
from .questions import router as questions_router

__all__ = ['questions_router', 'register_exception_handlers']

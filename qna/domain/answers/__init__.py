"""
Answer domain module.

Answer generation for stored questions, fronted by the cache.
"""

from .client import HttpAnswerClient
from .port import AnswerPort
from .service import AnswerService

__all__ = ['AnswerPort', 'AnswerService', 'HttpAnswerClient']

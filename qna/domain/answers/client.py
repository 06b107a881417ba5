"""
HTTP Answer Client Module

Client for the answer generation service. It posts the question text as
JSON and expects ``{"answer": "..."}`` back. Requests are not retried.
"""

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from qna.common.exceptions import InternalError
from qna.common.logger import log_execution_time
from qna.config import AnswerConfig
from .port import AnswerPort

# Setup logging
logger = logging.getLogger(__name__)


class HttpAnswerClient(AnswerPort):
    """Answer generator reached over HTTP with aiohttp."""

    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the answer service
            timeout: Total request timeout in seconds
            session: Optional existing client session to use
        """
        self._url = f"{base_url.rstrip('/')}/answer"
        self._timeout = timeout
        self._session = session
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: AnswerConfig) -> 'HttpAnswerClient':
        return cls(config.url, timeout=config.timeout)

    @property
    def url(self) -> str:
        return self._url

    async def _get_session(self) -> aiohttp.ClientSession:
        """Create the client session on first use."""
        if self._session is not None:
            return self._session

        async with self._session_lock:
            if self._session is None:
                self._session = aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self._timeout)
                )
        return self._session

    @log_execution_time(logger)
    async def get_answer(self, question: str) -> str:
        session = await self._get_session()
        try:
            async with session.post(self._url, json={"question": question}) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error(f"Answer service error: {response.status}, {error_text}")
                    raise InternalError(f"answer service returned {response.status}")
                data: Any = await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            logger.error("Answer service request timed out")
            raise InternalError("answer service request timed out", e) from e
        except (aiohttp.ClientError, ValueError) as e:
            logger.error(f"Answer service request failed: {e}")
            raise InternalError(f"answer service request failed: {e}", e) from e

        if not isinstance(data, dict) or not isinstance(data.get("answer"), str):
            logger.error(f"Malformed answer service response: {data!r}")
            raise InternalError("answer service returned a malformed response")
        return data["answer"]

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None

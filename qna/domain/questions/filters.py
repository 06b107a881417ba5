"""
Question Filter Module

Pagination and filter value objects for listing questions. Both are
built from untyped query parameters as delivered by the HTTP layer.
"""

import re
from dataclasses import dataclass
from typing import List, Mapping, Optional

from qna.common.exceptions import ParseError

DEFAULT_START = 0
DEFAULT_END = 10

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_unsigned(name: str, raw: str) -> int:
    if not isinstance(raw, str) or not _UNSIGNED_PATTERN.fullmatch(raw):
        raise ParseError(f"{name} must be an unsigned integer, got {raw!r}", raw)
    return int(raw)


@dataclass(frozen=True)
class Pagination:
    """
    Half-open window ``[start, end)`` over the stable order of all records.

    A window with ``end <= start`` selects nothing; it is not an error.
    """
    start: int = DEFAULT_START
    end: int = DEFAULT_END

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ParseError("pagination bounds must not be negative", (self.start, self.end))

    @property
    def limit(self) -> int:
        """Number of records the window can hold."""
        return max(self.end - self.start, 0)

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> 'Pagination':
        """
        Parse pagination from query parameters.

        Missing keys take their defaults. A present value that is not an
        unsigned integer raises instead of falling back to the default.

        Args:
            params: Mapping of query parameter names to raw values

        Returns:
            A Pagination instance

        Raises:
            ParseError: If ``start`` or ``end`` is not an unsigned integer
        """
        start = params.get("start")
        end = params.get("end")
        return cls(
            start=DEFAULT_START if start is None else _parse_unsigned("start", start),
            end=DEFAULT_END if end is None else _parse_unsigned("end", end),
        )


@dataclass(frozen=True)
class QuestionFilter:
    """
    Criteria for listing questions.

    ``sort`` is accepted and carried along but no backend orders by it yet.
    """
    pagination: Pagination = Pagination()
    sort: Optional[List[str]] = None

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> 'QuestionFilter':
        sort = params.get("sort")
        return cls(
            pagination=Pagination.from_query(params),
            sort=[field for field in sort.split(",") if field] if sort else None,
        )

"""
Database Row Models

Row layout of the relational question store. The schema itself is created
by the alembic migrations, which must be kept in step with this module.
"""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY

from qna.database.base import ModelBase

# Nullable array of nullable text on PostgreSQL; SQLite has no arrays
TagArray = ARRAY(Text).with_variant(JSON(), "sqlite")


class QuestionModel(ModelBase):
    """A stored question."""

    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    tags = Column(TagArray, nullable=True)
    created_on = Column(DateTime, nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<QuestionModel(id={self.id}, title={self.title!r})>"

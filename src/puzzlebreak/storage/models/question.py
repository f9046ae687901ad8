"""
Question Model

SQLAlchemy ORM model for puzzle questions (three clued items).
"""

from typing import List
from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from puzzlebreak.core.database import Base
from .mixins import TimestampMixin


class Question(Base, TimestampMixin):
    """A puzzle: an ordered list of clued items sharing one answer."""

    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    items: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    answers: Mapped[List["Answer"]] = relationship(
        "Answer",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="Answer.id"
    )

    def __repr__(self) -> str:
        return f"<Question(id={self.id}, items={self.items})>"

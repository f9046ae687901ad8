"""
Answer Model

SQLAlchemy ORM model for the canonical answer and accepted variants of a
question. The schema allows several rows per question; the store reads the
first one.
"""

from typing import List
from sqlalchemy import String, Integer, Text, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from puzzlebreak.core.database import Base
from .mixins import TimestampMixin


class Answer(Base, TimestampMixin):
    """Canonical answer plus variant spellings for a question."""

    __tablename__ = "answers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    canonical_answer: Mapped[str] = mapped_column(Text, nullable=False)
    variants: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    question: Mapped["Question"] = relationship("Question", back_populates="answers")

    def __repr__(self) -> str:
        return f"<Answer(id={self.id}, question_id={self.question_id}, canonical_answer='{self.canonical_answer}')>"

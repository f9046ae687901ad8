"""
Storage Models

SQLAlchemy ORM models for the question/answer store.
"""

from .question import Question
from .answer import Answer

__all__ = [
    "Question",
    "Answer",
]

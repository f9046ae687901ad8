"""
Storage Repositories

Data access layer for the question/answer store.
"""

from .answer_repository import AnswerRepository

__all__ = [
    "AnswerRepository",
]

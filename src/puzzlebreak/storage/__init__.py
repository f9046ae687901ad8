"""
Storage Module

Answer stores and the synonym cache.
"""

from .base import AnswerStore, StoredAnswer
from .cache import SynonymCache, SynonymCacheEntry
from .memory import InMemoryAnswerStore

__all__ = [
    "AnswerStore",
    "StoredAnswer",
    "SynonymCache",
    "SynonymCacheEntry",
    "InMemoryAnswerStore",
]

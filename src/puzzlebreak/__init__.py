"""
PuzzleBreak Answer Validation

Decides whether a player's free-text guess matches a puzzle's stored answer,
tolerating spelling noise and lexical synonyms.
"""

__version__ = "1.0.0"

from .core.config import get_config
from .core.exceptions import PuzzleBreakException

__all__ = [
    "get_config",
    "PuzzleBreakException",
]

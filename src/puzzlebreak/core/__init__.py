"""
Core Module

Configuration management and custom exceptions shared across the
application.
"""

from .config import get_config, AppConfig, ValidationConfig
from .exceptions import (
    PuzzleBreakException,
    ConfigurationError,
    AnswerNotFoundError,
    InvalidInputError,
    SynonymLookupError,
    DatabaseError,
)

__all__ = [
    "get_config",
    "AppConfig",
    "ValidationConfig",
    "PuzzleBreakException",
    "ConfigurationError",
    "AnswerNotFoundError",
    "InvalidInputError",
    "SynonymLookupError",
    "DatabaseError",
]

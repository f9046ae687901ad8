"""
Custom Exception Classes

Application-specific exception classes for answer validation, the
question/answer store and the synonym lookup service.
"""

from typing import Optional, Any, Dict


class PuzzleBreakException(Exception):
    """Base exception class for all PuzzleBreak errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(PuzzleBreakException):
    """Raised when configuration or stored answer data is unusable."""
    pass


class AnswerNotFoundError(ConfigurationError):
    """Raised when a question id does not resolve to a stored answer."""

    def __init__(self, question_id: str, **kwargs):
        super().__init__(f"No answer stored for question '{question_id}'", kwargs)
        self.question_id = question_id


class InvalidInputError(PuzzleBreakException):
    """Raised when a raw guess is not a string."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 invalid_value: Optional[Any] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name
        self.invalid_value = invalid_value


class SynonymLookupError(PuzzleBreakException):
    """Raised when the synonym lookup service fails or returns garbage."""

    def __init__(self, message: str, word: Optional[str] = None,
                 status_code: Optional[int] = None,
                 response_body: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.word = word
        self.status_code = status_code
        self.response_body = response_body


class DatabaseError(PuzzleBreakException):
    """Raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 table: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.operation = operation
        self.table = table


class CacheError(PuzzleBreakException):
    """Raised when cache operations fail."""

    def __init__(self, message: str, cache_key: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.cache_key = cache_key

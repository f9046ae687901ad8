"""
Answer Store Interface

Read-only contract the validation engine uses to resolve a question's
canonical answer and variants.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from puzzlebreak.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class StoredAnswer:
    """Canonical answer and accepted variants for one question."""
    question_id: str
    canonical_answer: str
    variants: FrozenSet[str] = field(default_factory=frozenset)


class AnswerStore(ABC):
    """Abstract source of stored answers."""

    @abstractmethod
    def get_answer(self, question_id: str) -> StoredAnswer:
        """
        Resolve the answer for a question.

        Raises:
            AnswerNotFoundError: If no answer is stored for the question
        """
        pass


def require_string_list(question_id: str, field_name: str, values: Iterable[str]) -> None:
    """Reject a bare string where a collection of answer strings is expected."""
    if isinstance(values, (str, bytes)):
        raise ConfigurationError(
            f"{field_name} must be a list of strings, not a single string",
            {"question_id": question_id, field_name: values}
        )

"""
In-Memory Answer Store

Dictionary-backed answer store for tests, fixtures and offline play.
"""

from typing import Dict, Iterable, Optional

from .base import AnswerStore, StoredAnswer, require_string_list
from puzzlebreak.core.exceptions import AnswerNotFoundError


class InMemoryAnswerStore(AnswerStore):
    """Answer store holding answers in a dict keyed by question id."""

    def __init__(self, answers: Optional[Iterable[StoredAnswer]] = None):
        self._answers: Dict[str, StoredAnswer] = {}
        for answer in answers or []:
            self._answers[answer.question_id] = answer

    def add(self, question_id: str, canonical_answer: str,
            variants: Iterable[str] = ()) -> StoredAnswer:
        require_string_list(question_id, "variants", variants)
        answer = StoredAnswer(question_id, canonical_answer, frozenset(variants))
        self._answers[question_id] = answer
        return answer

    def get_answer(self, question_id: str) -> StoredAnswer:
        try:
            return self._answers[question_id]
        except KeyError:
            raise AnswerNotFoundError(question_id) from None

    def __len__(self) -> int:
        return len(self._answers)
